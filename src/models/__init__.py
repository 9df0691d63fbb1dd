"""Advertised model catalogs."""

from .claude import SUPPORTED_MODELS as CLAUDE_MODELS
from .gemini import SUPPORTED_MODELS as GEMINI_MODELS
from .helpers import (
    build_claude_model_list,
    build_gemini_model_list,
)

__all__ = [
    "CLAUDE_MODELS",
    "GEMINI_MODELS",
    "build_claude_model_list",
    "build_gemini_model_list",
]
