"""
Helper functions for building model listings.
"""

from typing import Any, Dict, List

from ..config import ProviderConfig
from .claude import SUPPORTED_MODELS as CLAUDE_MODELS
from .gemini import SUPPORTED_MODELS as GEMINI_MODELS


def build_claude_model_list(target: ProviderConfig) -> Dict[str, Any]:
    """
    Build the /v1/models listing.

    Args:
        target: Resolved upstream provider

    Returns:
        OpenAI-style model list annotated with the serving target
    """
    models: List[Dict[str, Any]] = [
        {
            "id": model,
            "object": "model",
            "provider": target.provider_name,
            "max_tokens": target.max_tokens,
            "target_model": target.model,
        }
        for model in CLAUDE_MODELS
    ]
    return {"object": "list", "data": models}


def build_gemini_model_list(target: ProviderConfig) -> Dict[str, Any]:
    """
    Build the /v1beta/models listing.

    Args:
        target: Resolved upstream provider

    Returns:
        Gemini-style model list annotated with the serving target
    """
    models: List[Dict[str, Any]] = [
        {
            "name": f"models/{model}",
            "displayName": model,
            "description": f"{model} model proxied through {target.provider_name}",
            "inputTokenLimit": target.max_tokens,
            "outputTokenLimit": target.max_tokens,
            "supportedGenerationMethods": ["generateContent"],
            "target_model": target.model,
        }
        for model in GEMINI_MODELS
    ]
    return {"models": models}
