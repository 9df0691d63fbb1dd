"""API routers."""

from .anthropic import router as anthropic_router
from .gemini import router as gemini_router
from .info import router as info_router

__all__ = [
    "anthropic_router",
    "gemini_router",
    "info_router",
]
