"""
Gemini model names advertised by /v1beta/models.
All of them are served by the configured upstream model.
"""

from typing import List

SUPPORTED_MODELS: List[str] = [
    "gemini-2.5-flash",
    "gemini-1.5-pro",
    "gemini-1.5-flash",
    "gemini-1.0-pro",
]
