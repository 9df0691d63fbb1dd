"""
Claude model names advertised by /v1/models.
All of them are served by the configured upstream model.
"""

from typing import List

SUPPORTED_MODELS: List[str] = [
    "claude-4.0",
    "claude-3.5-sonnet",
    "claude-3-sonnet",
    "claude-3-haiku",
    "claude-3-opus",
]
