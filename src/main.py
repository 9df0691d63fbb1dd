"""
Main FastAPI application for the Universal AI API Proxy.
"""

import logging
from contextlib import asynccontextmanager
from typing import Dict

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import APP_NAME, APP_VERSION, load_target_config
from .errors import ConfigurationError
from .routes import anthropic_router, gemini_router, info_router

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


API_DESCRIPTION = """
**Universal AI API Proxy** converts Claude and Gemini API requests to any
OpenAI-compatible chat completions endpoint.

## Features

- **Anthropic-compatible** `/v1/messages` endpoint format
- **Gemini-compatible** `/v1beta/models/{model}:generateContent` endpoint format
- Target model, provider and token ceiling configured via environment variables
- Tool/function calling support
- Real-time responses (no caching, no streaming)

## Authentication

The caller's API key is forwarded to the upstream provider unchanged. Supply it via
`Authorization: Bearer <key>`, `x-api-key` (Claude) or `x-goog-api-key` (Gemini).

## Configuration

`TARGET_MODEL`, `TARGET_PROVIDER`, `TARGET_BASE_URL` and `TARGET_MAX_TOKENS`.
See `/v1/config` for the resolved values.
"""

OPENAPI_TAGS = [
    {
        "name": "Anthropic Compatible",
        "description": "Anthropic Claude-compatible endpoints for messages and models.",
    },
    {
        "name": "Gemini Compatible",
        "description": "Google Gemini-compatible endpoints for content generation and models.",
    },
    {
        "name": "Configuration",
        "description": "Resolved proxy configuration.",
    },
    {
        "name": "Health",
        "description": "Health check and status endpoints.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Starting Universal AI API Proxy...")
    try:
        target = load_target_config()
        logger.info(
            f"Target: {target.provider_name} ({target.base_url}) | "
            f"Model: {target.model} | Max tokens: {target.max_tokens}"
        )
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e.message}")
    yield
    logger.info("Shutting down...")


app = FastAPI(
    title=APP_NAME,
    version=APP_VERSION,
    description=API_DESCRIPTION,
    lifespan=lifespan,
    redoc_url=None,
    openapi_tags=OPENAPI_TAGS,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", tags=["Health"])
async def health_check() -> Dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": APP_NAME}


app.include_router(info_router)
app.include_router(anthropic_router)
app.include_router(gemini_router)
