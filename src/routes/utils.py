"""Shared utility functions for route handlers."""

import json
import logging
from typing import Any, Dict, Type, TypeVar

from fastapi import Request, Response
from pydantic import BaseModel, ValidationError

from ..errors import MalformedInputError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def json_response(content: Dict[str, Any], status_code: int = 200) -> Response:
    """Serialize a dict into a JSON response."""
    return Response(
        content=json.dumps(content),
        status_code=status_code,
        media_type="application/json",
    )


async def parse_json_body(request: Request) -> Dict[str, Any]:
    """
    Read and parse the request body as a JSON object.

    Raises:
        MalformedInputError: If the body is empty, not JSON, or not an object
    """
    body = await request.body()
    try:
        data = json.loads(body.decode("utf-8")) if body else None
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedInputError(f"Invalid JSON in request body: {e}") from e

    if not isinstance(data, dict):
        raise MalformedInputError("Request body must be a JSON object")
    return data


def validate_body(schema: Type[SchemaT], data: Dict[str, Any]) -> SchemaT:
    """
    Validate a parsed body against a request schema.

    Raises:
        MalformedInputError: If a required field is missing or has the wrong type
    """
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise MalformedInputError(f"Invalid request body: {details}") from e


def log_token_cap(requested: Any, ceiling: int) -> None:
    """Warn when a requested token budget exceeds the provider ceiling."""
    if isinstance(requested, int) and requested > ceiling:
        logger.warning(f"Capping max_tokens from {requested} to {ceiling}")
