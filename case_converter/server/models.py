"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: Each endpoint has its own model. Conversion input and options are
deliberately typed loosely (Any / dict): the pipeline's own tolerant or
strict validation decides what they mean, exactly as for Python callers.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Error responses share the ErrorResponse schema ({"detail": ...})
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------


class ConvertRequest(BaseModel):
    """Text to convert plus pipeline options.

    RULES:
    - input may be a string, a list of strings, or null
    - options accepts snake_case or camelCase keys
    """

    input: Any = Field(
        default=None,
        description="A string or list of strings. Lists are joined with one space.",
    )
    options: Dict[str, Any] = Field(
        default_factory=dict,
        description=(
            "Conversion options: normalize_diacritics, locale, throw_on_invalid, "
            "preserve_numbers, preserve_acronyms, pascal_case."
        ),
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "input": "XML_http_request",
                "options": {"preserve_acronyms": True, "pascal_case": True},
            }
        ]
    }}


class ConvertResponse(BaseModel):
    style: str = Field(description="Style key the input was converted to.")
    result: str = Field(description="Converted text (empty for empty or invalid input).")


class StyleInfo(BaseModel):
    """Description of an available case style."""

    key: str = Field(description="Style identifier used in /convert/{style}.")
    name: str = Field(description="Human-readable style name.")
    joiner: str = Field(description="Character placed between words ('' for camel styles).")


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


class CommentCreate(BaseModel):
    body: str = Field(min_length=1, description="Comment text.")
    author: Optional[str] = Field(default=None, description="Optional author display name.")


class CommentResponse(BaseModel):
    id: str = Field(description="Unique comment identifier.")
    body: str = Field(description="Comment text.")
    author: Optional[str] = Field(default=None, description="Author display name, if given.")
    created_at: float = Field(description="Creation timestamp (Unix epoch seconds).")


class MessageResponse(BaseModel):
    message: str = Field(description="Human-readable confirmation.")


# ---------------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------------


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})

