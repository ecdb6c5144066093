"""FastAPI application with conversion and comments routes.

WHY: Non-Python clients need the same case conversion over HTTP, and
the project ships a minimal comments resource alongside it. FastAPI
provides request validation and automatic OpenAPI documentation.

HOW: A single FastAPI app exposes endpoints grouped by tags. Conversion
endpoints call the shared pipeline; comments endpoints delegate to a
module-level CommentStore and translate store failures into HTTP
errors.

RULES:
- Error responses use the ErrorResponse schema ({"detail": ...})
- GET /comments: 200 + list, 500 on store failure
- DELETE /comments/{id}: 200 + message, 404 if absent, 500 on store failure
- POST /convert/{style}: 404 for unknown styles, 422 for strict-mode errors
- The comment store is a singleton created at import time
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException

from case_converter import __version__
from case_converter.config import API_HOST, API_PORT
from case_converter.converters import convert
from case_converter.errors import CaseConversionError
from case_converter.server.comments import Comment, CommentStore
from case_converter.server.models import (
    CommentCreate,
    CommentResponse,
    ConvertRequest,
    ConvertResponse,
    ErrorResponse,
    HealthResponse,
    MessageResponse,
    StyleInfo,
)
from case_converter.styles import STYLES

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App and store setup
# ---------------------------------------------------------------------------

comment_store = CommentStore()

app = FastAPI(
    title="Case Converter API",
    description=(
        "Convert free-form text to kebab-case, dot.case, camelCase or "
        "PascalCase, and manage a minimal comments resource."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


def _comment_to_response(comment: Comment) -> CommentResponse:
    return CommentResponse(
        id=comment.id,
        body=comment.body,
        author=comment.author,
        created_at=comment.created_at,
    )


# ---------------------------------------------------------------------------
# Endpoints: Conversion
# ---------------------------------------------------------------------------


@app.post(
    "/convert/{style}",
    response_model=ConvertResponse,
    tags=["convert"],
    summary="Convert text to a case style",
    description=(
        "Tokenizes the input with the shared pipeline and renders it in the "
        "requested style. With throw_on_invalid, invalid input or options "
        "return 422 instead of an empty result."
    ),
    responses={
        404: {"model": ErrorResponse, "description": "Unknown style"},
        422: {"model": ErrorResponse, "description": "Invalid input or option (strict mode)"},
    },
)
async def convert_text(style: str, request: ConvertRequest) -> ConvertResponse:
    if style not in STYLES:
        raise HTTPException(
            status_code=404,
            detail="Unknown style '{}'. Available: {}".format(style, ", ".join(sorted(STYLES))),
        )
    try:
        result = convert(request.input, style, request.options)
    except CaseConversionError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return ConvertResponse(style=style, result=result)


@app.get(
    "/styles",
    response_model=List[StyleInfo],
    tags=["convert"],
    summary="List available case styles",
)
async def list_styles() -> List[StyleInfo]:
    result = []
    for key, style_cls in sorted(STYLES.items()):
        style = style_cls()
        result.append(StyleInfo(key=key, name=style.name, joiner=style.joiner))
    return result


# ---------------------------------------------------------------------------
# Endpoints: Comments
# ---------------------------------------------------------------------------


@app.get(
    "/comments",
    response_model=List[CommentResponse],
    tags=["comments"],
    summary="List all comments",
    responses={500: {"model": ErrorResponse, "description": "Store failure"}},
)
async def list_comments() -> List[CommentResponse]:
    try:
        comments = comment_store.list_comments()
    except Exception:
        logger.exception("Failed to fetch comments")
        raise HTTPException(status_code=500, detail="Failed to fetch comments")
    return [_comment_to_response(c) for c in comments]


@app.post(
    "/comments",
    response_model=CommentResponse,
    status_code=201,
    tags=["comments"],
    summary="Create a comment",
    responses={500: {"model": ErrorResponse, "description": "Store failure"}},
)
async def create_comment(request: CommentCreate) -> CommentResponse:
    try:
        comment = comment_store.create(request.body, author=request.author)
    except Exception:
        logger.exception("Failed to create comment")
        raise HTTPException(status_code=500, detail="Failed to create comment")
    return _comment_to_response(comment)


@app.delete(
    "/comments/{comment_id}",
    response_model=MessageResponse,
    tags=["comments"],
    summary="Delete a comment by ID",
    responses={
        404: {"model": ErrorResponse, "description": "Comment not found"},
        500: {"model": ErrorResponse, "description": "Store failure"},
    },
)
async def delete_comment(comment_id: str) -> MessageResponse:
    try:
        comment = comment_store.delete_by_id(comment_id)
    except Exception:
        logger.exception("Failed to delete comment %s", comment_id)
        raise HTTPException(status_code=500, detail="Failed to delete comment")
    if comment is None:
        raise HTTPException(status_code=404, detail="Comment not found")
    return MessageResponse(message="Comment deleted successfully")


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api() -> None:
    """Entry point for the case-converter-api console script."""
    import uvicorn
    uvicorn.run(app, host=API_HOST, port=API_PORT)
