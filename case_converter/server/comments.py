"""In-memory comments store.

WHY: The comments routes need a small persistence collaborator with a
create / list / get / delete-by-id contract. An in-memory store is
sufficient for a single-process service and keeps the HTTP layer
testable without a database.

HOW: Comment is a dataclass; CommentStore keeps them in a dict keyed by
ID and guards every access with a threading.Lock, so concurrent FastAPI
handlers see a consistent view.

RULES:
- Comment IDs are uuid4 hex strings generated at creation time
- list_comments() returns a new list, oldest first
- get()/delete_by_id() return None for unknown IDs (no exceptions)
- Creating beyond max_comments raises CommentStoreError
"""

from __future__ import annotations

import logging
import threading
import time
import uuid
from dataclasses import dataclass
from typing import Dict, List, Optional

from case_converter.config import MAX_COMMENTS
from case_converter.errors import CommentStoreError

logger = logging.getLogger(__name__)


@dataclass
class Comment:
    """A single stored comment.

    RULES:
    - id: uuid4 hex, immutable after creation
    - body: non-empty comment text
    - author: optional display name
    - created_at: epoch timestamp when the comment was stored
    """

    id: str
    body: str
    created_at: float
    author: Optional[str] = None


class CommentStore:
    """Thread-safe dict-backed store for comments."""

    def __init__(self, max_comments: int = MAX_COMMENTS) -> None:
        self._comments: Dict[str, Comment] = {}
        self._lock = threading.Lock()
        self.max_comments = max_comments

    def create(self, body: str, author: Optional[str] = None) -> Comment:
        with self._lock:
            if len(self._comments) >= self.max_comments:
                raise CommentStoreError(
                    "Maximum number of comments ({}) reached".format(self.max_comments)
                )
            comment = Comment(
                id=uuid.uuid4().hex,
                body=body,
                author=author,
                created_at=time.time(),
            )
            self._comments[comment.id] = comment

        logger.info("Created comment %s", comment.id)
        return comment

    def get(self, comment_id: str) -> Optional[Comment]:
        with self._lock:
            return self._comments.get(comment_id)

    def list_comments(self) -> List[Comment]:
        """Snapshot of all comments ordered by creation time (oldest first)."""
        with self._lock:
            return sorted(self._comments.values(), key=lambda c: c.created_at)

    def delete_by_id(self, comment_id: str) -> Optional[Comment]:
        """Remove a comment and return it, or None if it did not exist."""
        with self._lock:
            comment = self._comments.pop(comment_id, None)

        if comment is not None:
            logger.info("Deleted comment %s", comment_id)
        return comment

    def clear(self) -> None:
        with self._lock:
            self._comments.clear()
