"""
In‑memory likes and comments.

``EngagementState`` keeps a like counter and a comment list for the
lifetime of the process.  Nothing is persisted: restarting the server
resets both, which is the documented behaviour of the demo.

Endpoints may run on the event loop or in the worker thread pool, so
every read and mutation goes through a ``threading.Lock``.  The lock is
only held for the in‑memory update, never across I/O.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import List

from ajax_lab_api.app.core.exceptions import ValidationError
from ajax_lab_api.app.schemas.engagement import Comment

EMPTY_COMMENT = "Comment cannot be empty"


class EngagementState:
    """Process‑lifetime like counter and comment list."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._likes = 0
        self._comments: List[Comment] = []
        self._log = logging.getLogger(__name__)

    def increment_like(self) -> int:
        """Add one like and return the new total."""
        with self._lock:
            self._likes += 1
            likes = self._likes
        self._log.info("Like added. Total likes: %d", likes)
        return likes

    def get_likes(self) -> int:
        with self._lock:
            return self._likes

    def add_comment(self, text) -> List[Comment]:
        """Append a comment and return every comment, oldest first.

        Raises ``ValidationError`` for missing or blank text; the list is
        left untouched in that case.
        """
        if not isinstance(text, str) or not text.strip():
            raise ValidationError(EMPTY_COMMENT)
        text = text.strip()
        with self._lock:
            comment = Comment(
                id=len(self._comments) + 1,
                text=text,
                timestamp=datetime.now(timezone.utc),
            )
            self._comments.append(comment)
            comments = list(self._comments)
        self._log.info("Comment %d added: %r", comment.id, text)
        return comments

    def list_comments(self) -> List[Comment]:
        with self._lock:
            return list(self._comments)
