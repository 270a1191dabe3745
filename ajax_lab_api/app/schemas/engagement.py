"""
Pydantic schemas for likes and comments.

Both live only in process memory; see
``services.engagement_service.EngagementState``.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class Comment(BaseModel):
    id: int = Field(..., description="1‑based position in the comment list")
    text: str
    timestamp: datetime


class CommentCreate(BaseModel):
    """Body of ``POST /comment``.  Blank text is rejected by the service."""

    comment: Optional[Any] = None


class LikesRead(BaseModel):
    likes: int


class CommentList(BaseModel):
    comments: List[Comment]


class CommentAdded(BaseModel):
    success: bool = True
    message: str = "Comment added"
    comments: List[Comment]
