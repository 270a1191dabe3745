"""
Likes and comments endpoints for API v1.

A Facebook‑style example of updating part of a page without a reload.
State is kept in memory by ``EngagementState`` and is lost when the
server restarts.
"""

from fastapi import APIRouter, Depends

from ajax_lab_api.app.api.deps import body_as, get_engagement_state
from ajax_lab_api.app.schemas.engagement import CommentAdded, CommentCreate, CommentList, LikesRead
from ajax_lab_api.app.services.engagement_service import EngagementState

router = APIRouter()


@router.get("/likes", response_model=LikesRead)
async def get_likes(state: EngagementState = Depends(get_engagement_state)) -> LikesRead:
    return LikesRead(likes=state.get_likes())


@router.post("/like", response_model=LikesRead)
async def add_like(state: EngagementState = Depends(get_engagement_state)) -> LikesRead:
    """Increment the like counter and return the new total."""
    return LikesRead(likes=state.increment_like())


@router.get("/comments", response_model=CommentList)
async def list_comments(state: EngagementState = Depends(get_engagement_state)) -> CommentList:
    return CommentList(comments=state.list_comments())


@router.post("/comment", response_model=CommentAdded)
async def add_comment(
    payload: CommentCreate = Depends(body_as(CommentCreate)),
    state: EngagementState = Depends(get_engagement_state),
) -> CommentAdded:
    """Append a comment and return the whole list.  Blank text yields HTTP 400."""
    return CommentAdded(comments=state.add_comment(payload.comment))
