from typing import Any

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.modules.posts.likes.schemas.like import LikeToggle
from app.modules.posts.likes.services.like import toggle_like
from app.modules.posts.schemas.post import Post as PostSchema

router = APIRouter()

@router.patch("", response_model=PostSchema)
def toggle_post_like(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to like or unlike"),
    like_in: LikeToggle,
) -> Any:
    """Like the post, or take the like back if the user already likes it"""
    return toggle_like(db, post_id, like_in.user_id)
