from typing import Any

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.modules.posts.comments.schemas.comment import CommentCreate
from app.modules.posts.comments.services.comment import add_comment
from app.modules.posts.schemas.post import Post as PostSchema

router = APIRouter()

@router.patch("", response_model=PostSchema)
def create_new_comment(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to comment on"),
    comment_in: CommentCreate,
) -> Any:
    """Append a comment to a post and return the updated post"""
    return add_comment(db, post_id, comment_in.user_id, comment_in.comment_text)
