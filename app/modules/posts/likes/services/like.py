import logging

from sqlalchemy.orm import Session

from app.modules.posts.models.post import Post
from app.modules.posts.services.post import update_post

logger = logging.getLogger(__name__)

def toggle_like(db: Session, post_id: str, user_id: str) -> Post:
    """
    Flip user_id's membership in the post's like set and return the post.

    The membership test runs inside the write against the stored like rows,
    so toggles racing on the same post cannot undo each other's work.
    """
    updated = update_post(db, post_id, toggle_likes=[user_id])
    logger.info(
        f"User {user_id} {'liked' if user_id in updated.like_set else 'unliked'} post {post_id} "
        f"({len(updated.like_rows)} likes)"
    )
    return updated
