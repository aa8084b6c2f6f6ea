import logging

from sqlalchemy.orm import Session

from app.modules.posts.comments.models.comment import PostComment
from app.modules.posts.models.post import Post
from app.modules.posts.services.post import get_post, update_post
from app.modules.user_management.services.user import resolve_author

logger = logging.getLogger(__name__)

def add_comment(db: Session, post_id: str, author_id: str, comment_text: str) -> Post:
    """
    Append a comment to the end of a post's comment ledger.

    The author is resolved first, so a bad author id fails before the post
    is even read. The author's name and picture are copied onto the comment.
    Identical comments are kept as separate entries.
    """
    author = resolve_author(db, author_id)
    post = get_post(db, post_id, lock=True)

    comment = PostComment(
        author_id=author.id,
        author_first_name=author.first_name,
        author_last_name=author.last_name,
        author_picture_path=author.picture_path,
        comment_text=comment_text,
    )
    updated = update_post(db, post_id, comments=[*post.comments, comment])
    logger.info(f"User {author.id} commented on post {post_id} (#{comment.ordinal})")
    return updated
