from typing import List, Optional

from sqlalchemy.orm import Session

from app.modules.posts.models.post import Post
from app.modules.posts.services.post import list_posts, list_posts_by_author

ALL = "all"

def get_feed(
    db: Session,
    scope: str = ALL,
    skip: int = 0,
    limit: Optional[int] = None,
) -> List[Post]:
    """
    Posts for a feed, newest first.

    scope is either "all" for the global feed or an author id for that
    author's profile feed. An author with no posts gets an empty list,
    whether or not the author exists.
    """
    if scope == ALL:
        return list_posts(db, skip=skip, limit=limit)
    return list_posts_by_author(db, author_id=scope, skip=skip, limit=limit)
