from typing import Any, List, Literal, Optional, Union
import logging

from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.session import get_db
from app.modules.home_feed.services.feed import ALL, get_feed
from app.modules.posts.schemas.post import Post as PostSchema, PostCreate
from app.modules.posts.services.post import (
    create_post, create_post_and_list, delete_post, get_post
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="")

@router.post(
    "",
    response_model=Union[List[PostSchema], PostSchema],
    status_code=status.HTTP_201_CREATED,
)
def create_new_post(
    *,
    db: Session = Depends(get_db),
    post_in: PostCreate,
    respond_with: Literal["feed", "post"] = Query(
        "feed", description="Return the refreshed global feed or only the new post"
    ),
) -> Any:
    """
    Create a new post. By default the response is the whole feed, newest first.
    """
    if respond_with == "post":
        return create_post(db, post_in)
    return create_post_and_list(db, post_in)

@router.get("", response_model=List[PostSchema])
def read_feed(
    db: Session = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1, le=settings.FEED_PAGE_LIMIT_MAX),
) -> Any:
    """
    Global feed, newest first.
    """
    return get_feed(db, ALL, skip=skip, limit=limit)

@router.get("/{user_id}/posts", response_model=List[PostSchema])
def read_user_feed(
    user_id: str,
    db: Session = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1, le=settings.FEED_PAGE_LIMIT_MAX),
) -> Any:
    """
    Posts by one user, newest first.
    """
    return get_feed(db, user_id, skip=skip, limit=limit)

@router.get("/{post_id}", response_model=PostSchema)
def read_post_by_id(
    post_id: str,
    db: Session = Depends(get_db),
) -> Any:
    """
    Get post by ID.
    """
    return get_post(db, post_id)

@router.delete("/{post_id}", response_model=PostSchema)
def delete_post_by_id(
    post_id: str,
    user_id: str = Query(..., alias="userId"),
    db: Session = Depends(get_db),
) -> Any:
    """
    Delete a post together with its likes and comments. Only the author may do this.
    """
    return delete_post(db, post_id, user_id)
