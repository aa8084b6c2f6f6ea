"""
Post store.

Owns every read and write of the posts table and the like/comment rows
hanging off it. Likes and comments are only ever written through
update_post: likes as single-member changes against the stored rows,
comments as appends checked against the ledger as it stands.
"""

from typing import Iterable, List, Optional, Sequence
import logging

from sqlalchemy import delete, exists, func, insert
from sqlalchemy.orm import Query, Session, selectinload

from app.core.exceptions import NotFound, PermissionDenied, StoreFault
from app.core.ids import new_id
from app.db.session import store_write
from app.modules.posts.comments.models.comment import PostComment
from app.modules.posts.likes.models.like import PostLike
from app.modules.posts.models.post import Post
from app.modules.posts.schemas.post import AuthorSnapshot, PostCreate, Post as PostSchema
from app.modules.user_management.services.user import resolve_author

logger = logging.getLogger(__name__)

def _post_query(db: Session) -> Query:
    return db.query(Post).options(
        selectinload(Post.like_rows),
        selectinload(Post.comments),
    )

def _newest_first(query: Query) -> Query:
    # Equal timestamps keep insertion order
    return query.order_by(Post.created_at.desc(), Post.seq.asc())

def _page(query: Query, skip: int, limit: Optional[int]) -> Query:
    if skip:
        query = query.offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query

def get_post(db: Session, post_id: str, lock: bool = False) -> Post:
    """
    Get post by ID, raising NotFound if there is none.

    With lock=True the row stays locked (SELECT ... FOR UPDATE) until the
    current transaction ends.
    """
    query = _post_query(db).filter(Post.id == post_id).populate_existing()
    if lock:
        query = query.with_for_update(of=Post)
    post = query.first()
    if not post:
        raise NotFound("Post not found")
    return post

def list_posts(db: Session, skip: int = 0, limit: Optional[int] = None) -> List[Post]:
    """All posts, newest first"""
    logger.debug(f"Listing posts with skip={skip}, limit={limit}")
    return _page(_newest_first(_post_query(db)), skip, limit).all()

def list_posts_by_author(
    db: Session, author_id: str, skip: int = 0, limit: Optional[int] = None
) -> List[Post]:
    """Posts by one author, newest first"""
    logger.debug(f"Listing posts for author {author_id} with skip={skip}, limit={limit}")
    query = _post_query(db).filter(Post.author_id == author_id)
    return _page(_newest_first(query), skip, limit).all()

def _next_seq(db: Session) -> int:
    return (db.query(func.max(Post.seq)).scalar() or 0) + 1

def create_post(db: Session, post_in: PostCreate) -> Post:
    """
    Create a post for post_in.user_id and return it.

    The author's display fields are copied onto the post; later profile
    edits do not reach it.
    """
    author = resolve_author(db, post_in.user_id)
    snapshot = AuthorSnapshot.model_validate(author)

    post = Post(
        id=new_id(),
        author_id=author.id,
        author_first_name=snapshot.first_name,
        author_last_name=snapshot.last_name,
        author_location=snapshot.location,
        author_picture_path=snapshot.picture_path,
        description=post_in.description,
        picture_path=post_in.picture_path,
    )
    with store_write(db, "create post"):
        post.seq = _next_seq(db)
        db.add(post)
    logger.info(f"Created post {post.id} for author {author.id}")
    return get_post(db, post.id)

def create_post_and_list(db: Session, post_in: PostCreate) -> List[Post]:
    """Create a post, then return the refreshed global feed"""
    create_post(db, post_in)
    return list_posts(db)

def _has_like(db: Session, post_id: str, user_id: str) -> bool:
    return db.query(
        exists().where(PostLike.post_id == post_id, PostLike.user_id == user_id)
    ).scalar()

def _insert_like(db: Session, post_id: str, user_id: str) -> None:
    db.execute(insert(PostLike).values(post_id=post_id, user_id=user_id))

def _delete_like(db: Session, post_id: str, user_id: str) -> int:
    result = db.execute(
        delete(PostLike)
        .where(PostLike.post_id == post_id, PostLike.user_id == user_id)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount

def _change_likes(
    db: Session,
    post_id: str,
    add: Iterable[str],
    remove: Iterable[str],
    toggle: Iterable[str],
) -> None:
    # Each member is tested and written against the stored rows, never
    # against a like set read earlier in the request.
    for user_id in sorted(set(remove)):
        _delete_like(db, post_id, user_id)
    for user_id in sorted(set(toggle)):
        if not _delete_like(db, post_id, user_id):
            _insert_like(db, post_id, user_id)
    for user_id in sorted(set(add)):
        if not _has_like(db, post_id, user_id):
            _insert_like(db, post_id, user_id)

def _append_comments(post: Post, comments: Sequence[PostComment]) -> None:
    existing = list(post.comments)
    if len(comments) < len(existing) or any(
        new is not old for new, old in zip(comments, existing)
    ):
        raise StoreFault("Comments are append-only")
    for ordinal in range(len(existing), len(comments)):
        comment = comments[ordinal]
        comment.ordinal = ordinal
        post.comments.append(comment)

def update_post(
    db: Session,
    post_id: str,
    *,
    add_likes: Iterable[str] = (),
    remove_likes: Iterable[str] = (),
    toggle_likes: Iterable[str] = (),
    comments: Optional[Sequence[PostComment]] = None,
) -> Post:
    """
    Write the named fields of a post and return it as stored.

    Likes change one member at a time: add_likes and remove_likes set
    membership, toggle_likes flips it. Members not named keep their state,
    so a like committed by another request is never dropped.

    comments must be the post's current comments followed by the new ones;
    existing entries are never touched. If another request appended first
    the write is refused with StoreFault. Fields left out are not written.
    """
    post = get_post(db, post_id, lock=True)
    with store_write(db, "update post"):
        _change_likes(db, post_id, add_likes, remove_likes, toggle_likes)
        if comments is not None:
            _append_comments(post, comments)
    return get_post(db, post_id)

def delete_post(db: Session, post_id: str, user_id: str) -> PostSchema:
    """
    Delete a post and all of its likes and comments.
    Only the author may delete it. Returns the post as it was.
    """
    post = get_post(db, post_id, lock=True)
    if post.author_id != user_id:
        db.rollback()
        raise PermissionDenied("Not enough permissions")

    deleted = PostSchema.model_validate(post)
    with store_write(db, "delete post"):
        db.delete(post)
    logger.info(f"Deleted post {post_id}")
    return deleted
