from typing import List, Optional
import logging

from sqlalchemy.orm import Session

from app.core.exceptions import InvalidReference, NotFound
from app.core.ids import is_valid_id, new_id
from app.db.session import store_write
from app.modules.user_management.models.user import User
from app.modules.user_management.schemas.user import UserCreate

logger = logging.getLogger(__name__)

def get_user(db: Session, user_id: str) -> Optional[User]:
    """Get user by ID"""
    return db.query(User).filter(User.id == user_id).first()

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Get user by email"""
    return db.query(User).filter(User.email == email).first()

def get_users(db: Session, skip: int = 0, limit: int = 100) -> List[User]:
    """Get list of users"""
    return db.query(User).order_by(User.created_at).offset(skip).limit(limit).all()

def create_user(db: Session, user_in: UserCreate) -> User:
    """Register a new user profile"""
    user = User(id=new_id(), **user_in.model_dump())
    with store_write(db, "create user"):
        db.add(user)
    db.refresh(user)
    logger.info(f"Created user {user.id}")
    return user

def resolve_author(db: Session, author_id: str) -> User:
    """
    Look up the user an author id refers to.

    Raises InvalidReference for a malformed id and NotFound when no such
    user exists. Nothing is written either way.
    """
    if not is_valid_id(author_id):
        raise InvalidReference(f"Invalid userId: {author_id!r}")
    user = get_user(db, user_id=author_id)
    if not user:
        raise NotFound("User not found")
    return user
