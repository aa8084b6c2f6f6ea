from typing import Any, List
import logging

from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.modules.user_management.schemas.user import User as UserSchema, UserCreate
from app.modules.user_management.services.user import (
    create_user, get_user_by_email, get_users, resolve_author
)

logger = logging.getLogger("app")

router = APIRouter()

@router.post("", response_model=UserSchema, status_code=status.HTTP_201_CREATED)
def register_user(
    *,
    db: Session = Depends(get_db),
    user_in: UserCreate,
) -> Any:
    """
    Register a user profile. Posts and comments copy its display fields.
    """
    if get_user_by_email(db, email=user_in.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="A user with this email already exists",
        )
    return create_user(db, user_in)

@router.get("", response_model=List[UserSchema])
def read_users(
    db: Session = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=200),
) -> Any:
    """
    Retrieve users.
    """
    return get_users(db, skip=skip, limit=limit)

@router.get("/{user_id}", response_model=UserSchema)
def read_user_by_id(
    user_id: str,
    db: Session = Depends(get_db),
) -> Any:
    """
    Get a specific user by id.
    """
    return resolve_author(db, user_id)
