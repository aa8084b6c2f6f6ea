from typing import Optional
from datetime import datetime
from pydantic import EmailStr, Field

from app.core.schemas import CamelModel

class UserBase(CamelModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    location: Optional[str] = None
    occupation: Optional[str] = None
    picture_path: Optional[str] = None

class UserCreate(UserBase):
    pass

class User(UserBase):
    """User profile returned to client"""
    id: str
    created_at: datetime
    updated_at: datetime
