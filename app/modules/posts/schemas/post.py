from typing import Dict, List, Optional
from datetime import datetime
from pydantic import Field

from app.core.schemas import CamelModel
from app.modules.posts.comments.schemas.comment import Comment

class PostCreate(CamelModel):
    user_id: str
    description: str = Field(..., min_length=1)
    picture_path: Optional[str] = None

class AuthorSnapshot(CamelModel):
    """Author display fields copied onto a post at creation time"""
    first_name: str
    last_name: str
    location: Optional[str] = None
    picture_path: Optional[str] = None

class Post(CamelModel):
    """Post returned to client"""
    id: str
    author_id: str
    author_first_name: str
    author_last_name: str
    author_location: Optional[str] = None
    author_picture_path: Optional[str] = None
    description: str
    picture_path: Optional[str] = None
    likes: Dict[str, bool] = {}
    comments: List[Comment] = []
    created_at: datetime
