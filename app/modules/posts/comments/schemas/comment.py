from typing import Optional
from pydantic import Field

from app.core.schemas import CamelModel

class CommentCreate(CamelModel):
    user_id: str
    comment_text: str = Field(..., min_length=1)

class Comment(CamelModel):
    """Comment embedded in a post; never edited once appended"""
    ordinal: int
    author_id: str
    author_first_name: str
    author_last_name: str
    author_picture_path: Optional[str] = None
    comment_text: str
