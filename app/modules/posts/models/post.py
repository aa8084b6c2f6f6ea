from typing import Dict, FrozenSet

from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.modules.posts.comments.models.comment import PostComment
from app.modules.posts.likes.models.like import PostLike
from app.modules.user_management.models.user import utcnow

class Post(Base):
    __tablename__ = "posts"

    id = Column(String, primary_key=True, index=True)
    # Insertion ordinal, breaks created_at ties in the feed
    seq = Column(Integer, unique=True, nullable=False)
    author_id = Column(String, ForeignKey("users.id"), index=True, nullable=False)

    # Snapshot of the author's profile when the post was created
    author_first_name = Column(String, nullable=False)
    author_last_name = Column(String, nullable=False)
    author_location = Column(String, nullable=True)
    author_picture_path = Column(String, nullable=True)

    description = Column(Text, nullable=False)
    picture_path = Column(String, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)

    like_rows = relationship(
        PostLike,
        cascade="all, delete-orphan",
        order_by=PostLike.id,
    )
    comments = relationship(
        PostComment,
        cascade="all, delete-orphan",
        order_by=PostComment.ordinal,
    )

    @property
    def like_set(self) -> FrozenSet[str]:
        """Ids of the users who currently like this post"""
        return frozenset(row.user_id for row in self.like_rows)

    @property
    def likes(self) -> Dict[str, bool]:
        # Wire shape: presence map keyed by user id
        return {row.user_id: True for row in self.like_rows}
