from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint

from app.db.session import Base
from app.modules.user_management.models.user import utcnow

class PostLike(Base):
    """One member of a post's like set"""
    __tablename__ = "post_likes"
    __table_args__ = (UniqueConstraint("post_id", "user_id", name="uq_post_likes_post_user"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(String, ForeignKey("posts.id", ondelete="CASCADE"), index=True, nullable=False)
    # Not a foreign key: likes are keyed by whatever id the caller toggles with
    user_id = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow)
