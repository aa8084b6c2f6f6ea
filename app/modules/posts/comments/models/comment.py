from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey, UniqueConstraint

from app.db.session import Base
from app.modules.user_management.models.user import utcnow

class PostComment(Base):
    __tablename__ = "post_comments"
    __table_args__ = (UniqueConstraint("post_id", "ordinal", name="uq_post_comments_post_ordinal"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(String, ForeignKey("posts.id", ondelete="CASCADE"), index=True, nullable=False)
    # Position in the post's ledger, starting at 0
    ordinal = Column(Integer, nullable=False)
    author_id = Column(String, ForeignKey("users.id"), nullable=False)
    # Author display fields frozen at comment time
    author_first_name = Column(String, nullable=False)
    author_last_name = Column(String, nullable=False)
    author_picture_path = Column(String, nullable=True)
    comment_text = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utcnow)
