# Import all models here so Alembic can detect them
from app.db.session import Base

from app.modules.user_management.models.user import User
from app.modules.posts.models.post import Post
from app.modules.posts.comments.models.comment import PostComment
from app.modules.posts.likes.models.like import PostLike
