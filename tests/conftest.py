import os

# Must be set before the app modules build their engine
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.main import app
from app.modules.posts.schemas.post import PostCreate
from app.modules.posts.services.post import create_post, get_post
from app.modules.user_management.schemas.user import UserCreate
from app.modules.user_management.services.user import create_user

API = "/api/v1"

@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def client():
    return TestClient(app)

@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make_user(**overrides):
        counter["n"] += 1
        fields = {
            "first_name": f"First{counter['n']}",
            "last_name": f"Last{counter['n']}",
            "email": f"user{counter['n']}@example.com",
            "location": "Lisbon",
            "picture_path": f"user{counter['n']}.png",
        }
        fields.update(overrides)
        return create_user(db, UserCreate(**fields))

    return _make_user

@pytest.fixture
def make_post(db):
    """Create a post, optionally backdating it to base + minutes"""
    base = datetime(2024, 1, 1, 12, 0, 0)

    def _make_post(author, description="hello", picture_path=None, minutes=None):
        post = create_post(
            db,
            PostCreate(user_id=author.id, description=description, picture_path=picture_path),
        )
        if minutes is not None:
            post.created_at = base + timedelta(minutes=minutes)
            db.commit()
            post = get_post(db, post.id)
        return post

    return _make_post
