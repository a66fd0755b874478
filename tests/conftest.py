"""
Test configuration and fixtures.

Every test gets a fresh in-memory SQLite database; the app's get_session
dependency is overridden to hand out the test session.
"""

import os
import uuid

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTH_JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from medilink.core.config import get_settings
from medilink.database import enable_sqlite_foreign_keys, get_session
from medilink.main import app
from medilink.models.page import Page
from medilink.models.user import User


@pytest.fixture
def session():
    """Session bound to a throwaway in-memory database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def client(session: Session):
    """Test client fixture sharing the test session."""

    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_token(user_id: uuid.UUID, email: str, **claims) -> str:
    settings = get_settings()
    payload = {"sub": str(user_id), "email": email, **claims}
    return jwt.encode(payload, settings.AUTH_JWT_SECRET, algorithm=settings.AUTH_JWT_ALG)


@pytest.fixture
def make_user(session: Session):
    def _make(
        username: str | None = None,
        is_admin: bool = False,
        email: str | None = None,
        name: str = "Test User",
    ) -> User:
        user = User(
            id=uuid.uuid4(),
            email=email or f"{uuid.uuid4().hex[:10]}@example.com",
            name=name,
            username=username,
            is_admin=is_admin,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make


@pytest.fixture
def make_page(session: Session):
    def _make(user: User, **fields) -> Page:
        page = Page(user_id=user.id, **fields)
        session.add(page)
        session.commit()
        session.refresh(page)
        return page

    return _make


@pytest.fixture
def auth_headers():
    """Bearer headers carrying a signed session token for `user`."""

    def _headers(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {make_token(user.id, user.email)}"}

    return _headers


@pytest.fixture
def owner(make_user, make_page):
    """A user who already has a page."""
    user = make_user(username="owner")
    make_page(user)
    return user
