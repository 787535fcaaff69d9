"""Shared fixtures: a fresh app over an in-memory database per test."""

import os
import sys

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from app.config import Settings
from app.database import Database
from app.main import create_app
from app.middleware.auth import create_access_token, hash_password
from app.models.template import Template
from app.models.user import User


@pytest.fixture
def settings():
    return Settings(DATABASE_URL="sqlite://", SECRET_KEY="test-secret", LOG_LEVEL="WARNING")


@pytest.fixture
def app(settings):
    return create_app(settings, Database(settings.DATABASE_URL))


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(client, app):
    """A session on the app's database (tables exist once the client started)."""
    session = app.state.db.SessionLocal()
    try:
        yield session
    finally:
        session.close()


def make_user(db, email: str, role: str = "user", password: str = "secret123") -> User:
    user = User(email=email, password_hash=hash_password(password), role=role, name=email.split("@")[0])
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_template(db, name: str, **fields) -> Template:
    template = Template(name=name, **fields)
    db.add(template)
    db.commit()
    db.refresh(template)
    return template


@pytest.fixture
def headers_for(settings):
    def _headers(user: User) -> dict:
        token = create_access_token({"sub": user.id, "role": user.role}, settings)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def user(db):
    return make_user(db, "owner@mail.com")


@pytest.fixture
def other_user(db):
    return make_user(db, "intruder@mail.com")


@pytest.fixture
def admin(db):
    return make_user(db, "admin@mail.com", role="admin")


@pytest.fixture
def template(db):
    return make_template(
        db,
        "ModernTemplate",
        description="A clean, contemporary design.",
        preview_image="/images/templates/modern.jpg",
        is_premium=False,
    )
