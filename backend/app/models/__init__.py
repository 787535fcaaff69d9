"""SQLAlchemy ORM models."""

from app.models.user import User
from app.models.template import Template
from app.models.resume import Resume

__all__ = [
    "User",
    "Template",
    "Resume",
]
