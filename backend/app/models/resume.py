"""Resume model — one user-owned resume document built on a template."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, Text, JSON

from app.database import Base


def utcnow() -> datetime:
    # Naive UTC: SQLite drops tzinfo on the way back, keep both sides comparable
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Resume(Base):
    __tablename__ = "resumes"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    owner_id = Column(String(36), nullable=False, index=True)
    # No FK: deleting a template leaves its resumes pointing at a missing id
    template_id = Column(String(36), nullable=False)
    name = Column(String(255), nullable=False)

    # Document sections, stored as JSON exactly as validated
    personal_info = Column(JSON, nullable=False)        # {fullName, email, phone, address, linkedin, website}
    summary = Column(Text, nullable=True)
    education = Column(JSON, nullable=False, default=list)
    experience = Column(JSON, nullable=False, default=list)
    skills = Column(JSON, nullable=False, default=list)
    certifications = Column(JSON, nullable=False, default=list)
    languages = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, index=True)
