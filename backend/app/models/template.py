"""Template model — an entry in the shared resume template catalog."""

import uuid

from sqlalchemy import Boolean, Column, String, Text

from app.database import Base


class Template(Base):
    __tablename__ = "templates"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)
    preview_image = Column(String(512), nullable=True)
    is_premium = Column(Boolean, nullable=False, default=False)
