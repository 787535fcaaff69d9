"""Record store lookups shared by the services.

Identifiers are UUID strings. A malformed id can never match a record, so it
is reported exactly like an absent one.
"""

import uuid
from typing import Optional, TypeVar

from sqlalchemy.orm import Session

from app.database import Base

RecordT = TypeVar("RecordT", bound=Base)


def parse_id(value) -> Optional[str]:
    """Return the canonical form of a record id, or None if it is malformed."""
    if not isinstance(value, str):
        return None
    try:
        return str(uuid.UUID(value))
    except ValueError:
        return None


def get_by_id(db: Session, model: type[RecordT], record_id) -> Optional[RecordT]:
    canonical = parse_id(record_id)
    if canonical is None:
        return None
    return db.query(model).filter(model.id == canonical).first()
