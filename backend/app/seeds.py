"""Seed the database.

Usage:
  resume-builder-seed templates                     # replace the template catalog
  resume-builder-seed admin <email> <password> <name>  # create or promote an admin
"""

import logging
import sys
from typing import Optional

from sqlalchemy.orm import Session

from app.config import configure_logging, settings
from app.database import Database
from app.middleware.auth import hash_password
from app.models.user import User
from app.services.template_service import seed_default_templates

logger = logging.getLogger(__name__)

USAGE = __doc__


def seed_admin(db: Session, email: str, password: str, name: str) -> User:
    """Create an admin account, or promote an existing user with that email."""
    email = email.lower()
    user = db.query(User).filter(User.email == email).first()
    if user:
        user.role = "admin"
        logger.info("Promoted %s to admin", email)
    else:
        user = User(email=email, password_hash=hash_password(password), role="admin", name=name)
        db.add(user)
        logger.info("Created admin %s", email)
    db.commit()
    db.refresh(user)
    return user


def main(argv: Optional[list[str]] = None, database: Optional[Database] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    configure_logging(settings.LOG_LEVEL)

    command = argv[0] if argv else ""
    if command not in ("templates", "admin") or (command == "admin" and len(argv) != 4):
        print(USAGE)
        return 2

    database = database or Database(settings.DATABASE_URL)
    database.create_all()
    with database.SessionLocal() as db:
        if command == "templates":
            for t in seed_default_templates(db, replace=True):
                print(f"  ✓ {t.name} ({t.id})")
        else:
            user = seed_admin(db, *argv[1:])
            print(f"  ✓ admin {user.email} ({user.id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
