"""Users router — registration."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.errors import ConflictError
from app.models.user import User
from app.schemas.auth import RegisterRequest, UserResponse
from app.middleware.auth import hash_password
from app.routers.auth import _user_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=201)
def register(req: RegisterRequest, db: Session = Depends(get_db)):
    """Register a new user. New accounts always get the ``user`` role."""
    email = req.email.lower()
    if db.query(User).filter(User.email == email).first():
        raise ConflictError("User already exists")

    user = User(
        email=email,
        password_hash=hash_password(req.password),
        role="user",
        name=req.name,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s", user.id)
    return _user_to_response(user)
