"""Auth router — login and current user info."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.config import Settings
from app.database import get_db
from app.errors import ValidationError, Violation
from app.models.user import User
from app.schemas.auth import LoginRequest, TokenResponse, UserResponse
from app.schemas.base import utc_isoformat
from app.middleware.auth import (
    verify_password,
    create_access_token,
    get_current_user,
    get_settings,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
        created_at=utc_isoformat(user.created_at),
    )


@router.post("", response_model=TokenResponse)
def login(
    req: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Login and get JWT token."""
    user = db.query(User).filter(User.email == req.email.lower()).first()
    if not user or not verify_password(req.password, user.password_hash):
        logger.info("Failed login for %s", req.email)
        raise ValidationError([Violation(field="email", msg="Invalid credentials")])

    token = create_access_token({"sub": user.id, "role": user.role}, settings)
    return TokenResponse(access_token=token)


@router.get("", response_model=UserResponse)
def get_me(current_user: User = Depends(get_current_user)):
    """Get current user info."""
    return _user_to_response(current_user)
