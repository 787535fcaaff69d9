"""Auth request/response schemas."""

from pydantic import BaseModel, EmailStr

from app.schemas.base import CamelModel


class RegisterRequest(BaseModel):
    name: str
    email: EmailStr
    password: str


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"


class UserResponse(CamelModel):
    id: str
    email: str
    name: str
    role: str
    created_at: str
