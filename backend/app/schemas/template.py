"""Template request/response schemas."""

from typing import Optional

from app.schemas.base import CamelModel


class TemplateCreate(CamelModel):
    name: str
    description: Optional[str] = None
    preview_image: Optional[str] = None
    is_premium: bool = False


class TemplateUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    preview_image: Optional[str] = None
    is_premium: Optional[bool] = None


class TemplateSummary(CamelModel):
    """Display fields attached to resume listings."""

    id: str
    name: str
    preview_image: Optional[str] = None


class TemplateResponse(TemplateSummary):
    description: Optional[str] = None
    is_premium: bool = False
