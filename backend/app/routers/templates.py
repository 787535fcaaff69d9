"""Templates router — public catalog reads, admin-only mutations."""

from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.template import Template
from app.models.user import User
from app.schemas.resume import MessageResponse
from app.schemas.template import TemplateCreate, TemplateResponse, TemplateUpdate
from app.middleware.auth import require_admin
from app.middleware.body import json_body, request_body
from app.services import template_service
from app.services.validation import TEMPLATE_CREATE_RULES, validate_payload

router = APIRouter(prefix="/api/templates", tags=["templates"])


def _template_to_response(template: Template) -> TemplateResponse:
    return TemplateResponse(
        id=template.id,
        name=template.name,
        description=template.description,
        preview_image=template.preview_image,
        is_premium=bool(template.is_premium),
    )


@router.get("", response_model=list[TemplateResponse])
def list_templates(db: Session = Depends(get_db)):
    """All templates, sorted by name."""
    return [_template_to_response(t) for t in template_service.list_templates(db)]


@router.get("/{template_id}", response_model=TemplateResponse)
def get_template(template_id: str, db: Session = Depends(get_db)):
    return _template_to_response(template_service.get_template(db, template_id))


@router.post("", response_model=TemplateResponse, openapi_extra=request_body(TemplateCreate))
def create_template(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
    payload: Any = Depends(json_body),
):
    """Create a new template (admin only). Names are unique."""
    data = validate_payload(payload, TemplateCreate, TEMPLATE_CREATE_RULES)
    return _template_to_response(template_service.create_template(db, data))


@router.put("/{template_id}", response_model=TemplateResponse, openapi_extra=request_body(TemplateUpdate))
def update_template(
    template_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
    payload: Any = Depends(json_body),
):
    """Update a template (admin only)."""
    data = validate_payload(payload, TemplateUpdate)
    return _template_to_response(template_service.update_template(db, template_id, data))


@router.delete("/{template_id}", response_model=MessageResponse)
def delete_template(
    template_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """Delete a template (admin only)."""
    template_service.delete_template(db, template_id)
    return MessageResponse(msg="Template removed")
