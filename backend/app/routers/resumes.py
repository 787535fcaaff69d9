"""Resumes router — CRUD over the caller's own resumes.

Every route needs a bearer token. Reads and writes on a single resume check,
in order: the token, that the resume exists, that the caller owns it.
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.resume import Resume
from app.models.template import Template
from app.models.user import User
from app.schemas.resume import (
    MessageResponse,
    ResumeCreate,
    ResumeDetailResponse,
    ResumeResponse,
    ResumeUpdate,
)
from app.schemas.base import utc_isoformat
from app.schemas.template import TemplateSummary
from app.middleware.auth import get_current_user
from app.middleware.body import json_body, request_body
from app.routers.templates import _template_to_response
from app.services import resume_service
from app.services.validation import RESUME_CREATE_RULES, validate_payload

router = APIRouter(prefix="/api/resumes", tags=["resumes"])


def _resume_fields(resume: Resume) -> dict:
    return dict(
        id=resume.id,
        owner=resume.owner_id,
        template=resume.template_id,
        name=resume.name,
        personal_info=resume.personal_info,
        summary=resume.summary,
        education=resume.education or [],
        experience=resume.experience or [],
        skills=resume.skills or [],
        certifications=resume.certifications or [],
        languages=resume.languages or [],
        created_at=utc_isoformat(resume.created_at),
        updated_at=utc_isoformat(resume.updated_at),
    )


def _resume_to_response(resume: Resume, template: Optional[Template] = None) -> ResumeResponse:
    summary = None
    if template is not None:
        summary = TemplateSummary(id=template.id, name=template.name, preview_image=template.preview_image)
    return ResumeResponse(template_info=summary, **_resume_fields(resume))


def _resume_to_detail(resume: Resume, template: Optional[Template]) -> ResumeDetailResponse:
    detail = _template_to_response(template) if template is not None else None
    return ResumeDetailResponse(template_info=detail, **_resume_fields(resume))


@router.get("", response_model=list[ResumeResponse])
def list_resumes(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """The caller's resumes, most recently updated first."""
    return [
        _resume_to_response(resume, template)
        for resume, template in resume_service.list_resumes(db, current_user.id)
    ]


@router.get("/{resume_id}", response_model=ResumeDetailResponse)
def get_resume(
    resume_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Get one resume with its full template."""
    resume, template = resume_service.get_resume(db, resume_id, current_user.id)
    return _resume_to_detail(resume, template)


@router.post("", response_model=ResumeResponse, openapi_extra=request_body(ResumeCreate))
def create_resume(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    payload: Any = Depends(json_body),
):
    """Create a resume owned by the caller."""
    data = validate_payload(payload, ResumeCreate, RESUME_CREATE_RULES)
    return _resume_to_response(resume_service.create_resume(db, current_user.id, data))


@router.put("/{resume_id}", response_model=ResumeResponse, openapi_extra=request_body(ResumeUpdate))
def update_resume(
    resume_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    payload: Any = Depends(json_body),
):
    """Partially update a resume; only fields sent with a value change."""
    data = validate_payload(payload, ResumeUpdate)
    return _resume_to_response(resume_service.update_resume(db, resume_id, current_user.id, data))


@router.delete("/{resume_id}", response_model=MessageResponse)
def delete_resume(
    resume_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    resume_service.delete_resume(db, resume_id, current_user.id)
    return MessageResponse(msg="Resume removed")
