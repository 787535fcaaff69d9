"""Resume service — business logic for user-owned resume CRUD."""

import logging
from datetime import timedelta
from typing import Any, Optional

from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.errors import NotFoundError
from app.models.resume import Resume, utcnow
from app.models.template import Template
from app.schemas.resume import ResumeCreate, ResumeUpdate
from app.services import ownership
from app.services.records import get_by_id, parse_id
from app.services.validation import is_blank

logger = logging.getLogger(__name__)

# Schema field -> Resume column, for the fields a partial update may replace
MUTABLE_FIELDS = {
    "name": "name",
    "template": "template_id",
    "personal_info": "personal_info",
    "summary": "summary",
    "education": "education",
    "experience": "experience",
    "skills": "skills",
    "certifications": "certifications",
    "languages": "languages",
}


def _to_document(value: Any) -> Any:
    """Convert schema values to the JSON stored in document columns."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [_to_document(v) for v in value]
    return value


def merge_changes(update: ResumeUpdate) -> dict[str, Any]:
    """Column values a partial update overwrites.

    Only fields sent with a non-blank value are included; each one replaces
    the stored value wholesale. Lists and nested objects are not deep-merged.
    """
    changes = {}
    for field, column in MUTABLE_FIELDS.items():
        if field not in update.model_fields_set:
            continue
        value = getattr(update, field)
        if is_blank(value):
            continue
        changes[column] = _to_document(value)
    return changes


def _load_owned(db: Session, resume_id: str, user_id: str) -> Resume:
    resume = get_by_id(db, Resume, resume_id)
    if resume is None:
        raise NotFoundError("Resume not found")
    ownership.authorize(resume, user_id)
    return resume


def _templates_by_id(db: Session, template_ids: set[str]) -> dict[str, Template]:
    if not template_ids:
        return {}
    templates = db.query(Template).filter(Template.id.in_(template_ids)).all()
    return {t.id: t for t in templates}


def list_resumes(db: Session, user_id: str) -> list[tuple[Resume, Optional[Template]]]:
    """All of the user's resumes, most recently updated first, with their templates."""
    resumes = (
        db.query(Resume)
        .filter(Resume.owner_id == user_id)
        .order_by(Resume.updated_at.desc())
        .all()
    )
    templates = _templates_by_id(db, {r.template_id for r in resumes})
    return [(r, templates.get(r.template_id)) for r in resumes]


def get_resume(db: Session, resume_id: str, user_id: str) -> tuple[Resume, Optional[Template]]:
    resume = _load_owned(db, resume_id, user_id)
    return resume, db.query(Template).filter(Template.id == resume.template_id).first()


def create_resume(db: Session, user_id: str, data: ResumeCreate) -> Resume:
    """Create a resume on an existing template.

    The template lookup and the insert are separate statements; a template
    deleted in between leaves the new resume with a dangling reference.
    """
    template = get_by_id(db, Template, data.template)
    if template is None:
        raise NotFoundError("Template not found")

    now = utcnow()
    resume = Resume(
        owner_id=user_id,
        template_id=template.id,
        name=data.name,
        personal_info=_to_document(data.personal_info),
        summary=data.summary,
        education=_to_document(data.education),
        experience=_to_document(data.experience),
        skills=list(data.skills),
        certifications=_to_document(data.certifications),
        languages=_to_document(data.languages),
        created_at=now,
        updated_at=now,
    )
    db.add(resume)
    db.commit()
    db.refresh(resume)
    logger.info("User %s created resume %s on template %s", user_id, resume.id, template.id)
    return resume


def update_resume(db: Session, resume_id: str, user_id: str, data: ResumeUpdate) -> Resume:
    resume = _load_owned(db, resume_id, user_id)

    changes = merge_changes(data)
    if "template_id" in changes:
        # Stored in canonical form so list/get can join it; existence is not rechecked
        template_id = parse_id(changes["template_id"])
        if template_id is None:
            raise NotFoundError("Template not found")
        changes["template_id"] = template_id

    for column, value in changes.items():
        setattr(resume, column, value)

    # updated_at must move forward even when the clock has not ticked
    now = utcnow()
    if resume.updated_at is not None and now <= resume.updated_at:
        now = resume.updated_at + timedelta(microseconds=1)
    resume.updated_at = now

    db.commit()
    db.refresh(resume)
    logger.info("User %s updated resume %s (%s)", user_id, resume.id, ", ".join(sorted(changes)) or "no fields")
    return resume


def delete_resume(db: Session, resume_id: str, user_id: str) -> None:
    resume = _load_owned(db, resume_id, user_id)
    db.delete(resume)
    db.commit()
    logger.info("User %s deleted resume %s", user_id, resume_id)
