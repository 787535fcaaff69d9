"""Template service — business logic for the shared template catalog.

Reads are public. Mutations are admin-only; the role gate lives in the
router dependency (``require_admin``).
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.errors import ConflictError, NotFoundError
from app.models.template import Template
from app.schemas.template import TemplateCreate, TemplateUpdate
from app.services.records import get_by_id
from app.services.validation import is_blank

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES = [
    {
        "name": "ModernTemplate",
        "description": "A clean, contemporary design with a focus on skills and experience.",
        "preview_image": "/images/templates/modern.jpg",
        "is_premium": False,
    },
    {
        "name": "ClassicTemplate",
        "description": "Traditional resume layout perfect for conservative industries.",
        "preview_image": "/images/templates/classic.jpg",
        "is_premium": False,
    },
    {
        "name": "MinimalistTemplate",
        "description": "Simple, elegant design with plenty of white space.",
        "preview_image": "/images/templates/minimalist.jpg",
        "is_premium": False,
    },
]


def list_templates(db: Session) -> list[Template]:
    return db.query(Template).order_by(Template.name.asc()).all()


def get_template(db: Session, template_id: str) -> Template:
    template = get_by_id(db, Template, template_id)
    if template is None:
        raise NotFoundError("Template not found")
    return template


def _find_by_name(db: Session, name: str) -> Optional[Template]:
    return db.query(Template).filter(Template.name == name).first()


def create_template(db: Session, data: TemplateCreate) -> Template:
    if _find_by_name(db, data.name):
        raise ConflictError("Template already exists")

    template = Template(
        name=data.name,
        description=data.description,
        preview_image=data.preview_image,
        is_premium=data.is_premium,
    )
    db.add(template)
    db.commit()
    db.refresh(template)
    logger.info("Created template %s (%s)", template.id, template.name)
    return template


def update_template(db: Session, template_id: str, data: TemplateUpdate) -> Template:
    """Overwrite the fields sent with a value; omitted, null and blank fields are kept."""
    template = get_template(db, template_id)

    changes = {k: v for k, v in data.model_dump(exclude_unset=True).items() if not is_blank(v)}
    new_name = changes.get("name")
    if new_name and new_name != template.name and _find_by_name(db, new_name):
        raise ConflictError("Template already exists")

    for field, value in changes.items():
        setattr(template, field, value)

    db.commit()
    db.refresh(template)
    logger.info("Updated template %s (%s)", template.id, ", ".join(sorted(changes)) or "no fields")
    return template


def delete_template(db: Session, template_id: str) -> None:
    """Remove a template. Resumes that reference it are left as they are."""
    template = get_template(db, template_id)
    db.delete(template)
    db.commit()
    logger.info("Deleted template %s", template_id)


def seed_default_templates(db: Session, replace: bool = False) -> list[Template]:
    """Insert the default catalog. With ``replace`` every existing template is removed first."""
    if replace:
        deleted = db.query(Template).delete()
        logger.info("Deleted %d existing templates", deleted)
    elif db.query(Template).count():
        return []

    templates = [Template(**data) for data in DEFAULT_TEMPLATES]
    db.add_all(templates)
    db.commit()
    for t in templates:
        db.refresh(t)
    logger.info("Seeded %d templates", len(templates))
    return templates
