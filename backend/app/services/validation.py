"""Declarative payload validation.

A rule set is an ordered list of ``Rule`` entries checked against the raw JSON
body before any store access. Every failing rule is reported, in declaration
order. Once the rules pass, the body is parsed into its typed schema and any
type errors are reported in the same ``{field, msg}`` shape.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

import pydantic
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel

from app.errors import ValidationError, Violation, violations_from_pydantic

ModelT = TypeVar("ModelT", bound=BaseModel)

_MISSING = object()


@dataclass(frozen=True)
class Rule:
    field: str  # dotted path, e.g. "personalInfo.email"
    message: str
    check: Callable[[Any], bool]


def not_empty(value: Any) -> bool:
    if value is _MISSING or value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, (list, dict)):
        return len(value) > 0
    return True


def is_blank(value: Any) -> bool:
    """True for values a partial update treats as not sent: None or a whitespace-only string."""
    return value is None or (isinstance(value, str) and value.strip() == "")


def is_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def lookup(payload: Any, path: str) -> Any:
    """Resolve a dotted path; returns a sentinel when any segment is missing."""
    current = payload
    for part in path.split("."):
        if not isinstance(current, dict) or part not in current:
            return _MISSING
        current = current[part]
    return current


def check(payload: Any, rules: list[Rule]) -> list[Violation]:
    return [Violation(field=r.field, msg=r.message) for r in rules if not r.check(lookup(payload, r.field))]


def validate_payload(payload: Any, model: type[ModelT], rules: Sequence[Rule] = ()) -> ModelT:
    """Run ``rules`` then parse into ``model``; raises ValidationError."""
    if not isinstance(payload, dict):
        raise ValidationError([Violation(field="body", msg="Request body must be a JSON object")])

    violations = check(payload, list(rules))
    if violations:
        raise ValidationError(violations)

    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as e:
        raise ValidationError(violations_from_pydantic(e.errors()))


RESUME_CREATE_RULES = [
    Rule("name", "Name is required", not_empty),
    Rule("template", "Template is required", not_empty),
    Rule("personalInfo.fullName", "Full name is required", not_empty),
    Rule("personalInfo.email", "Email is required", is_email),
]

TEMPLATE_CREATE_RULES = [
    Rule("name", "Name is required", not_empty),
]
