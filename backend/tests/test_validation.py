"""Tests for the declarative validation rules (unit-level, no DB dependency)."""

import pytest

from app.errors import ValidationError, Violation
from app.schemas.resume import ResumeCreate, ResumeUpdate
from app.services.validation import (
    RESUME_CREATE_RULES,
    Rule,
    check,
    is_blank,
    is_email,
    lookup,
    not_empty,
    validate_payload,
)

VALID = {
    "name": "Dev Resume",
    "template": "6a4f1f0e-0b7e-4a59-9a57-000000000001",
    "personalInfo": {"fullName": "Jane Doe", "email": "jane@x.com"},
}


class TestPrimitives:
    @pytest.mark.parametrize("value", ["x", ["a"], {"k": 1}, 0, False])
    def test_not_empty_accepts(self, value):
        assert not_empty(value)

    @pytest.mark.parametrize("value", ["", "   ", [], {}, None])
    def test_not_empty_rejects(self, value):
        assert not not_empty(value)

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_is_blank(self, value):
        assert is_blank(value)

    @pytest.mark.parametrize("value", ["x", " x ", [], {}, 0, False])
    def test_is_not_blank(self, value):
        assert not is_blank(value)

    def test_email(self):
        assert is_email("jane@x.com")
        assert not is_email("jane@")
        assert not is_email("plainaddress")
        assert not is_email(None)
        assert not is_email(42)

    def test_lookup_nested(self):
        assert lookup(VALID, "personalInfo.email") == "jane@x.com"

    def test_lookup_missing_is_empty(self):
        assert not not_empty(lookup({}, "personalInfo.email"))
        assert not not_empty(lookup({"personalInfo": "flat"}, "personalInfo.email"))


class TestRuleSet:
    def test_valid_payload_passes(self):
        assert check(VALID, RESUME_CREATE_RULES) == []

    def test_violations_in_declaration_order(self):
        payload = {"template": "t", "personalInfo": {"email": "bad"}}
        assert check(payload, RESUME_CREATE_RULES) == [
            Violation("name", "Name is required"),
            Violation("personalInfo.fullName", "Full name is required"),
            Violation("personalInfo.email", "Email is required"),
        ]

    def test_custom_rules(self):
        rules = [Rule("title", "Title is required", not_empty)]
        assert check({"title": "x"}, rules) == []
        assert check({}, rules) == [Violation("title", "Title is required")]


class TestValidatePayload:
    def test_returns_typed_model(self):
        data = validate_payload(VALID, ResumeCreate, RESUME_CREATE_RULES)
        assert data.personal_info.full_name == "Jane Doe"
        assert data.skills == []

    def test_rule_failures_raise(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload({}, ResumeCreate, RESUME_CREATE_RULES)
        assert len(exc_info.value.violations) == 4
        assert exc_info.value.status_code == 400

    def test_type_errors_use_same_shape(self):
        payload = dict(VALID, education=[{"startDate": "not a date"}])
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(payload, ResumeCreate, RESUME_CREATE_RULES)
        assert exc_info.value.violations[0].field == "education.0.startDate"

    def test_non_object_body(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(["x"], ResumeUpdate)
        assert exc_info.value.violations[0].field == "body"

    def test_update_has_no_required_fields(self):
        data = validate_payload({}, ResumeUpdate)
        assert data.model_fields_set == set()
