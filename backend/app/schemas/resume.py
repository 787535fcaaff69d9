"""Resume request/response schemas.

Every section entry is fully optional except the personal-info name and
email. Date fields accept ISO ``YYYY-MM-DD`` dates or full ISO timestamps.
"""

import datetime as dt
from typing import Optional, Union

from app.schemas.base import CamelModel
from app.schemas.template import TemplateResponse, TemplateSummary

# Date first: a date-only string stays a date, a timestamp with a time of day
# falls through to datetime
DateValue = Union[dt.date, dt.datetime]


class PersonalInfo(CamelModel):
    full_name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    linkedin: Optional[str] = None
    website: Optional[str] = None


class EducationEntry(CamelModel):
    institution: Optional[str] = None
    degree: Optional[str] = None
    field_of_study: Optional[str] = None
    start_date: Optional[DateValue] = None
    end_date: Optional[DateValue] = None
    description: Optional[str] = None


class ExperienceEntry(CamelModel):
    company: Optional[str] = None
    position: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[DateValue] = None
    end_date: Optional[DateValue] = None
    current: bool = False
    description: Optional[str] = None


class CertificationEntry(CamelModel):
    name: Optional[str] = None
    issuer: Optional[str] = None
    date: Optional[DateValue] = None


class LanguageEntry(CamelModel):
    language: Optional[str] = None
    proficiency: Optional[str] = None


class ResumeCreate(CamelModel):
    name: str
    template: str
    personal_info: PersonalInfo
    summary: Optional[str] = None
    education: list[EducationEntry] = []
    experience: list[ExperienceEntry] = []
    skills: list[str] = []
    certifications: list[CertificationEntry] = []
    languages: list[LanguageEntry] = []


class ResumeUpdate(CamelModel):
    """Partial update; unset and empty fields keep their stored value."""

    name: Optional[str] = None
    template: Optional[str] = None
    personal_info: Optional[PersonalInfo] = None
    summary: Optional[str] = None
    education: Optional[list[EducationEntry]] = None
    experience: Optional[list[ExperienceEntry]] = None
    skills: Optional[list[str]] = None
    certifications: Optional[list[CertificationEntry]] = None
    languages: Optional[list[LanguageEntry]] = None


class ResumeResponse(CamelModel):
    id: str
    owner: str
    template: str
    template_info: Optional[TemplateSummary] = None
    name: str
    personal_info: PersonalInfo
    summary: Optional[str] = None
    education: list[EducationEntry] = []
    experience: list[ExperienceEntry] = []
    skills: list[str] = []
    certifications: list[CertificationEntry] = []
    languages: list[LanguageEntry] = []
    created_at: str
    updated_at: str


class ResumeDetailResponse(ResumeResponse):
    """Single-resume view carrying the full template."""

    template_info: Optional[TemplateResponse] = None


class MessageResponse(CamelModel):
    msg: str
