"""Shared schema base: snake_case attributes, camelCase JSON."""

from datetime import datetime, timezone

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


def utc_isoformat(value: datetime) -> str:
    """ISO 8601 with an explicit UTC offset. Naive values are stored UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()
