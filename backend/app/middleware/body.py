"""JSON request bodies read after authentication.

Routes that validate with ``services.validation`` take the raw body through
``json_body`` instead of a typed parameter. FastAPI decodes typed bodies
before resolving dependencies, which would answer a malformed body with 400
ahead of the token check. ``request_body`` puts the schema back into the
OpenAPI document.
"""

from typing import Any

from fastapi import Request
from pydantic import BaseModel

from app.errors import ValidationError, Violation


async def json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        raise ValidationError([Violation(field="body", msg="Request body must be valid JSON")])


def _inline_refs(node: Any, defs: dict) -> Any:
    if isinstance(node, dict):
        ref = node.get("$ref")
        if isinstance(ref, str) and ref.startswith("#/$defs/"):
            return _inline_refs(defs[ref.rsplit("/", 1)[-1]], defs)
        return {k: _inline_refs(v, defs) for k, v in node.items() if k != "$defs"}
    if isinstance(node, list):
        return [_inline_refs(v, defs) for v in node]
    return node


def request_body(model: type[BaseModel]) -> dict:
    """``openapi_extra`` documenting ``model`` (camelCase) as the JSON body."""
    schema = model.model_json_schema(by_alias=True)
    schema = _inline_refs(schema, schema.get("$defs", {}))
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema}},
        }
    }
