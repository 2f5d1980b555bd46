"""Data model for normalized, renderable type descriptions."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

UNKNOWN = "?"

# Tag -> fields that may be populated besides name/comment/optional.
TAG_FIELDS: dict[str, tuple[str, ...]] = {
    "primitive": ("primitive_type", "literal_value"),
    "array": ("element_type", "min_length", "max_length"),
    "object": ("properties", "templates"),
    "type": ("properties", "templates"),
    "reference": ("reference_type", "reference_link", "reference_templates"),
    "function": ("parameters", "return_type"),
    "union": ("options", "is_enum"),
    UNKNOWN: (),
}

_JSON_KEYS = {
    "type": "type",
    "name": "name",
    "comment": "comment",
    "optional": "optional",
    "primitive_type": "primitiveType",
    "literal_value": "literalValue",
    "element_type": "elementType",
    "min_length": "minLength",
    "max_length": "maxLength",
    "properties": "properties",
    "templates": "templates",
    "reference_type": "referenceType",
    "reference_link": "referenceLink",
    "reference_templates": "referenceTemplates",
    "parameters": "parameters",
    "return_type": "returnType",
    "options": "options",
    "is_enum": "isEnum",
}


@dataclass(frozen=True)
class RenderType:
    """A node of the closed type vocabulary handed to the renderer.

    ``type`` is the tag; the remaining fields are ``None`` unless the tag
    allows them (see ``TAG_FIELDS``).
    """

    type: str
    name: str | None = None
    comment: str | None = None
    optional: bool = False

    primitive_type: str | None = None
    literal_value: str | None = None

    element_type: RenderType | None = None
    min_length: int | None = None
    max_length: int | None = None

    properties: tuple[RenderType, ...] | None = None
    templates: tuple[str, ...] | None = None

    reference_type: str | None = None
    reference_link: str | None = None
    reference_templates: tuple[RenderType, ...] | None = None

    parameters: tuple[RenderType, ...] | None = None
    return_type: RenderType | None = None

    options: tuple[RenderType, ...] | None = None
    is_enum: bool | None = None

    def __post_init__(self) -> None:
        """Reject fields that the tag does not allow."""
        allowed = TAG_FIELDS.get(self.type)
        if allowed is None:
            msg = f"unknown render type tag: {self.type!r}"
            raise ValueError(msg)
        for field_name in _JSON_KEYS:
            if field_name in {"type", "name", "comment", "optional"}:
                continue
            if field_name not in allowed and getattr(self, field_name) is not None:
                msg = f"{field_name} is not valid on a {self.type!r} render type"
                raise ValueError(msg)

    def with_changes(self, **changes: Any) -> RenderType:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON shape consumed by the renderer."""
        out: dict[str, Any] = {}
        for field_name, key in _JSON_KEYS.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            if field_name == "optional" and not value:
                continue
            out[key] = _to_json_value(value)
        return out


def _to_json_value(value: Any) -> Any:
    if isinstance(value, RenderType):
        return value.to_dict()
    if isinstance(value, tuple):
        return [_to_json_value(v) for v in value]
    return value


def unknown_type() -> RenderType:
    """Return the sentinel for shapes that cannot be represented."""
    return RenderType(type=UNKNOWN)
