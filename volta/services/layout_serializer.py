"""
Layout Serialization

Converts layout documents to and from their persisted form. The persisted
form is the LayoutTemplate tree itself (zones -> components) with camelCase
keys and None fields omitted.

Used by the persistence collaborator:
- serialize_layout / layout_to_json before saving
- deserialize_layout / layout_from_json after loading, followed by
  DesignerSession.set_layout()
"""

from typing import Any

from volta.models.contracts.layout import LayoutTemplate


def serialize_layout(template: LayoutTemplate) -> dict[str, Any]:
    """Dump a layout to a JSON-compatible dict."""
    return template.model_dump(mode="json", by_alias=True, exclude_none=True)


def deserialize_layout(data: dict[str, Any]) -> LayoutTemplate:
    """
    Build a layout from its persisted dict form.

    Raises:
        pydantic.ValidationError: If the document breaks a structural
            invariant (no zones, duplicate zone ids, missing component id)
    """
    return LayoutTemplate.model_validate(data)


def layout_to_json(template: LayoutTemplate, indent: int | None = None) -> str:
    return template.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


def layout_from_json(payload: str | bytes) -> LayoutTemplate:
    return LayoutTemplate.model_validate_json(payload)
