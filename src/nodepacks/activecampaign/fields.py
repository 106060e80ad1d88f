"""
Helpers for merging user-supplied field collections into request bodies.
"""

from __future__ import annotations

from typing import Any, Dict


def add_additional_fields(body: Dict[str, Any], additional_fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Overlay the additional fields onto the body.

    Keys present in ``additional_fields`` replace same-named keys in ``body``;
    every other key of ``body`` is left as it was. A ``customProperties``
    collection is flattened into one body key per ``{name, value}`` entry.

    Args:
        body: The body object to add fields to (modified in place)
        additional_fields: The fields to add

    Returns:
        The same body object, for chaining
    """
    for key, value in (additional_fields or {}).items():
        if key == "customProperties" and isinstance(value, dict) and value.get("property") is not None:
            for custom_property in value["property"]:
                body[custom_property["name"]] = custom_property.get("value")
        else:
            body[key] = value
    return body


def coerce_accepts_marketing(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy with acceptsMarketing sent as the API's "1"/"0" flag."""
    fields = dict(fields or {})
    if "acceptsMarketing" in fields:
        fields["acceptsMarketing"] = "1" if fields["acceptsMarketing"] is True else "0"
    return fields


def add_if_not_empty(body: Dict[str, Any], **values: Any) -> Dict[str, Any]:
    """Add each value that is not the empty string."""
    return add_additional_fields(
        body, {key: value for key, value in values.items() if value != ""}
    )
