"""Schema helpers for the picker settings file."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "assetpicker/settings.schema.json",
    "type": "object",
    "required": ["schema", "selection", "dialogs"],
    "properties": {
        "schema": {"const": "assetpicker/settings@1"},
        "selection": {
            "type": "object",
            "properties": {
                "range_policy": {
                    "type": "string",
                    "enum": ["additive", "replace"],
                },
            },
            "additionalProperties": True,
        },
        "dialogs": {
            "type": "object",
            "properties": {
                "confirm_delete": {"type": "boolean"},
            },
            "additionalProperties": True,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "assetpicker/settings@1",
    "selection": {
        "range_policy": "additive",
    },
    "dialogs": {
        "confirm_delete": True,
    },
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)

_NESTED_SECTIONS = ("selection", "dialogs")


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key in _NESTED_SECTIONS and isinstance(value, dict):
                merged.setdefault(key, {}).update(value)
                continue
            merged[key] = value
    _validator.validate(merged)
    return merged


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults"]
