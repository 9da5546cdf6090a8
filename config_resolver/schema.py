"""
config_resolver/schema.py — JSON Schema pliku dashing.json (draft 2020-12).

Wartość selektora może być:
  - napisem (skrót dla {"type": napis}),
  - obiektem transformacji,
  - niepustą listą obiektów transformacji.
"""

from __future__ import annotations

from typing import Any

TRANSFORM_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "type":        {"type": "string", "minLength": 1},
        "attr":        {"type": "string", "minLength": 1},
        "regexp":      {"type": "string"},
        "replacement": {"type": "string"},
        "requiretext": {"type": "string"},
        "matchpath":   {"type": "string"},
    },
    "required": ["type"],
    "additionalProperties": False,
}

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "dashing.json",
    "type": "object",
    "properties": {
        "name":            {"type": "string"},
        "package":         {"type": "string", "minLength": 1, "pattern": r"^[^/\\]+$"},
        "index":           {"type": "string"},
        "selectors": {
            "type": "object",
            "additionalProperties": {
                "oneOf": [
                    {"type": "string", "minLength": 1},
                    {"$ref": "#/$defs/Transform"},
                    {
                        "type": "array",
                        "items": {"$ref": "#/$defs/Transform"},
                        "minItems": 1,
                    },
                ],
            },
        },
        "ignore":          {"type": "array", "items": {"type": "string"}},
        "icon32x32":       {"type": "string"},
        "allowJS":         {"type": "boolean"},
        "sourceDepth":     {"type": "integer", "minimum": 0},
        "prefixRootLinks": {"type": "boolean"},
    },
    "required": ["package", "selectors"],
    "$defs": {
        "Transform": TRANSFORM_SCHEMA,
    },
}
