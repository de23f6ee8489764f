from __future__ import annotations

from typing import Any

import jsonschema

SCRIPT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["scenario", "expect"],
    "properties": {
        "name": {"type": "string"},
        "description": {"type": "string"},
        "scenario": {"type": "string", "minLength": 1},
        "ordered": {"type": "boolean"},
        "event_count": {"type": "integer", "minimum": 0},
        "expect": {
            "type": "array",
            "minItems": 1,
            "items": {"$ref": "#/definitions/expectation"},
        },
    },
    "additionalProperties": False,
    "definitions": {
        "expectation": {
            "type": "object",
            "properties": {
                "contains": {"type": "string"},
                "regex": {"type": "string"},
                "equals": {"type": "string"},
                "absent": {"type": "boolean"},
            },
            "anyOf": [
                {"required": ["contains"]},
                {"required": ["regex"]},
                {"required": ["equals"]},
            ],
            "additionalProperties": False,
        }
    },
}


def validate_script(payload: dict[str, Any]) -> None:
    jsonschema.validate(instance=payload, schema=SCRIPT_SCHEMA)
