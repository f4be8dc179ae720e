"""
Schema Validation Utilities

Validates raw dimension records (as read from JSON) before they are parsed
into Dimension objects.

Two levels:
- Basic checks (always): record is an object with an id and a name
- Strict checks (opt-in): full JSON Schema validation with jsonschema

Both the canonical field names (`id`, `name`, ...) and the upstream
assessment API names (`id_dimensions`, `dimension_name`, ...) are accepted.
"""

from __future__ import annotations

from typing import Any

import jsonschema


DIMENSION_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Dimension",
    "type": "object",
    "properties": {
        "id": {"type": ["integer", "string"]},
        "id_dimensions": {"type": ["integer", "string"]},
        "name": {"type": "string", "minLength": 1},
        "dimension_name": {"type": "string", "minLength": 1},
        "short_description": {"type": ["string", "null"]},
        "dimension_short_description": {"type": ["string", "null"]},
        "parent_id": {"type": ["integer", "string", "null"]},
        "id_parent_dimension": {"type": ["integer", "string", "null"]},
        "statements": {
            "type": "array",
            "items": {"type": ["object", "string"]},
        },
    },
    "allOf": [
        {"anyOf": [{"required": ["id"]}, {"required": ["id_dimensions"]}]},
        {"anyOf": [{"required": ["name"]}, {"required": ["dimension_name"]}]},
    ],
}

ID_KEYS = ("id", "id_dimensions")
NAME_KEYS = ("name", "dimension_name")


class ValidationError(Exception):
    """Raised when a dimension record fails validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_dimension(data: Any, *, strict: bool = False, path: str = "") -> None:
    """
    Validate a raw dimension record.

    Args:
        data: Record dictionary to validate
        strict: If True, also validate against DIMENSION_SCHEMA with jsonschema
        path: Location of the record, used in error messages

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Dimension record must be an object, got {type(data).__name__}",
            path=path,
        )

    missing = []
    if not any(data.get(k) is not None for k in ID_KEYS):
        missing.append("id")
    if not any(data.get(k) for k in NAME_KEYS):
        missing.append("name")
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )

    dimension_id = next(data[k] for k in ID_KEYS if data.get(k) is not None)
    if not isinstance(dimension_id, (int, str)):
        raise ValidationError(
            f"Invalid dimension id: {dimension_id!r} (must be integer or string)",
            path=f"{path}.id" if path else "id",
        )

    # A malformed statements value is tolerated here (counted as zero by the
    # parser); strict mode rejects it through the schema.
    if strict:
        try:
            jsonschema.validate(data, DIMENSION_SCHEMA)
        except jsonschema.ValidationError as e:
            location = ".".join(str(p) for p in e.absolute_path)
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(filter(None, [path, location])),
                errors=[e.message],
            ) from e
