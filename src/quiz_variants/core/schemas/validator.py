"""
Schema Validation Utilities

Validates question-list payloads (the input contract between the question
collector and the build pipeline) before they are turned into Question
objects.

Basic checks always run and report the exact failing path. In strict mode
the payload is additionally validated with jsonschema against
`question_list.schema.json`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


QUESTION_LIST_SCHEMA_NAME = "question_list"


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_question(data: Any, *, path: str = "", strict: bool = False) -> None:
    """
    Validate a single question payload.

    Expected shape: {"text": str, "options": [str, ...]}. "options" may be
    omitted (a question with no options yet).

    Args:
        data: Question dictionary to validate
        path: Location of this question inside a larger payload
        strict: If True, also run jsonschema validation

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Question must be an object, got {type(data).__name__}",
            path=path,
        )

    if "text" not in data:
        raise ValidationError(
            "Missing required fields: ['text']",
            path=path,
            errors=["Missing field: text"],
        )

    if not isinstance(data["text"], str):
        raise ValidationError(
            f"Invalid text: {data['text']!r} (must be a string)",
            path=_join(path, "text"),
        )

    options = data.get("options", [])
    if not isinstance(options, list):
        raise ValidationError(
            "options must be a list",
            path=_join(path, "options"),
        )
    for i, option in enumerate(options):
        if not isinstance(option, str):
            raise ValidationError(
                f"Invalid option: {option!r} (must be a string)",
                path=_join(path, f"options[{i}]"),
            )

    # Duplicates are rejected at insertion; a payload carrying them was not
    # produced by the editing helpers.
    duplicates = sorted({o for o in options if options.count(o) > 1})
    if duplicates:
        raise ValidationError(
            f"Duplicate options: {duplicates}",
            path=_join(path, "options"),
            errors=[f"Duplicate option: {o}" for o in duplicates],
        )

    if strict:
        _validate_with_schema([data], path)


def validate_question_list(data: Any, *, strict: bool = False) -> None:
    """
    Validate a complete question-list payload.

    Args:
        data: List of question dictionaries
        strict: If True, also run jsonschema validation on the whole list

    Raises:
        ValidationError: If data is invalid (first failure wins)
    """
    if not isinstance(data, list):
        raise ValidationError(
            f"Question list must be an array, got {type(data).__name__}",
        )

    for i, item in enumerate(data):
        validate_question(item, path=f"[{i}]")

    if strict:
        _validate_with_schema(data, "")


def _validate_with_schema(data: list, path: str) -> None:
    """Run jsonschema over a list payload and convert its error."""
    schema = _load_schema(QUESTION_LIST_SCHEMA_NAME)
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=path or ".".join(str(p) for p in e.absolute_path),
            errors=[e.message],
        ) from e


def _join(path: str, field: str) -> str:
    if not path:
        return field
    return f"{path}.{field}"
