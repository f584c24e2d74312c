"""
Serialization Utilities

to/from dict and JSON-text helpers for question lists.

All parsing goes through the schema validator first, so a malformed
payload fails with a ValidationError naming the offending path instead
of a KeyError deep inside the build pipeline.
"""

from __future__ import annotations

import json
from typing import Any, Iterable

from ..models.questions import Question
from ..schemas.validator import validate_question, validate_question_list, ValidationError


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question(question: Question) -> dict[str, Any]:
    """
    Serialize a Question to a dictionary.

    Args:
        question: Question instance to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    return question.to_dict()


def deserialize_question(data: dict[str, Any], *, validate: bool = True) -> Question:
    """
    Deserialize a Question from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate before parsing

    Returns:
        Question instance

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_question(data)
    return Question.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# Question List Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_questions(questions: Iterable[Question]) -> list[dict[str, Any]]:
    """Serialize an ordered question list to a list of dictionaries."""
    return [serialize_question(q) for q in questions]


def deserialize_questions(
    data: list[dict[str, Any]],
    *,
    validate: bool = True,
    strict: bool = False,
) -> list[Question]:
    """
    Deserialize an ordered question list.

    Args:
        data: List of question dictionaries
        validate: Whether to validate before parsing
        strict: Also validate against the JSON schema (implies validate)

    Returns:
        Questions in payload order

    Raises:
        ValidationError: If the payload is invalid
    """
    if validate or strict:
        validate_question_list(data, strict=strict)
    return [Question.from_dict(item) for item in data]


def questions_to_json(questions: Iterable[Question], *, indent: int | None = 2) -> str:
    """Encode a question list as JSON text (non-ASCII kept as-is)."""
    return json.dumps(serialize_questions(questions), indent=indent, ensure_ascii=False)


def questions_from_json(text: str, *, strict: bool = False) -> list[Question]:
    """
    Decode a question list from JSON text.

    Raises:
        ValidationError: If the text is not valid JSON or the payload is invalid
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e.msg}", errors=[str(e)]) from e
    return deserialize_questions(data, strict=strict)
