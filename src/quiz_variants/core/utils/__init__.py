"""
Utils Package

Serialization functions.
"""

from .serialization import (
    serialize_question,
    deserialize_question,
    serialize_questions,
    deserialize_questions,
    questions_to_json,
    questions_from_json,
)

__all__ = [
    "serialize_question",
    "deserialize_question",
    "serialize_questions",
    "deserialize_questions",
    "questions_to_json",
    "questions_from_json",
]
