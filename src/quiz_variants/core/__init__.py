"""
Quiz Variants Core Package

Shared data models, validation and serialization used by the builder.

1. **Immutable Data Models**
   - Question and DocumentHeader are frozen dataclasses
   - Edits and shuffles create new instances, never mutate

2. **Validated Input**
   - Question-list payloads are checked before parsing
   - Failures carry the path of the offending field
"""

from .models import DocumentHeader, Question

__all__ = [
    "DocumentHeader",
    "Question",
]
