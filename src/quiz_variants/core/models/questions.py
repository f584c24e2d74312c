"""
Module: questions

Purpose:
    Provides the Question dataclass - the record passed from the question
    list through the variant engine to the layout engine. A question is its
    text plus an ordered tuple of answer options. Immutable; edits produce
    new instances.

Key Functions:
    - Question.option_count: Number of answer options
    - Question.with_options(): Copy with a replaced option sequence
    - Question.to_dict() / Question.from_dict(): Serialization

Dependencies:
    - dataclasses (std)

Used By:
    - builder.variants: shuffle and partition
    - builder.layout.paginator: text layout
    - builder.editing: value-returning edit helpers
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable


@dataclass(frozen=True)
class Question:
    """
    Multiple-choice question (immutable).

    Identity is positional: a question is identified by its index in the
    current list, there is no persistent ID.

    Attributes:
        text: Question text as typed by the author
        options: Ordered answer options (unique within a question)

    Invariants:
        - options is always a tuple of strings
        - option uniqueness is enforced at insertion (builder.editing),
          not here

    Example:
        >>> q = Question("2 + 2 = ?", ("3", "4", "5"))
        >>> q.option_count
        3
    """

    text: str
    options: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Normalise options to a tuple and check types."""
        if not isinstance(self.text, str):
            raise TypeError(f"text must be a string: {self.text!r}")
        if isinstance(self.options, str):
            raise TypeError(f"options must be a sequence of strings, not a string: {self.options!r}")
        # Frozen dataclass: normalise list input via object.__setattr__
        if not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(self.options))
        for option in self.options:
            if not isinstance(option, str):
                raise TypeError(f"options must be strings: {option!r}")

    @property
    def option_count(self) -> int:
        """Number of answer options."""
        return len(self.options)

    def with_options(self, options: Iterable[str]) -> Question:
        """Return a copy of this question with a new option sequence."""
        return replace(self, options=tuple(options))

    def with_text(self, text: str) -> Question:
        """Return a copy of this question with new text."""
        return replace(self, text=text)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON storage.

        Returns:
            Dictionary matching the question-list input contract
        """
        return {
            "text": self.text,
            "options": list(self.options),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Question:
        """
        Deserialize from dictionary.

        Args:
            data: Dictionary with "text" and optional "options"

        Returns:
            Question instance

        Raises:
            KeyError: If "text" is missing
            TypeError: If fields have the wrong types
        """
        return cls(
            text=data["text"],
            options=tuple(data.get("options", ())),
        )
