"""
Module: builder.variants.models

Purpose:
    Variant dataclass and the random-source protocol used by the engine.

Key Classes:
    - Variant: One contiguous, randomized group of questions
    - RandomSource: Anything that can draw a uniform integer in [0, stop)

Dependencies:
    - dataclasses (std)
    - quiz_variants.core.models: Question

Used By:
    - builder.variants.shuffle
    - builder.variants.partition
    - builder.layout.paginator
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from quiz_variants.core.models import Question


class RandomSource(Protocol):
    """
    Source of uniform random integers.

    random.Random satisfies this protocol, so a seeded generator can be
    passed directly. Tests pass scripted stand-ins.
    """

    def randrange(self, stop: int) -> int:
        """Return a uniformly distributed integer in [0, stop)."""
        ...


@dataclass(frozen=True)
class Variant:
    """
    One exam version (immutable).

    Variants are computed on demand by partitioning; they are not stored.

    Attributes:
        index: 1-based variant number, printed as "Variant {index}"
        questions: Questions in this variant, in shuffled order

    Example:
        >>> v = Variant(index=1, questions=(q1, q2))
        >>> v.question_count
        2
    """

    index: int
    questions: tuple[Question, ...] = ()

    def __post_init__(self) -> None:
        """Validate variant on construction."""
        if self.index < 1:
            raise ValueError(f"index must be >= 1: {self.index}")
        if not isinstance(self.questions, tuple):
            object.__setattr__(self, "questions", tuple(self.questions))

    @property
    def question_count(self) -> int:
        """Number of questions in this variant."""
        return len(self.questions)

    @property
    def is_empty(self) -> bool:
        """True when partitioning left no questions for this variant."""
        return not self.questions

    @property
    def title(self) -> str:
        """Printed title line."""
        return f"Variant {self.index}"
