"""
Module: builder.variants.shuffle

Purpose:
    Unbiased permutation of questions and of the options inside each
    question.

Key Functions:
    - shuffle(): Fisher-Yates shuffle of a copy of any sequence
    - shuffle_options_within_questions(): Independent option permutation
      per question

Algorithm:
    Fisher-Yates (Knuth): walk i from the last index down to 1, draw j
    uniformly in [0, i] and swap items i and j. Every index is visited
    exactly once, giving each of the n! orderings equal probability.

Dependencies:
    - random (std)
    - builder.variants.models: RandomSource

Used By:
    - builder.variants.partition
    - builder.controller
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence, TypeVar

from quiz_variants.core.models import Question

from .models import RandomSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


def shuffle(items: Sequence[T], rng: Optional[RandomSource] = None) -> List[T]:
    """
    Return a uniformly random permutation of items.

    The input is copied first; the caller's sequence is never touched.

    Args:
        items: Any sequence (questions, option strings, ...)
        rng: Random source; a fresh random.Random() when omitted

    Returns:
        New list containing the same elements in random order

    Example:
        >>> sorted(shuffle(["A", "B", "C"], random.Random(1)))
        ['A', 'B', 'C']
    """
    if rng is None:
        rng = random.Random()

    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def shuffle_options_within_questions(
    questions: Sequence[Question],
    rng: Optional[RandomSource] = None,
) -> List[Question]:
    """
    Shuffle the options of every question independently.

    Question order and text are unchanged; each question gets its own
    permutation drawn in turn from the random source.

    Args:
        questions: Questions to process
        rng: Random source shared by the per-question draws

    Returns:
        New list of new Question instances
    """
    if rng is None:
        rng = random.Random()

    result = [q.with_options(shuffle(q.options, rng)) for q in questions]
    logger.debug(f"Shuffled options for {len(result)} questions")
    return result
