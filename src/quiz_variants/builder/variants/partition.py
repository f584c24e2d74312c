"""
Module: builder.variants.partition

Purpose:
    Split a question list into N randomized exam variants.

Key Functions:
    - partition_into_variants(): Shuffle, then cut into contiguous chunks

Key Classes:
    - InvalidPartitionError: Raised for a non-positive variant count

Algorithm:
    1. Shuffle the full list once
    2. chunk_size = ceil(total / variant_count)
    3. Variant k (1-based) = shuffled[(k-1)*chunk_size : k*chunk_size]

    Trailing variants may be shorter than chunk_size or empty (e.g. 4
    questions into 3 variants gives 2, 2, 0). Concatenating the variants
    in order reproduces the shuffled list exactly.

Dependencies:
    - math (std)
    - builder.variants.shuffle

Used By:
    - builder.controller
"""

from __future__ import annotations

import logging
import math
import random
from typing import List, Optional, Sequence

from quiz_variants.core.models import Question

from .models import RandomSource, Variant
from .shuffle import shuffle

logger = logging.getLogger(__name__)


class InvalidPartitionError(ValueError):
    """Variant count is not a positive integer."""
    pass


def partition_into_variants(
    questions: Sequence[Question],
    variant_count: int,
    rng: Optional[RandomSource] = None,
) -> List[Variant]:
    """
    Shuffle questions and divide them into variant_count variants.

    Args:
        questions: Full question list (not mutated)
        variant_count: Number of variants, must be >= 1
        rng: Random source for the shuffle

    Returns:
        Exactly variant_count Variants, indexed from 1

    Raises:
        InvalidPartitionError: If variant_count is not a positive integer.
            Raised before anything is drawn from rng.

    Example:
        >>> variants = partition_into_variants(questions, 2, random.Random(7))
        >>> [v.index for v in variants]
        [1, 2]
    """
    if isinstance(variant_count, bool) or not isinstance(variant_count, int):
        raise InvalidPartitionError(
            f"variant_count must be an integer: {variant_count!r}"
        )
    if variant_count <= 0:
        raise InvalidPartitionError(
            f"variant_count must be positive: {variant_count}"
        )

    if rng is None:
        rng = random.Random()

    shuffled = shuffle(questions, rng)
    chunk_size = math.ceil(len(shuffled) / variant_count)

    variants = [
        Variant(
            index=k + 1,
            questions=tuple(shuffled[k * chunk_size:(k + 1) * chunk_size]),
        )
        for k in range(variant_count)
    ]

    empty = sum(1 for v in variants if v.is_empty)
    if empty:
        logger.info(
            f"{empty} of {variant_count} variants are empty "
            f"({len(shuffled)} questions, chunk size {chunk_size})"
        )
    logger.info(f"Partitioned {len(shuffled)} questions into {variant_count} variants")

    return variants
