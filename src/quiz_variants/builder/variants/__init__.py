"""
Module: builder.variants

Purpose:
    Shuffle/partition engine. Pure functions that turn a question list
    into randomized variants and shuffle options inside questions.

Key Functions:
    - shuffle(): Generic Fisher-Yates shuffle on a copy
    - partition_into_variants(): Shuffle then split into N variants
    - shuffle_options_within_questions(): Per-question option shuffle

Key Classes:
    - Variant: One exam version
    - RandomSource: Injectable random-integer source
    - InvalidPartitionError: Non-positive variant count

Dependencies:
    - random, math (std)
    - quiz_variants.core.models: Question

Used By:
    - builder.controller: Build pipeline
"""

from .models import RandomSource, Variant
from .shuffle import shuffle, shuffle_options_within_questions
from .partition import partition_into_variants, InvalidPartitionError

__all__ = [
    # Models
    "RandomSource",
    "Variant",
    # Functions
    "shuffle",
    "shuffle_options_within_questions",
    "partition_into_variants",
    # Errors
    "InvalidPartitionError",
]
