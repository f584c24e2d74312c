"""
Module: builder.config

Purpose:
    Configuration dataclass for the build pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - BuilderConfig: Main configuration for building a document

Dependencies:
    - dataclasses (std)
    - builder.layout.config: LayoutConfig

Used By:
    - builder.controller: Main build controller
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from quiz_variants.core.models import DocumentHeader

from .layout.config import LayoutConfig
from .layout.metrics import DEFAULT_FONT_NAME


@dataclass(frozen=True)
class BuilderConfig:
    """
    Configuration for building a variant document (immutable).

    Attributes:
        header: Subject/grade/date/author for the first page
        variant_count: Number of variants to split the questions into
        seed: Random seed; None draws a fresh seed per build
        shuffle_options: Also shuffle the options inside every question
        layout: Page layout configuration
        font_name: Font for measurement and rendering
        font_path: Optional TrueType file, registered under its file stem
            and used instead of font_name. Needed for text the standard
            fonts cannot encode (e.g. Cyrillic).

    Example:
        >>> config = BuilderConfig(
        ...     header=DocumentHeader(subject="Physics", grade="9"),
        ...     variant_count=2,
        ...     seed=42,
        ... )
    """

    header: DocumentHeader = field(default_factory=DocumentHeader)
    variant_count: int = 1

    # Randomness
    seed: Optional[int] = None
    shuffle_options: bool = False

    # Layout / output
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    font_name: str = DEFAULT_FONT_NAME
    font_path: Optional[Union[str, Path]] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if isinstance(self.variant_count, bool) or not isinstance(self.variant_count, int):
            raise ValueError(f"variant_count must be an integer: {self.variant_count!r}")
        if self.variant_count <= 0:
            raise ValueError(f"variant_count must be positive: {self.variant_count}")
        if not self.font_name:
            raise ValueError("font_name must not be empty")
