"""
Module: builder.controller

Purpose:
    Orchestrate the complete document building pipeline.
    Partition → Shuffle options → Paginate → Render

Key Functions:
    - build_document(): Main entry point for building a document

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - builder.variants: Shuffle/partition engine
    - builder.layout: Pagination
    - builder.output: PDF rendering

Used By:
    - Question collectors (UI / scripts)
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, replace
from datetime import datetime
from pathlib import Path
from typing import List, Sequence

from quiz_variants.core.models import Question

from .config import BuilderConfig
from .variants import Variant, partition_into_variants, shuffle_options_within_questions
from .layout import (
    paginate,
    LayoutResult,
    LayoutError,
    MeasurementError,
    ReportLabFontMetrics,
    register_truetype_font,
)
from .output import render_to_pdf, document_filename

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        pdf_bytes: Generated PDF document
        filename: Suggested download filename
        variants: Variants in print order
        layout: Page layout that was rendered
        metadata: Build metadata dictionary
        warnings: Layout warnings

    Example:
        >>> result = build_document(questions, config)
        >>> print(f"{result.filename}: {result.page_count} pages")
    """

    pdf_bytes: bytes
    filename: str
    variants: tuple[Variant, ...]
    layout: LayoutResult
    metadata: dict
    warnings: tuple[str, ...]

    @property
    def page_count(self) -> int:
        """Number of pages in the document."""
        return self.layout.page_count

    def write_to(self, directory: Path) -> Path:
        """
        Save the PDF into directory under `filename`.

        Returns:
            Path of the written file
        """
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.filename
        path.write_bytes(self.pdf_bytes)
        logger.info(f"Saved {path}")
        return path


def build_document(questions: Sequence[Question], config: BuilderConfig) -> BuildResult:
    """
    Build a variant document from start to finish.

    Pipeline:
    1. Shuffle and partition questions into variants
    2. (Optional) Shuffle options within each question
    3. Paginate header and variants onto pages
    4. Render to PDF bytes

    The question list is only read. Either a complete document is returned
    or an exception is raised.

    Args:
        questions: Question list snapshot
        config: Build configuration

    Returns:
        BuildResult with PDF bytes and metadata

    Raises:
        BuildError: If measurement, layout or rendering fails

    Example:
        >>> config = BuilderConfig(variant_count=2, seed=7)
        >>> result = build_document(questions, config)
        >>> result.filename
        'test-questions.pdf'
    """
    start_time = time.perf_counter()

    seed = config.seed if config.seed is not None else random.randrange(2**32)
    rng = random.Random(seed)

    logger.info(
        f"Starting build: {len(questions)} questions into {config.variant_count} variants (seed {seed})"
    )

    # 1. Partition
    variants = partition_into_variants(questions, config.variant_count, rng)

    # 2. Option shuffle
    if config.shuffle_options:
        variants = [
            replace(v, questions=tuple(shuffle_options_within_questions(v.questions, rng)))
            for v in variants
        ]

    # 3. Layout
    try:
        font_name = config.font_name
        if config.font_path is not None:
            font_name = register_truetype_font(config.font_path)
        metrics = ReportLabFontMetrics(font_name)
        layout = paginate(config.header, variants, config.layout, metrics)
    except (MeasurementError, LayoutError) as e:
        raise BuildError(f"Layout failed: {e}") from e

    # 4. Render
    try:
        pdf_bytes = render_to_pdf(
            layout,
            font_name=font_name,
            title=_document_title(config),
            author=config.header.author or None,
        )
    except (OSError, ValueError, KeyError) as e:
        raise BuildError(f"Rendering failed: {e}") from e

    elapsed = time.perf_counter() - start_time
    metadata = {
        "generated_at": datetime.now().isoformat(timespec="seconds"),
        "seed": seed,
        "variant_count": config.variant_count,
        "question_count": len(questions),
        "variant_sizes": [v.question_count for v in variants],
        "page_count": layout.page_count,
        "shuffle_options": config.shuffle_options,
        "font_name": font_name,
        "elapsed_seconds": round(elapsed, 3),
    }

    logger.info(f"Build complete: {layout.page_count} pages in {elapsed:.2f}s")

    return BuildResult(
        pdf_bytes=pdf_bytes,
        filename=document_filename(config.header.subject),
        variants=tuple(variants),
        layout=layout,
        metadata=metadata,
        warnings=tuple(layout.warnings),
    )


def _document_title(config: BuilderConfig) -> str:
    parts: List[str] = [p for p in (config.header.subject, config.header.grade) if p.strip()]
    return " - ".join(parts) if parts else "Test questions"
