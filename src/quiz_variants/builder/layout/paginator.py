"""
Module: builder.layout.paginator

Purpose:
    Lay out variant titles, numbered questions and labelled options onto
    fixed-size pages, tracking a single vertical cursor and breaking pages
    when content would run into the bottom margin.

Key Functions:
    - paginate(): Main pagination function

Key Classes:
    - Paginator: Page accumulator / state machine
    - LayoutState: IDLE -> ACCUMULATING -> (PAGE_BREAK -> ACCUMULATING)* -> FINALIZED
    - LayoutError: Misuse of the paginator (e.g. placing after finalize)

Algorithm:
    1. y = page_height - margin; header lines once on the first page
    2. Per variant: title line, then each question (number restarts at 1)
       followed by its labelled options
    3. A question block (text + options + gap) starts on a new page when it
       would end below margin + bottom_reserve and the current page already
       holds something. A variant title is kept with its first question.
    4. After each question: if y < margin + bottom_reserve, break
    5. A question taller than a fresh page never forces a break of its own:
       wherever it sits in the variant, it starts on the current page as
       soon as its text line and first option fit there, then is split
       between option lines (or overflows with a warning when splitting
       is disabled)
    6. After each variant y -= variant_gap, never checked

    Page breaks are lazy: the next page is only opened when something is
    placed on it, so a break after the last question never produces a
    trailing blank page.

Dependencies:
    - builder.layout.config: LayoutConfig
    - builder.layout.metrics: FontMetrics
    - builder.layout.models: TextPlacement, PagePlan, LayoutResult
    - builder.variants: Variant

Used By:
    - builder.controller: Build pipeline
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import List, Sequence

from quiz_variants.core.models import DocumentHeader, Question

from ..variants.models import Variant
from .config import LayoutConfig
from .labels import option_label
from .metrics import FontMetrics, checked_line_height
from .models import LayoutResult, PagePlan, TextPlacement

logger = logging.getLogger(__name__)


class LayoutError(Exception):
    """Invalid paginator operation for its current state."""
    pass


class LayoutState(Enum):
    """Lifecycle of a Paginator."""

    IDLE = auto()          # Nothing placed yet
    ACCUMULATING = auto()  # A page is open and receiving lines
    PAGE_BREAK = auto()    # Page closed, next page opens on next placement
    FINALIZED = auto()     # Page list emitted, no further mutation


class Paginator:
    """
    Accumulates positioned text lines into pages.

    Holds the cursor `y` and the lines of the open page. Closed pages are
    frozen PagePlans.

    Args:
        config: Layout configuration
        metrics: Text measurement provider (used for width warnings)

    Example:
        >>> pager = Paginator(LayoutConfig(), metrics)
        >>> pager.place(50, "Variant 1", 18)
        >>> pager.advance(30)
        >>> result = pager.finalize()
    """

    def __init__(self, config: LayoutConfig, metrics: FontMetrics):
        self.config = config
        self.metrics = metrics
        self.state = LayoutState.IDLE
        self.y: float = config.top
        self._pages: List[PagePlan] = []
        self._placements: List[TextPlacement] = []
        self._warnings: List[str] = []

    # ─────────────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def page_index(self) -> int:
        """Index of the open (or next) page."""
        return len(self._pages)

    @property
    def has_content(self) -> bool:
        """True when the open page already holds at least one line."""
        return self.state is LayoutState.ACCUMULATING and bool(self._placements)

    def fits(self, height: float) -> bool:
        """Whether a block of this height can end at or above the floor."""
        return self.y - height >= self.config.floor

    def warn(self, message: str) -> None:
        """Record a layout warning."""
        logger.warning(message)
        self._warnings.append(message)

    # ─────────────────────────────────────────────────────────────────────────
    # Mutation
    # ─────────────────────────────────────────────────────────────────────────

    def place(self, x: float, text: str, size: float, *, underline: bool = False) -> None:
        """
        Place a line at the cursor.

        Opens the first page, or the page following a break, on demand.

        Raises:
            LayoutError: If the paginator is finalized
        """
        self._require_open()
        if self.state is not LayoutState.ACCUMULATING:
            self.state = LayoutState.ACCUMULATING

        width = self.metrics.width_of_text_at_size(text, size)
        if x + width > self.config.right_edge:
            self.warn(
                f"Text exceeds printable width on page {self.page_index}: "
                f"{text[:40]!r} ({x + width:.0f} > {self.config.right_edge})"
            )

        self._placements.append(TextPlacement(x=x, y=self.y, text=text, size=size, underline=underline))

    def advance(self, amount: float) -> None:
        """Move the cursor down by amount."""
        self._require_open()
        self.y -= amount

    def page_break(self) -> None:
        """
        Close the open page and reset the cursor to the top.

        A break with nothing on the open page only resets the cursor.
        """
        self._require_open()
        if self.state is LayoutState.ACCUMULATING:
            self._close_page()
        logger.debug(f"Page break before page {self.page_index}")
        self.state = LayoutState.PAGE_BREAK
        self.y = self.config.top

    def finalize(self) -> LayoutResult:
        """
        Close the open page and emit the page list.

        An untouched paginator still emits one blank page.

        Raises:
            LayoutError: If already finalized
        """
        self._require_open()
        if self.state is LayoutState.ACCUMULATING or not self._pages:
            self._close_page()
        self.state = LayoutState.FINALIZED
        return LayoutResult(pages=tuple(self._pages), warnings=list(self._warnings))

    def _close_page(self) -> None:
        self._pages.append(PagePlan(
            index=len(self._pages),
            placements=tuple(self._placements),
            width=self.config.page_width,
            height=self.config.page_height,
        ))
        self._placements = []

    def _require_open(self) -> None:
        if self.state is LayoutState.FINALIZED:
            raise LayoutError("Paginator is finalized")


def paginate(
    header: DocumentHeader,
    variants: Sequence[Variant],
    config: LayoutConfig,
    metrics: FontMetrics,
) -> LayoutResult:
    """
    Lay out a header and variants onto pages.

    Args:
        header: Subject/grade/date/author printed on the first page
        variants: Variants in print order (empty variants print their title)
        config: Layout configuration
        metrics: Text measurement provider

    Returns:
        LayoutResult with at least one page

    Raises:
        MeasurementError: If the metrics provider fails (nothing is returned)
    """
    pager = Paginator(config, metrics)
    line_height = checked_line_height(metrics, config.question_font_size)

    _place_header(pager, header)

    for variant in variants:
        _place_variant(pager, variant, line_height)
        # Gap after each variant is never overflow-checked
        pager.advance(config.variant_gap)

    result = pager.finalize()
    logger.info(
        f"Laid out {len(variants)} variants, "
        f"{sum(v.question_count for v in variants)} questions onto {result.page_count} pages"
    )
    return result


def question_block_height(question: Question, line_height: float, config: LayoutConfig) -> float:
    """Cursor advance for one question: text line, option lines and gap."""
    return (
        line_height + config.question_spacing
        + question.option_count * (line_height + config.option_spacing)
        + config.question_gap
    )


def _question_head_height(question: Question, line_height: float, config: LayoutConfig) -> float:
    """Question line plus its first option, the smallest piece worth starting."""
    height = line_height + config.question_spacing
    if question.options:
        height += line_height + config.option_spacing
    return height


def _start_height(question: Question, line_height: float, config: LayoutConfig) -> float:
    """
    Space that must be left on the page before a question may start there.

    The whole block for questions that fit on a fresh page. A taller
    question only needs its head, whatever its position in the variant.
    """
    block = question_block_height(question, line_height, config)
    if block > config.usable_height:
        return _question_head_height(question, line_height, config)
    return block


def _place_header(pager: Paginator, header: DocumentHeader) -> None:
    config = pager.config
    lines = [
        f"Subject: {header.subject}",
        f"Grade: {header.grade}",
        f"Date: {header.date}",
    ]
    if header.has_author:
        lines.append(f"Author: {header.author}")

    top = pager.y
    for i, line in enumerate(lines):
        pager.y = top - i * config.header_line_spacing
        pager.place(config.header_x, line, config.header_font_size)
    pager.y = top - config.header_block_height


def _place_variant(pager: Paginator, variant: Variant, line_height: float) -> None:
    config = pager.config

    # Keep the title together with the start of the first question
    needed = config.title_spacing
    if variant.questions:
        needed += _start_height(variant.questions[0], line_height, config)
    if pager.has_content and not pager.fits(needed):
        pager.page_break()

    pager.place(config.margin, variant.title, config.title_font_size, underline=True)
    pager.advance(config.title_spacing)

    for number, question in enumerate(variant.questions, start=1):
        block = question_block_height(question, line_height, config)
        # First question was already checked together with the title
        if number > 1 and pager.has_content and not pager.fits(
            _start_height(question, line_height, config)
        ):
            pager.page_break()

        if not pager.fits(block):
            _note_oversized(pager, variant, number, block)

        _place_question(pager, question, number, line_height)

        if pager.y < config.floor:
            pager.page_break()


def _place_question(pager: Paginator, question: Question, number: int, line_height: float) -> None:
    config = pager.config

    pager.place(config.margin, f"{number}. {question.text}", config.question_font_size)
    pager.advance(line_height + config.question_spacing)

    for i, option in enumerate(question.options):
        if config.split_oversized_questions and pager.y < config.floor:
            pager.page_break()
        label = option_label(i, config.label_style)
        pager.place(config.margin + config.option_indent, f"{label}. {option}", config.question_font_size)
        pager.advance(line_height + config.option_spacing)

    pager.advance(config.question_gap)


def _note_oversized(pager: Paginator, variant: Variant, number: int, block: float) -> None:
    available = pager.y - pager.config.floor
    if pager.config.split_oversized_questions:
        logger.debug(
            f"Splitting question {number} of variant {variant.index} across pages: "
            f"{block:.0f}pt needed, {available:.0f}pt available"
        )
    else:
        pager.warn(
            f"Question {number} of variant {variant.index} overflows page {pager.page_index}: "
            f"{block:.0f}pt needed, {available:.0f}pt available"
        )
