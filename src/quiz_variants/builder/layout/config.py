"""
Module: builder.layout.config

Purpose:
    Configuration for the text layout engine.
    Defines page dimensions, margins, font sizes and vertical spacing.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)
    - builder.layout.labels: LabelStyle

Used By:
    - builder.layout.paginator: Cursor arithmetic and page breaks
    - builder.output.renderer: Page size
"""

from __future__ import annotations

from dataclasses import dataclass

from .labels import LabelStyle


# Page dimensions in PDF points (same unit as font size)
DEFAULT_PAGE_WIDTH = 600
DEFAULT_PAGE_HEIGHT = 800
DEFAULT_MARGIN = 50


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for page layout (immutable).

    All lengths are in points. The y axis points up (PDF convention): the
    cursor starts at `top` and is decremented as lines are placed.

    Attributes:
        page_width: Page width
        page_height: Page height
        margin: Margin on every side
        bottom_reserve: Extra space kept free above the bottom margin;
            the cursor may not start a block below margin + bottom_reserve
        header_x: X of the header block (subject/grade/date/author)
        header_font_size: Header font size
        header_line_spacing: Distance between header lines
        header_block_height: Cursor advance after the header block
        title_font_size: "Variant N" font size
        title_spacing: Cursor advance after a variant title
        question_font_size: Font size for questions and options
        question_spacing: Extra advance after a question line
        option_indent: Option x offset from the question margin
        option_spacing: Extra advance after an option line
        question_gap: Extra advance after a question's options
        variant_gap: Advance after a variant (never triggers a page break)
        label_style: Option label style past 26 options
        split_oversized_questions: Break between option lines when a single
            question does not fit on a fresh page

    Example:
        >>> config = LayoutConfig()
        >>> config.top, config.floor
        (750, 90)
    """

    # Page dimensions
    page_width: int = DEFAULT_PAGE_WIDTH
    page_height: int = DEFAULT_PAGE_HEIGHT
    margin: int = DEFAULT_MARGIN
    bottom_reserve: int = 40

    # Header block
    header_x: int = 400
    header_font_size: int = 14
    header_line_spacing: int = 20
    header_block_height: int = 80

    # Variant titles
    title_font_size: int = 18
    title_spacing: int = 30

    # Questions and options
    question_font_size: int = 12
    question_spacing: int = 10
    option_indent: int = 20
    option_spacing: int = 5
    question_gap: int = 10
    variant_gap: int = 40

    # Behavior
    label_style: LabelStyle = LabelStyle.WRAP
    split_oversized_questions: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.margin < 0:
            raise ValueError(f"margin must be non-negative: {self.margin}")
        if self.bottom_reserve < 0:
            raise ValueError(f"bottom_reserve must be non-negative: {self.bottom_reserve}")
        for name in ("header_font_size", "title_font_size", "question_font_size"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive: {getattr(self, name)}")
        if self.available_width <= 0:
            raise ValueError("Margins exceed page width")
        if self.top <= self.floor:
            raise ValueError("Margins exceed page height")

    @property
    def top(self) -> int:
        """Cursor position at the top of a fresh page."""
        return self.page_height - self.margin

    @property
    def floor(self) -> int:
        """Lowest cursor position a block may end at."""
        return self.margin + self.bottom_reserve

    @property
    def usable_height(self) -> int:
        """Vertical space between the top cursor and the floor on a fresh page."""
        return self.top - self.floor

    @property
    def available_width(self) -> int:
        """Width available for content (excluding margins)."""
        return self.page_width - 2 * self.margin

    @property
    def right_edge(self) -> int:
        """Rightmost x a line should reach."""
        return self.page_width - self.margin

    @property
    def page_size(self) -> tuple[int, int]:
        """(width, height) tuple for the PDF canvas."""
        return (self.page_width, self.page_height)
