"""
Module: builder.layout.models

Purpose:
    Data models for page layout.
    Immutable dataclasses representing positioned text lines and pages.

Key Classes:
    - TextPlacement: One line of text at an (x, y) baseline
    - PagePlan: Complete page layout
    - LayoutResult: Final layout output

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.paginator: Creates PagePlans
    - builder.output.renderer: Draws PagePlans
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class TextPlacement:
    """
    A line of text positioned on a page.

    Attributes:
        x: Left edge of the baseline (points from page left)
        y: Baseline (points from page bottom)
        text: Text to draw
        size: Font size in points
        underline: Draw a rule under the text
    """

    x: float
    y: float
    text: str
    size: float
    underline: bool = False


@dataclass(frozen=True)
class PagePlan:
    """
    Complete layout plan for a single page.

    Attributes:
        index: Page number (0-indexed)
        placements: Lines in draw order (top-to-bottom, left-to-right)
        width: Page width in points
        height: Page height in points

    Example:
        >>> page = PagePlan(index=0, placements=(p1, p2), width=600, height=800)
        >>> page.placement_count
        2
    """

    index: int
    placements: tuple[TextPlacement, ...]
    width: float
    height: float

    @property
    def placement_count(self) -> int:
        """Number of lines on this page."""
        return len(self.placements)

    @property
    def is_empty(self) -> bool:
        """Check if page has no placements."""
        return len(self.placements) == 0

    @property
    def lowest_y(self) -> Optional[float]:
        """Lowest baseline on the page, or None for an empty page."""
        if not self.placements:
            return None
        return min(p.y for p in self.placements)

    @property
    def texts(self) -> list[str]:
        """Text of every line, in draw order."""
        return [p.text for p in self.placements]


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output with diagnostics.

    Attributes:
        pages: Tuple of PagePlans (never empty for a finished layout)
        warnings: Overflow and width warnings collected during layout

    Example:
        >>> result = LayoutResult(pages=(page1, page2))
        >>> result.page_count
        2
    """

    pages: tuple[PagePlan, ...]
    warnings: list[str] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        """Number of pages in layout."""
        return len(self.pages)

    @property
    def total_placements(self) -> int:
        """Total number of lines across all pages."""
        return sum(p.placement_count for p in self.pages)

    def iter_placements(self):
        """Yield (page_index, placement) pairs in draw order."""
        for page in self.pages:
            for placement in page.placements:
                yield page.index, placement
