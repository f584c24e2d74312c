"""
Module: builder.output.renderer

Purpose:
    Render a LayoutResult to PDF using ReportLab.
    Each PagePlan becomes one PDF page with its text lines drawn at their
    baselines.

Key Functions:
    - render_to_pdf(): Render to PDF bytes (single in-memory artifact)
    - write_pdf(): Render and write to a file

Dependencies:
    - reportlab: PDF generation
    - builder.layout.models: LayoutResult, PagePlan

Used By:
    - builder.controller: Pipeline orchestration
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional

from reportlab.pdfgen import canvas

from quiz_variants.builder.layout.metrics import DEFAULT_FONT_NAME
from quiz_variants.builder.layout.models import LayoutResult, PagePlan, TextPlacement

logger = logging.getLogger(__name__)

# Underline position/thickness relative to font size
UNDERLINE_OFFSET = 0.15
UNDERLINE_THICKNESS = 0.06


def render_to_pdf(
    layout: LayoutResult,
    *,
    font_name: str = DEFAULT_FONT_NAME,
    title: Optional[str] = None,
    author: Optional[str] = None,
) -> bytes:
    """
    Render layout result to PDF bytes.

    The whole document is built in memory; nothing is returned unless
    every page rendered.

    Args:
        layout: Layout result from paginator
        font_name: Standard or registered ReportLab font
        title: Optional PDF metadata title
        author: Optional PDF metadata author

    Returns:
        PDF file contents

    Example:
        >>> pdf_bytes = render_to_pdf(layout, title="Physics")
        >>> pdf_bytes[:5]
        b'%PDF-'
    """
    buf = io.BytesIO()

    first = layout.pages[0] if layout.pages else None
    pagesize = (first.width, first.height) if first else (600, 800)
    c = canvas.Canvas(buf, pagesize=pagesize)

    if title:
        c.setTitle(title)
    if author:
        c.setAuthor(author)

    for page in layout.pages:
        c.setPageSize((page.width, page.height))
        _render_page(c, page, font_name)
        c.showPage()

    if not layout.pages:
        logger.warning("Empty layout, creating single blank page")
        c.showPage()

    c.save()
    pdf_bytes = buf.getvalue()

    logger.info(f"Rendered {layout.page_count} pages ({len(pdf_bytes)} bytes)")
    return pdf_bytes


def write_pdf(
    layout: LayoutResult,
    output_path: Path,
    **kwargs,
) -> Path:
    """
    Render layout result and write it to output_path.

    Parent directories are created. Keyword arguments are passed to
    render_to_pdf().

    Returns:
        output_path

    Raises:
        OSError: If the file cannot be written
    """
    pdf_bytes = render_to_pdf(layout, **kwargs)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(pdf_bytes)
    logger.info(f"Wrote {output_path}")
    return output_path


def _render_page(c: canvas.Canvas, page: PagePlan, font_name: str) -> None:
    """Draw every placement of a page in order."""
    for placement in page.placements:
        _draw_text(c, placement, font_name)


def _draw_text(c: canvas.Canvas, placement: TextPlacement, font_name: str) -> None:
    """Draw one line at its baseline, with an optional underline."""
    c.setFont(font_name, placement.size)
    c.drawString(placement.x, placement.y, placement.text)

    if placement.underline:
        width = c.stringWidth(placement.text, font_name, placement.size)
        rule_y = placement.y - placement.size * UNDERLINE_OFFSET
        c.saveState()
        c.setLineWidth(placement.size * UNDERLINE_THICKNESS)
        c.line(placement.x, rule_y, placement.x + width, rule_y)
        c.restoreState()
