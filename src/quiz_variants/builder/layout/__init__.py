"""
Module: builder.layout

Purpose:
    Page layout for exam variants.
    Converts a header and a list of variants into positioned text lines
    on fixed-size pages.

Key Functions:
    - paginate(): Main entry point for layout
    - option_label(): A, B, C, ... labels

Key Classes:
    - LayoutConfig: Configuration for page layout
    - TextPlacement: Positioned text line
    - PagePlan: Single page layout plan
    - LayoutResult: Finalized page list
    - ReportLabFontMetrics: Default text measurement

Dependencies:
    - reportlab: Font metrics
    - builder.variants: Variant

Used By:
    - builder.controller: Build pipeline
"""

from .config import LayoutConfig
from .labels import LabelStyle, option_label
from .metrics import FontMetrics, ReportLabFontMetrics, MeasurementError, register_truetype_font
from .models import TextPlacement, PagePlan, LayoutResult
from .paginator import paginate, Paginator, LayoutState, LayoutError, question_block_height

__all__ = [
    # Config
    "LayoutConfig",
    "LabelStyle",
    # Metrics
    "FontMetrics",
    "ReportLabFontMetrics",
    "MeasurementError",
    "register_truetype_font",
    # Models
    "TextPlacement",
    "PagePlan",
    "LayoutResult",
    # Functions
    "paginate",
    "option_label",
    "question_block_height",
    # State machine
    "Paginator",
    "LayoutState",
    "LayoutError",
]
