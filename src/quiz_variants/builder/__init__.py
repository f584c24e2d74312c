"""
Module: builder

Purpose:
    Building pipeline for randomized exam variants. Splits a question
    list into shuffled variants, lays them out on fixed-size pages and
    renders the pages to a PDF.

Key Functions:
    - build_document(): Main entry point for document generation
    - partition_into_variants(): Shuffle and split into variants
    - paginate(): Lay out variants onto pages
    - render_to_pdf(): Serialize pages to PDF bytes

Key Classes:
    - BuilderConfig: Configuration for building
    - LayoutConfig: Page layout configuration
    - BuildResult / BuildError

Dependencies:
    - reportlab: Font metrics and PDF generation
    - quiz_variants.core.models: Question, DocumentHeader

Used By:
    - Question collectors (UI / scripts)
"""

from .config import BuilderConfig
from .controller import build_document, BuildResult, BuildError
from .layout import LayoutConfig, paginate
from .output import render_to_pdf, document_filename
from .variants import partition_into_variants, shuffle, shuffle_options_within_questions

__all__ = [
    # Config
    "BuilderConfig",
    "LayoutConfig",
    # Engine
    "shuffle",
    "partition_into_variants",
    "shuffle_options_within_questions",
    # Layout / output
    "paginate",
    "render_to_pdf",
    "document_filename",
    # Controller
    "build_document",
    "BuildResult",
    "BuildError",
]
