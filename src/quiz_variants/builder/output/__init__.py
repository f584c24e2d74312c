"""
Module: builder.output

Purpose:
    PDF rendering and output naming.
    Converts LayoutResult to PDF bytes using ReportLab.

Key Functions:
    - render_to_pdf(): Render layout to PDF bytes
    - write_pdf(): Render layout to a PDF file
    - document_filename(): "<subject>-questions.pdf"

Dependencies:
    - reportlab: PDF generation
    - builder.layout.models: LayoutResult

Used By:
    - builder.controller: Pipeline orchestration
"""

from .renderer import render_to_pdf, write_pdf
from .filename import document_filename

__all__ = [
    "render_to_pdf",
    "write_pdf",
    "document_filename",
]
