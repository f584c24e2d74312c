"""
Module: header

Purpose:
    DocumentHeader dataclass - the metadata printed once at the top of the
    first page of a generated document.

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.paginator: Header lines
    - builder.config: BuilderConfig
    - builder.output.filename: Download filename from subject
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentHeader:
    """
    Header metadata for a generated document (immutable).

    All fields are opaque strings and are not validated. Blank values are
    printed as-is (e.g. "Grade: ").

    Attributes:
        subject: Subject name, also used for the download filename
        grade: Class / grade
        date: Exam date as entered by the author
        author: Author name (printed only when non-blank)
    """

    subject: str = ""
    grade: str = ""
    date: str = ""
    author: str = ""

    @property
    def has_author(self) -> bool:
        """True when the author line should be printed."""
        return bool(self.author.strip())
