"""
Module: builder.output.filename

Purpose:
    Download filename for a generated document:
    "<subject>-questions.pdf", or "test-questions.pdf" for a blank subject.
"""

from __future__ import annotations

import re

DEFAULT_BASENAME = "test"
FILENAME_SUFFIX = "-questions"

# Characters not allowed in file names on common platforms
_UNSAFE_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


def document_filename(subject: str, extension: str = "pdf") -> str:
    """
    Build the download filename from the subject.

    Args:
        subject: Subject header field (may be blank)
        extension: File extension without the dot

    Returns:
        Filename such as "Physics-questions.pdf"

    Example:
        >>> document_filename("")
        'test-questions.pdf'
        >>> document_filename("Maths/Algebra")
        'Maths_Algebra-questions.pdf'
    """
    base = _UNSAFE_CHARS.sub("_", (subject or "").strip()) or DEFAULT_BASENAME
    return f"{base}{FILENAME_SUFFIX}.{extension}"
