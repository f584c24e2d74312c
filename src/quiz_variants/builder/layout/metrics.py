"""
Module: builder.layout.metrics

Purpose:
    Text measurement used by the layout engine.

Key Classes:
    - FontMetrics: Protocol for measurement providers
    - ReportLabFontMetrics: Provider backed by ReportLab's font tables
    - MeasurementError: Font metrics unavailable or unusable, or text the
      font cannot encode

Key Functions:
    - register_truetype_font(): Register a TrueType file for measurement
      and rendering

Dependencies:
    - reportlab.pdfbase.pdfmetrics: Font lookup and string widths
    - reportlab.pdfbase.ttfonts: TrueType font registration

Used By:
    - builder.layout.paginator
    - builder.controller
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Optional, Protocol, Union

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont, TTFError

logger = logging.getLogger(__name__)

DEFAULT_FONT_NAME = "Helvetica"

# Python codecs for the encodings ReportLab gives standard Type 1 fonts
_TYPE1_CODECS = {
    "WinAnsiEncoding": "cp1252",
    "MacRomanEncoding": "mac_roman",
}


class MeasurementError(Exception):
    """Font metrics could not be obtained; aborts the layout."""
    pass


class FontMetrics(Protocol):
    """Text measurement capability required by the paginator."""

    def height_at_size(self, size: float) -> float:
        """Line height of the font at the given size."""
        ...

    def width_of_text_at_size(self, text: str, size: float) -> float:
        """Advance width of text at the given size."""
        ...


class ReportLabFontMetrics:
    """
    Font metrics from ReportLab's registered fonts.

    The line height is ascent minus descent, i.e. the full glyph extent
    including descenders. For Helvetica at 12pt that is 11.1pt.

    Args:
        font_name: Name of a standard or registered font

    Raises:
        MeasurementError: If the font is not known to ReportLab

    Example:
        >>> metrics = ReportLabFontMetrics()
        >>> round(metrics.height_at_size(12), 1)
        11.1
    """

    def __init__(self, font_name: str = DEFAULT_FONT_NAME):
        try:
            self._font = pdfmetrics.getFont(font_name)
        except Exception as e:
            raise MeasurementError(f"Font not available: {font_name!r}") from e
        self.font_name = font_name

    def height_at_size(self, size: float) -> float:
        ascent, descent = pdfmetrics.getAscentDescent(self.font_name, size)
        return ascent - descent

    def width_of_text_at_size(self, text: str, size: float) -> float:
        """
        Advance width of text at the given size.

        Raises:
            MeasurementError: If the font has no glyph for some character
        """
        missing = self.unsupported_characters(text)
        if missing:
            raise MeasurementError(
                f"Font {self.font_name!r} cannot encode {missing!r} in {text[:40]!r}; "
                f"use a TrueType font that covers these characters"
            )
        return pdfmetrics.stringWidth(text, self.font_name, size)

    def unsupported_characters(self, text: str) -> str:
        """
        Characters of text the font cannot draw, in order of first use.

        TrueType fonts are checked against their character map. Standard
        Type 1 fonts are checked against their single-byte encoding.
        Fonts with any other encoding are not checked.
        """
        missing = []
        for ch in text:
            if ch not in missing and not self._supports(ch):
                missing.append(ch)
        return "".join(missing)

    def _supports(self, ch: str) -> bool:
        if isinstance(self._font, TTFont):
            return ord(ch) in self._font.face.charToGlyph
        codec = _TYPE1_CODECS.get(getattr(self._font, "encName", None))
        if codec is None:
            return True
        try:
            ch.encode(codec)
        except UnicodeEncodeError:
            return False
        return True

    def __repr__(self) -> str:
        return f"ReportLabFontMetrics({self.font_name!r})"


def checked_line_height(metrics: FontMetrics, size: float) -> float:
    """
    Ask a provider for a line height and reject unusable answers.

    Raises:
        MeasurementError: If the height is not a positive finite number
    """
    height = metrics.height_at_size(size)
    if not isinstance(height, (int, float)) or not math.isfinite(height) or height <= 0:
        raise MeasurementError(f"Invalid line height from {metrics!r} at {size}pt: {height!r}")
    return float(height)


def register_truetype_font(font_path: Union[str, Path], font_name: Optional[str] = None) -> str:
    """
    Register a TrueType font file with ReportLab.

    The font is embedded (subsetted) in rendered PDFs, so it can carry
    characters the standard fonts lack, e.g. Cyrillic.

    Args:
        font_path: Path to a .ttf file
        font_name: Registered name; defaults to the file stem

    Returns:
        The name to pass as font_name for measurement and rendering

    Raises:
        MeasurementError: If the file is missing or not a usable TrueType font
    """
    path = Path(font_path).expanduser()
    name = font_name or path.stem
    if not path.is_file():
        raise MeasurementError(f"Font file not found: {path}")
    try:
        pdfmetrics.registerFont(TTFont(name, str(path)))
    except (TTFError, OSError) as e:
        raise MeasurementError(f"Cannot load TrueType font {path}: {e}") from e
    logger.info(f"Registered TrueType font {name!r} from {path}")
    return name
