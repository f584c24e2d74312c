"""
Module: builder.layout.labels

Purpose:
    Alphabetic option labels (A, B, C, ...).

Key Functions:
    - option_label(): Label for an option position

Key Classes:
    - LabelStyle: What happens after the 26th option

Used By:
    - builder.layout.config: LayoutConfig.label_style
    - builder.layout.paginator: Option lines
"""

from enum import Enum, auto

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class LabelStyle(Enum):
    """
    Controls labels for option index 26 and above.

    Attributes:
        WRAP: Cycle A-Z again, so option 27 is labelled "A" (the
              default).
        EXTENDED: Spreadsheet-style labels: ..., Z, AA, AB, ..., AZ, BA, ...

    Example:
        >>> option_label(26, LabelStyle.WRAP)
        'A'
        >>> option_label(26, LabelStyle.EXTENDED)
        'AA'
    """

    WRAP = auto()
    EXTENDED = auto()


def option_label(index: int, style: LabelStyle = LabelStyle.WRAP) -> str:
    """
    Get the label for the option at a 0-based position.

    Args:
        index: Position of the option within its question
        style: Labelling past Z

    Returns:
        Label without the trailing period

    Raises:
        ValueError: If index is negative
    """
    if index < 0:
        raise ValueError(f"index must be non-negative: {index}")

    if style is LabelStyle.WRAP:
        return ALPHABET[index % len(ALPHABET)]

    # Bijective base-26
    label = ""
    n = index + 1
    while n:
        n, remainder = divmod(n - 1, len(ALPHABET))
        label = ALPHABET[remainder] + label
    return label
