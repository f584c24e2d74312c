"""
Core Models Package

Immutable data models shared by the variant engine, the layout engine
and the PDF renderer.

All models in this package are frozen dataclasses. Shuffling and
partitioning build new tuples and lists of these records, so a question
list handed to one build can be reused for the next one unchanged.
"""

from .header import DocumentHeader
from .questions import Question

__all__ = [
    "DocumentHeader",
    "Question",
]
