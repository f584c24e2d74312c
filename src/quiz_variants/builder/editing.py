"""
Module: builder.editing

Purpose:
    Value-returning edits on a question list, for the collector that
    assembles questions before a build.

    Every function takes a list and returns a new list; the input list and
    the questions in it are never mutated, so a list that was handed to a
    build stays valid after later edits.

Key Functions:
    - add_question(), update_question(), remove_question()
    - add_option(), update_option(), remove_option()

Dependencies:
    - quiz_variants.core.models: Question

Used By:
    - Question collectors (UI / scripts) feeding builder.controller
"""

from __future__ import annotations

from typing import List, Sequence

from quiz_variants.core.models import Question


def add_question(questions: Sequence[Question], text: str) -> List[Question]:
    """
    Append a question with no options.

    Blank (whitespace-only) text leaves the list unchanged.

    Example:
        >>> add_question([], "Capital of France?")
        [Question(text='Capital of France?', options=())]
    """
    if not text.strip():
        return list(questions)
    return [*questions, Question(text=text)]


def update_question(questions: Sequence[Question], index: int, text: str) -> List[Question]:
    """
    Replace the text of the question at index.

    Raises:
        IndexError: If index is out of range
    """
    _check_index(questions, index, "question")
    updated = list(questions)
    updated[index] = updated[index].with_text(text)
    return updated


def remove_question(questions: Sequence[Question], index: int) -> List[Question]:
    """
    Remove the question at index.

    Raises:
        IndexError: If index is out of range
    """
    _check_index(questions, index, "question")
    return [q for i, q in enumerate(questions) if i != index]


def add_option(questions: Sequence[Question], index: int, option: str) -> List[Question]:
    """
    Append an option to the question at index.

    Blank options and options already present on that question leave the
    list unchanged.

    Raises:
        IndexError: If index is out of range
    """
    _check_index(questions, index, "question")
    question = questions[index]
    if not option.strip() or option in question.options:
        return list(questions)

    updated = list(questions)
    updated[index] = question.with_options([*question.options, option])
    return updated


def update_option(
    questions: Sequence[Question],
    index: int,
    option_index: int,
    option: str,
) -> List[Question]:
    """
    Replace one option of the question at index.

    Raises:
        IndexError: If either index is out of range
        ValueError: If the new text duplicates another option of the question
    """
    _check_index(questions, index, "question")
    question = questions[index]
    _check_index(question.options, option_index, "option")

    others = [o for i, o in enumerate(question.options) if i != option_index]
    if option in others:
        raise ValueError(f"Duplicate option for question {index}: {option!r}")

    options = list(question.options)
    options[option_index] = option
    updated = list(questions)
    updated[index] = question.with_options(options)
    return updated


def remove_option(questions: Sequence[Question], index: int, option_index: int) -> List[Question]:
    """
    Remove one option of the question at index.

    Raises:
        IndexError: If either index is out of range
    """
    _check_index(questions, index, "question")
    question = questions[index]
    _check_index(question.options, option_index, "option")

    updated = list(questions)
    updated[index] = question.with_options(
        o for i, o in enumerate(question.options) if i != option_index
    )
    return updated


def _check_index(items: Sequence, index: int, kind: str) -> None:
    if not 0 <= index < len(items):
        raise IndexError(f"{kind} index out of range: {index} (have {len(items)})")
