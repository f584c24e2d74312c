"""
Unit tests for value-returning question-list edits.
"""

import pytest

from quiz_variants.core.models import Question
from quiz_variants.builder.editing import (
    add_option,
    add_question,
    remove_option,
    remove_question,
    update_option,
    update_question,
)


@pytest.fixture
def questions():
    return [
        Question("Capital of France?", ("Paris", "Lyon")),
        Question("2 + 2 = ?", ("4",)),
    ]


class TestQuestionEdits:

    def test_add_question_appends_without_options(self, questions):
        result = add_question(questions, "New?")
        assert result[-1] == Question("New?")
        assert len(questions) == 2

    def test_add_question_when_blank_then_unchanged(self, questions):
        assert add_question(questions, "   ") == questions

    def test_update_question_replaces_text_only(self, questions):
        result = update_question(questions, 0, "Capital of Italy?")
        assert result[0] == Question("Capital of Italy?", ("Paris", "Lyon"))
        assert questions[0].text == "Capital of France?"

    def test_remove_question(self, questions):
        assert remove_question(questions, 0) == [questions[1]]

    @pytest.mark.parametrize("index", [-1, 2])
    def test_out_of_range_question_raises(self, questions, index):
        with pytest.raises(IndexError, match="question index out of range"):
            remove_question(questions, index)


class TestOptionEdits:

    def test_add_option_appends(self, questions):
        result = add_option(questions, 1, "5")
        assert result[1].options == ("4", "5")
        assert questions[1].options == ("4",)

    def test_add_option_when_duplicate_then_unchanged(self, questions):
        assert add_option(questions, 0, "Paris") == questions

    def test_add_option_when_blank_then_unchanged(self, questions):
        assert add_option(questions, 0, "") == questions

    def test_update_option(self, questions):
        result = update_option(questions, 0, 1, "Marseille")
        assert result[0].options == ("Paris", "Marseille")

    def test_update_option_same_value_allowed(self, questions):
        assert update_option(questions, 0, 0, "Paris") == questions

    def test_update_option_to_duplicate_raises(self, questions):
        with pytest.raises(ValueError, match="Duplicate option"):
            update_option(questions, 0, 1, "Paris")

    def test_remove_option(self, questions):
        result = remove_option(questions, 0, 0)
        assert result[0].options == ("Lyon",)
        assert questions[0].options == ("Paris", "Lyon")

    def test_out_of_range_option_raises(self, questions):
        with pytest.raises(IndexError, match="option index out of range"):
            remove_option(questions, 1, 3)

    def test_edits_return_new_lists(self, questions):
        """Even no-op edits hand back a fresh list."""
        result = add_option(questions, 0, "Paris")
        assert result == questions
        assert result is not questions
