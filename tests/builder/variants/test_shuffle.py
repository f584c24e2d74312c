"""
Unit tests for the Fisher-Yates shuffle and per-question option shuffle.
"""

import random
from collections import Counter
from itertools import permutations

import pytest

from quiz_variants.core.models import Question
from quiz_variants.builder.variants import shuffle, shuffle_options_within_questions


class TestShuffle:
    """Tests for shuffle()."""

    def test_shuffle_returns_permutation(self):
        """Same multiset and length as the input."""
        items = ["a", "b", "b", "c", "d", "e"]
        result = shuffle(items, random.Random(3))
        assert len(result) == len(items)
        assert Counter(result) == Counter(items)

    def test_shuffle_does_not_mutate_input(self):
        """The caller's sequence is copied, never touched."""
        items = [1, 2, 3, 4, 5]
        snapshot = list(items)
        shuffle(items, random.Random(1))
        assert items == snapshot

    def test_shuffle_accepts_tuples_and_returns_list(self):
        """Works on any sequence type."""
        result = shuffle(("x", "y", "z"), random.Random(5))
        assert isinstance(result, list)
        assert sorted(result) == ["x", "y", "z"]

    def test_shuffle_is_generic_over_questions(self, sample_questions):
        """Questions shuffle with the same function as strings."""
        result = shuffle(sample_questions, random.Random(2))
        assert Counter(result) == Counter(sample_questions)

    def test_shuffle_when_empty_or_single_then_no_draws(self, scripted_rng):
        """Nothing to swap means nothing drawn."""
        rng = scripted_rng([])
        assert shuffle([], rng) == []
        assert shuffle(["only"], rng) == ["only"]
        assert rng.calls == []

    def test_shuffle_follows_fisher_yates_draw_order(self, scripted_rng):
        """i walks from last to 1 drawing j in [0, i]."""
        rng = scripted_rng([0, 0])
        # i=2, j=0: [c, b, a]; i=1, j=0: [b, c, a]
        assert shuffle(["a", "b", "c"], rng) == ["b", "c", "a"]
        assert rng.calls == [3, 2]

    def test_shuffle_when_draws_equal_index_then_identity(self, scripted_rng):
        """Drawing j == i at every step leaves the order unchanged."""
        rng = scripted_rng([3, 2, 1])
        assert shuffle(["a", "b", "c", "d"], rng) == ["a", "b", "c", "d"]

    def test_shuffle_same_seed_same_result(self):
        """Seeded sources are reproducible."""
        items = list(range(20))
        assert shuffle(items, random.Random(99)) == shuffle(items, random.Random(99))

    def test_shuffle_distribution_is_uniform(self):
        """All 6 orderings of 3 items appear with roughly equal frequency."""
        rng = random.Random(0)
        trials = 6000
        counts = Counter(tuple(shuffle("abc", rng)) for _ in range(trials))

        assert set(counts) == set(permutations("abc"))
        for perm, count in counts.items():
            assert 850 <= count <= 1150, f"{perm} drawn {count} times"


class TestShuffleOptionsWithinQuestions:
    """Tests for shuffle_options_within_questions()."""

    def test_option_sets_preserved(self, sample_questions):
        """Each question keeps exactly its own options."""
        result = shuffle_options_within_questions(sample_questions, random.Random(4))
        assert len(result) == len(sample_questions)
        for before, after in zip(sample_questions, result):
            assert after.text == before.text
            assert sorted(after.options) == sorted(before.options)

    def test_question_order_unchanged(self, sample_questions):
        """Only options move, not questions."""
        result = shuffle_options_within_questions(sample_questions, random.Random(4))
        assert [q.text for q in result] == [q.text for q in sample_questions]

    def test_input_questions_not_mutated(self, sample_questions):
        """Original list and questions are unchanged."""
        snapshot = [Question(q.text, q.options) for q in sample_questions]
        shuffle_options_within_questions(sample_questions, random.Random(8))
        assert sample_questions == snapshot

    def test_each_question_draws_independently(self, sample_questions, scripted_rng):
        """Draws are consumed question by question (2, 0 and 3 options)."""
        rng = scripted_rng([0, 0, 0])
        result = shuffle_options_within_questions(sample_questions, rng)

        assert rng.calls == [2, 3, 2]
        assert result[0].options == ("Joule", "Newton")
        assert result[1].options == ()
        assert result[2].options == ("Mass", "Velocity", "Speed")

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_large_option_lists_conserved(self, seed, question_factory):
        """Counts are conserved for long option lists too."""
        q = question_factory("Q", 40)
        (result,) = shuffle_options_within_questions([q], random.Random(seed))
        assert Counter(result.options) == Counter(q.options)
