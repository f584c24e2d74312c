import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import quiz_variants
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from quiz_variants.core.models import DocumentHeader, Question


class FixedMetrics:
    """Deterministic metrics: fixed line height, 0.5 * size per character."""

    def __init__(self, line_height: float = 10.0):
        self.line_height = line_height
        self.height_calls = 0

    def height_at_size(self, size: float) -> float:
        self.height_calls += 1
        return self.line_height

    def width_of_text_at_size(self, text: str, size: float) -> float:
        return len(text) * size * 0.5


class SequenceRandom:
    """Random source that replays scripted randrange results."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        value = self.values.pop(0)
        assert 0 <= value < stop
        return value


# Common test fixtures
@pytest.fixture
def fixed_metrics():
    """Metrics with a 10pt line height."""
    return FixedMetrics()


@pytest.fixture
def header():
    """Typical document header."""
    return DocumentHeader(subject="Physics", grade="9B", date="2026-10-19", author="")


@pytest.fixture
def sample_questions():
    """Three questions with 2, 0 and 3 options."""
    return [
        Question("What is the unit of force?", ("Newton", "Joule")),
        Question("Explain inertia."),
        Question("Which is a vector?", ("Speed", "Mass", "Velocity")),
    ]


@pytest.fixture
def question_factory():
    """Factory for questions with n generated options."""
    def _create(text: str, option_count: int = 0) -> Question:
        return Question(text, tuple(f"{text} option {i}" for i in range(option_count)))
    return _create


@pytest.fixture
def scripted_rng():
    """Factory for random sources replaying fixed draws."""
    return SequenceRandom
