"""
Integration tests for the build pipeline.
"""

import io
from collections import Counter
from pathlib import Path
from unittest.mock import patch

import pytest
import reportlab
from pypdf import PdfReader

from quiz_variants.core.models import DocumentHeader, Question
from quiz_variants.builder import BuilderConfig, BuildError, build_document
from quiz_variants.builder.layout import MeasurementError, ReportLabFontMetrics

DEJAVU_SANS = Path("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf")


@pytest.fixture
def config(header):
    return BuilderConfig(header=header, variant_count=2, seed=42)


class TestBuildDocument:

    def test_end_to_end_three_questions_two_variants(self, sample_questions, config):
        """Two variants covering all three questions exactly once."""
        result = build_document(sample_questions, config)

        assert [v.index for v in result.variants] == [1, 2]
        assert [v.question_count for v in result.variants] == [2, 1]
        covered = Counter(q for v in result.variants for q in v.questions)
        assert covered == Counter(sample_questions)

        texts = [p.text for _, p in result.layout.iter_placements()]
        numbered = [t for t in texts if t[:1].isdigit()]
        assert [t.split(".")[0] for t in numbered] == ["1", "2", "1"]

    def test_returns_pdf_and_filename(self, sample_questions, config):
        result = build_document(sample_questions, config)

        assert result.filename == "Physics-questions.pdf"
        reader = PdfReader(io.BytesIO(result.pdf_bytes))
        assert len(reader.pages) == result.page_count == 1

    def test_zero_questions_single_variant(self):
        """Header plus one title on a single page."""
        result = build_document([], BuilderConfig(variant_count=1, seed=1))

        assert result.page_count == 1
        assert result.layout.pages[0].texts == ["Subject: ", "Grade: ", "Date: ", "Variant 1"]
        assert result.filename == "test-questions.pdf"

    def test_more_variants_than_questions(self, sample_questions, header):
        result = build_document(sample_questions, BuilderConfig(header=header, variant_count=5, seed=3))

        assert [v.question_count for v in result.variants] == [1, 1, 1, 0, 0]
        titles = [p.text for _, p in result.layout.iter_placements() if p.text.startswith("Variant")]
        assert titles == [f"Variant {i}" for i in range(1, 6)]

    def test_same_seed_same_document_layout(self, sample_questions, config):
        first = build_document(sample_questions, config)
        second = build_document(sample_questions, config)

        assert first.variants == second.variants
        assert first.layout == second.layout

    def test_seed_recorded_when_not_given(self, sample_questions, header):
        result = build_document(sample_questions, BuilderConfig(header=header, variant_count=2))
        seed = result.metadata["seed"]

        replay = build_document(sample_questions, BuilderConfig(header=header, variant_count=2, seed=seed))
        assert replay.variants == result.variants

    def test_shuffle_options_preserves_option_sets(self, sample_questions, header):
        config = BuilderConfig(header=header, variant_count=1, seed=5, shuffle_options=True)
        result = build_document(sample_questions, config)

        by_text = {q.text: q for q in sample_questions}
        for q in result.variants[0].questions:
            assert sorted(q.options) == sorted(by_text[q.text].options)

    def test_input_list_not_mutated(self, sample_questions, header):
        snapshot = list(sample_questions)
        build_document(sample_questions, BuilderConfig(header=header, variant_count=2, shuffle_options=True))
        assert sample_questions == snapshot

    def test_metadata(self, sample_questions, config):
        result = build_document(sample_questions, config)
        assert result.metadata["seed"] == 42
        assert result.metadata["variant_count"] == 2
        assert result.metadata["question_count"] == 3
        assert result.metadata["variant_sizes"] == [2, 1]
        assert result.metadata["page_count"] == 1

    def test_write_to_directory(self, sample_questions, config, tmp_path):
        result = build_document(sample_questions, config)
        path = result.write_to(tmp_path / "out")

        assert path.name == "Physics-questions.pdf"
        assert path.read_bytes() == result.pdf_bytes


class TestBuildErrors:

    @pytest.mark.parametrize("variant_count", [0, -2])
    def test_invalid_variant_count_rejected_by_config(self, variant_count):
        with pytest.raises(ValueError, match="variant_count must be positive"):
            BuilderConfig(variant_count=variant_count)

    def test_non_integer_variant_count_rejected(self):
        with pytest.raises(ValueError, match="variant_count must be an integer"):
            BuilderConfig(variant_count=2.5)

    def test_unknown_font_wrapped_in_build_error(self, sample_questions):
        config = BuilderConfig(variant_count=1, font_name="NoSuchFont-Regular")
        with pytest.raises(BuildError, match="Layout failed") as exc_info:
            build_document(sample_questions, config)
        assert isinstance(exc_info.value.__cause__, MeasurementError)

    def test_measurement_failure_aborts_without_pdf(self, sample_questions):
        with patch.object(
            ReportLabFontMetrics,
            "height_at_size",
            side_effect=MeasurementError("metrics unavailable"),
        ):
            with pytest.raises(BuildError, match="metrics unavailable"):
                build_document(sample_questions, BuilderConfig(variant_count=1))


class TestBuilderConfig:

    def test_defaults(self):
        config = BuilderConfig()
        assert config.variant_count == 1
        assert config.seed is None
        assert config.shuffle_options is False
        assert config.header == DocumentHeader()
        assert config.layout.page_size == (600, 800)
        assert config.font_name == "Helvetica"


class TestFonts:

    @pytest.fixture
    def cyrillic_questions(self):
        return [Question("Ўзбекистон пойтахти?", ("Тошкент", "Самарқанд"))]

    def test_text_outside_standard_font_fails_build(self, cyrillic_questions):
        config = BuilderConfig(header=DocumentHeader(subject="Тарих"), seed=1)
        with pytest.raises(BuildError, match="cannot encode") as exc_info:
            build_document(cyrillic_questions, config)
        assert isinstance(exc_info.value.__cause__, MeasurementError)

    def test_truetype_font_path_used_for_layout_and_rendering(self, sample_questions, header):
        vera = Path(reportlab.__file__).parent / "fonts" / "Vera.ttf"
        result = build_document(sample_questions, BuilderConfig(header=header, seed=1, font_path=vera))

        assert result.metadata["font_name"] == "Vera"
        text = PdfReader(io.BytesIO(result.pdf_bytes)).pages[0].extract_text()
        assert "Variant 1" in text

    def test_missing_font_file_wrapped_in_build_error(self, sample_questions, tmp_path):
        config = BuilderConfig(font_path=tmp_path / "missing.ttf")
        with pytest.raises(BuildError, match="Font file not found"):
            build_document(sample_questions, config)

    @pytest.mark.skipif(not DEJAVU_SANS.is_file(), reason="DejaVu Sans not installed")
    def test_cyrillic_rendered_with_covering_font(self, cyrillic_questions):
        config = BuilderConfig(header=DocumentHeader(subject="Тарих"), seed=1, font_path=DEJAVU_SANS)
        result = build_document(cyrillic_questions, config)

        text = PdfReader(io.BytesIO(result.pdf_bytes)).pages[0].extract_text()
        assert "Тошкент" in text
        assert "■" not in text
