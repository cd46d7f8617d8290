"""Unit tests for the generation pipeline."""

from pathlib import Path
from unittest.mock import patch

import pytest

from circlesketch.config import RenderConfig, SketchSettings
from circlesketch.core.pipeline import (
    MAX_TERMS,
    MIN_SAMPLE_POINTS,
    SketchGenerator,
    build_sketch,
    sample_count,
    term_count,
)
from circlesketch.domain import Contour, Point
from circlesketch.exceptions import OutputWriteError

SQUARE = Contour.from_tuples([(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)])


@pytest.fixture(scope="module")
def square_sketch():
    return build_sketch(SQUARE, RenderConfig(max_harmonics=30))


class TestCounts:
    """Tests for point and term counts."""

    def test_minimum_points(self):
        """Test small contours are resampled to the minimum."""
        assert sample_count(SQUARE, RenderConfig()) == MIN_SAMPLE_POINTS

    def test_points_follow_harmonics(self):
        """Test a large harmonic count raises the point count."""
        assert sample_count(SQUARE, RenderConfig(max_harmonics=800)) == 1600

    def test_points_follow_input(self):
        """Test dense inputs keep their point count."""
        dense = Contour.from_tuples((i, 0) for i in range(1500))
        assert sample_count(dense, RenderConfig()) == 1500

    def test_term_count(self):
        """Test terms are half the points, bounded above."""
        assert term_count(1000) == MAX_TERMS
        assert term_count(400) == 200
        assert term_count(5000) == MAX_TERMS


class TestBuildSketch:
    """Tests for build_sketch."""

    def test_resampled(self, square_sketch):
        """Test the contour is resampled with fixed end points."""
        assert len(square_sketch.contour) == MIN_SAMPLE_POINTS
        assert square_sketch.contour.points[0] == Point(0.0, 0.0)
        assert square_sketch.contour.points[-1] == Point(0.0, 0.0)

    def test_coefficients(self, square_sketch):
        """Test 2K+1 coefficients sorted by radius."""
        decomposition = square_sketch.decomposition
        assert len(decomposition) == 2 * MAX_TERMS + 1
        radii = [c.radius for c in decomposition]
        assert radii == sorted(radii, reverse=True)

    def test_centroid(self, square_sketch):
        """Test the leading term is the square's center."""
        c0 = square_sketch.decomposition.coefficient(0)
        assert c0.re == pytest.approx(5.0, abs=0.05)
        assert c0.im == pytest.approx(5.0, abs=0.05)

    def test_schedule(self, square_sketch):
        """Test the loops end at the configured maximum."""
        assert square_sketch.cap == 30
        assert square_sketch.loops[-1].harmonic_count == 30
        assert square_sketch.schedule_text == "1 1 10 1 ; 10 5 50 2 ; 50 25 1000 4"

    def test_outline_and_view_box(self, square_sketch):
        """Test the outline path and the viewport."""
        assert square_sketch.svg_path.startswith("M 0 0 L ")
        assert " M " not in square_sketch.svg_path
        assert square_sketch.view_box.size == pytest.approx(12.0)

    def test_flip_y(self):
        """Test y is negated before processing."""
        sketch = build_sketch(SQUARE, RenderConfig(max_harmonics=3, flip_y=True))
        assert max(p.y for p in sketch.contour) == pytest.approx(0.0)
        assert min(p.y for p in sketch.contour) == pytest.approx(-10.0)


class TestSketchGenerator:
    """Tests for SketchGenerator."""

    def test_generate_writes_both_documents(self, tmp_path: Path):
        """Test a full run writes the page and the embed."""
        generator = SketchGenerator(SketchSettings(render=RenderConfig(max_harmonics=5)), quiet=True)
        stats = generator.generate(SQUARE, tmp_path / "square", source="test", command="circles-sketch points square.yml")

        assert (tmp_path / "square.html").exists()
        assert (tmp_path / "square-embed.html").exists()
        assert stats.outputs == [str(tmp_path / "square.html"), str(tmp_path / "square-embed.html")]
        assert stats.input_points == len(SQUARE)
        assert stats.resampled_points == MIN_SAMPLE_POINTS
        assert stats.coefficient_count == 2 * MAX_TERMS + 1
        assert stats.loop_count == 5
        assert stats.duration_seconds >= 0.0

    def test_render_failure_writes_nothing(self, tmp_path: Path):
        """Test no output exists when rendering fails."""
        generator = SketchGenerator(SketchSettings(render=RenderConfig(max_harmonics=5)), quiet=True)
        with patch("circlesketch.core.pipeline.render_embed", side_effect=RuntimeError("boom")):
            with pytest.raises(RuntimeError, match="boom"):
                generator.generate(SQUARE, tmp_path / "square")
        assert list(tmp_path.iterdir()) == []

    def test_write_failure_propagates(self, tmp_path: Path):
        """Test write errors surface as OutputWriteError."""
        generator = SketchGenerator(SketchSettings(render=RenderConfig(max_harmonics=5)), quiet=True)
        with patch("circlesketch.io.writer.os.replace", side_effect=OSError("read-only")):
            with pytest.raises(OutputWriteError):
                generator.generate(SQUARE, tmp_path / "square")
        assert list(tmp_path.iterdir()) == []
