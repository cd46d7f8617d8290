"""Unit tests for the Fourier decomposition."""

import cmath
import math

import pytest

from circlesketch.core.fourier import fourier_decomposition, frequencies
from circlesketch.core.resampler import resample
from circlesketch.domain import Contour
from circlesketch.exceptions import ContourError

TOLERANCE = 1e-10


def circle(cx: float, cy: float, r: float, n: int) -> Contour:
    return Contour.from_tuples(
        (cx + r * math.cos(2 * math.pi * j / n), cy + r * math.sin(2 * math.pi * j / n))
        for j in range(n)
    )


class TestFrequencies:
    """Tests for the frequency order."""

    def test_order(self):
        """Test alternating positive and negative frequencies."""
        assert frequencies(3) == [0, 1, -1, 2, -2, 3, -3]

    def test_zero_terms(self):
        """Test only the centroid term for K=0."""
        assert frequencies(0) == [0]


class TestFourierDecomposition:
    """Tests for fourier_decomposition."""

    @pytest.fixture
    def circle_decomposition(self):
        return fourier_decomposition(circle(50.0, 50.0, 20.0, 64), 10)

    def test_term_count(self, circle_decomposition):
        """Test 2K+1 coefficients are produced."""
        assert len(circle_decomposition) == 21
        assert sorted(c.freq for c in circle_decomposition) == list(range(-10, 11))

    def test_centroid(self, circle_decomposition):
        """Test frequency 0 is the circle's center."""
        c0 = circle_decomposition.coefficient(0)
        assert c0.re == pytest.approx(50.0, abs=TOLERANCE)
        assert c0.im == pytest.approx(50.0, abs=TOLERANCE)

    def test_first_harmonic_radius(self, circle_decomposition):
        """Test frequency 1 carries the circle's radius."""
        assert circle_decomposition.coefficient(1).radius == pytest.approx(20.0, abs=TOLERANCE)

    def test_other_harmonics_vanish(self, circle_decomposition):
        """Test every other frequency has radius close to zero."""
        for c in circle_decomposition:
            if c.freq not in (0, 1):
                assert c.radius < TOLERANCE

    def test_largest_terms_first(self, circle_decomposition):
        """Test the centroid and the radius term lead the sequence."""
        assert [c.freq for c in circle_decomposition.coefficients[:2]] == [0, 1]

    def test_reconstruction(self, circle_decomposition):
        """Test evaluation reproduces every sample point."""
        original = circle(50.0, 50.0, 20.0, 64)
        for j, point in enumerate(original):
            p = circle_decomposition.evaluate(j / 64)
            assert p.x == pytest.approx(point.x, abs=TOLERANCE)
            assert p.y == pytest.approx(point.y, abs=TOLERANCE)

    def test_sorted_by_descending_radius(self):
        """Test radii never increase along the sequence."""
        contour = resample(Contour.from_tuples([(0, 0), (3, 0), (3, 1), (1, 2), (0, 0)]), 200)
        radii = [c.radius for c in fourier_decomposition(contour, 40)]
        assert all(a >= b for a, b in zip(radii, radii[1:]))

    def test_ties_keep_frequency_order(self):
        """Test equal radii stay in computation order."""
        decomposition = fourier_decomposition(Contour.from_tuples([(0, 0)] * 8), 2)
        assert [c.freq for c in decomposition] == [0, 1, -1, 2, -2]

    def test_matches_direct_sum(self):
        """Test every coefficient equals the defining sum, including frequencies past N."""
        contour = Contour.from_tuples([(0, 0), (4, 1), (5, 3), (2, 6), (-1, 4), (-2, 1)])
        n = len(contour)
        decomposition = fourier_decomposition(contour, 8)
        assert len(decomposition) == 17
        for c in decomposition:
            expected = sum(
                complex(p.x, p.y) * cmath.exp(-2j * math.pi * c.freq * j / n)
                for j, p in enumerate(contour)
            ) / n
            assert c.re == pytest.approx(expected.real, abs=TOLERANCE)
            assert c.im == pytest.approx(expected.imag, abs=TOLERANCE)

    def test_plain_float_parts(self):
        """Test coefficients carry plain Python numbers."""
        c = fourier_decomposition(circle(0, 0, 1, 8), 1).coefficients[0]
        assert type(c.freq) is int
        assert type(c.re) is float and type(c.im) is float

    def test_single_point(self):
        """Test a constant contour has only the centroid term."""
        decomposition = fourier_decomposition(Contour.from_tuples([(3, 4)]), 0)
        assert len(decomposition) == 1
        assert decomposition.coefficient(0).re == 3.0
        assert decomposition.coefficient(0).im == 4.0

    def test_empty_contour(self):
        """Test an empty contour cannot be decomposed."""
        with pytest.raises(ContourError):
            fourier_decomposition(Contour(), 5)

    def test_negative_terms(self):
        """Test a negative term count is rejected."""
        with pytest.raises(ContourError):
            fourier_decomposition(circle(0, 0, 1, 8), -1)
