"""Unit tests for the harmonic schedule and loop visibility."""

import pytest

from circlesketch.config import CongruenceVisible, HarmonicSchedule, RenderConfig
from circlesketch.core.schedule import (
    MAX_LOOPS,
    build_schedule,
    harmonic_cap,
    iter_loops,
    loop_visibility,
)
from circlesketch.domain import LoopParams
from circlesketch.exceptions import ScheduleError

DEFAULT_STEPS = "1 1 10 1 ; 10 5 50 2 ; 50 25 1000 4"


def counts(schedule: HarmonicSchedule, cap: int, **kwargs) -> list[int]:
    return [loop.harmonic_count for loop in build_schedule(schedule, cap, **kwargs)]


class TestBuildSchedule:
    """Tests for build_schedule."""

    def test_default_schedule(self):
        """Test the default ranges up to a cap of 100."""
        loops = build_schedule(HarmonicSchedule.from_text(DEFAULT_STEPS), 100)
        assert [loop.harmonic_count for loop in loops] == (
            list(range(1, 10)) + list(range(10, 50, 5)) + [50, 75, 100]
        )
        assert loops[0].speed == 1.0
        assert loops[9] == LoopParams(harmonic_count=10, speed=2.0)
        assert loops[-1] == LoopParams(harmonic_count=100, speed=4.0)

    def test_overshoot_is_capped(self):
        """Test a step past the cap emits the cap."""
        assert counts(HarmonicSchedule.from_text("1 3 100 1"), 8) == [1, 4, 7, 8]

    def test_gap_jumps_to_next_range(self):
        """Test a count between ranges jumps to the next range's start."""
        assert counts(HarmonicSchedule.from_text("1 1 3 1 ; 5 5 20 2"), 12) == [1, 2, 3, 5, 10, 12]

    def test_schedule_ending_below_cap_reaches_cap(self):
        """Test a final loop at the cap when the ranges run out."""
        loops = build_schedule(HarmonicSchedule.from_text("1 2 5 3"), 50)
        assert [loop.harmonic_count for loop in loops] == [1, 3, 5, 50]
        assert loops[-1].speed == 1.0

    def test_first_range_starting_above_one(self):
        """Test the schedule starts at the first range's start."""
        assert counts(HarmonicSchedule.from_text("4 4 20 1"), 12) == [4, 8, 12]

    def test_start_above_cap(self):
        """Test a first range beyond the cap emits only the cap."""
        assert counts(HarmonicSchedule.from_text("50 1 60 1"), 10) == [10]

    def test_empty_schedule(self):
        """Test no ranges starts at one and jumps to the cap."""
        assert counts(HarmonicSchedule(ranges=[]), 6) == [1, 6]

    def test_cap_of_one(self):
        """Test the smallest cap."""
        assert counts(HarmonicSchedule.from_text(DEFAULT_STEPS), 1) == [1]

    def test_loop_limit(self):
        """Test the loop limit forces the last loop to the cap."""
        result = counts(HarmonicSchedule.from_text("1 1 1000000 1"), 500, max_loops=10)
        assert len(result) == 10
        assert result[:9] == list(range(1, 10))
        assert result[-1] == 500

    @pytest.mark.parametrize(
        ("steps", "cap"),
        [
            (DEFAULT_STEPS, 100),
            (DEFAULT_STEPS, 1001),
            ("1 1 2 1", 1),
            ("2 7 9 1 ; 9 1 11 1 ; 30 1 31 1", 40),
            ("1 1 100000 1", 99999),
        ],
    )
    def test_terminates_at_cap(self, steps, cap):
        """Test termination within the loop limit with the cap last."""
        result = counts(HarmonicSchedule.from_text(steps), cap)
        assert len(result) <= MAX_LOOPS
        assert result[-1] == cap
        assert all(c <= cap for c in result)

    def test_invalid_cap(self):
        """Test a cap below one is rejected."""
        with pytest.raises(ScheduleError):
            build_schedule(HarmonicSchedule.from_text(DEFAULT_STEPS), 0)

    def test_iter_loops_is_lazy(self):
        """Test loops can be consumed one at a time."""
        loops = iter_loops(HarmonicSchedule.from_text(DEFAULT_STEPS), 100)
        assert next(loops) == LoopParams(harmonic_count=1, speed=1.0)
        assert next(loops) == LoopParams(harmonic_count=2, speed=1.0)


class TestHarmonicCap:
    """Tests for harmonic_cap."""

    def test_limited_by_config(self):
        """Test the configured maximum wins when smaller."""
        assert harmonic_cap(RenderConfig(max_harmonics=20), 1001) == 20

    def test_limited_by_coefficients(self):
        """Test the coefficient count wins when smaller."""
        assert harmonic_cap(RenderConfig(max_harmonics=2000), 1001) == 1001


class TestLoopVisibility:
    """Tests for visibility predicates per loop."""

    def test_congruence(self):
        """Test modulo 3 with residues 0 and 1."""
        predicate = CongruenceVisible(modulo=3, residues=[0, 1])
        assert [i for i in range(9) if predicate.is_visible(i)] == [0, 1, 3, 4, 6, 7]
        assert not any(predicate.is_visible(i) for i in (2, 5, 8))

    def test_loop_visibility(self):
        """Test the three predicates are evaluated together."""
        config = RenderConfig(
            show_contour="never",
            show_trace="always",
            show_fourier_circles={"modulo": 2, "residues": [1]},
        )
        assert loop_visibility(config, 0) == (False, True, False)
        assert loop_visibility(config, 1) == (False, True, True)
