"""Harmonic schedule: how many Fourier terms each animation loop draws.

Starting at the first range's ``from``, every loop emits the current
harmonic count (capped) and the speed of the range containing it, then
advances by that range's step. A count that lands in a gap between two
ranges jumps to the next range's start. The sequence always ends at the
cap, so the animation reaches full resolution.

The same algorithm runs inside the rendered page when the user edits the
schedule text live; ``iter_loops`` yields the loops one at a time in
exactly the order the page consumes them.
"""

from collections.abc import Iterator
from typing import NamedTuple

from circlesketch.config.settings import HarmonicSchedule, RenderConfig
from circlesketch.domain import LoopParams
from circlesketch.exceptions import ScheduleError

# Upper bound on loops, guards against schedules that never reach the cap
MAX_LOOPS = 10_000


def iter_loops(
    schedule: HarmonicSchedule,
    cap: int,
    max_loops: int = MAX_LOOPS,
) -> Iterator[LoopParams]:
    """Yield the parameters of successive animation loops.

    Args:
        schedule: Validated step ranges
        cap: Harmonics available, min(configured max, coefficient count)
        max_loops: Maximum number of loops to yield

    Yields:
        LoopParams; the last one always has harmonic_count == cap

    Raises:
        ScheduleError: If cap or max_loops is less than 1
    """
    if cap < 1:
        raise ScheduleError(f"Harmonic cap must be at least 1, got {cap}")
    if max_loops < 1:
        raise ScheduleError(f"Loop limit must be at least 1, got {max_loops}")

    i = schedule.ranges[0].from_ if schedule.ranges else 1
    emitted = 0

    while True:
        active = schedule.range_for(i)
        speed = active.speed if active is not None else 1.0
        count = min(i, cap)
        if emitted == max_loops - 1:
            count = cap

        yield LoopParams(harmonic_count=count, speed=speed)
        emitted += 1

        if count >= cap:
            return

        if active is not None:
            i += active.step
            continue

        next_start = schedule.next_range_start(i)
        if next_start is None:
            # Past the last range below full resolution
            yield LoopParams(harmonic_count=cap, speed=speed)
            return
        i = next_start


def build_schedule(
    schedule: HarmonicSchedule,
    cap: int,
    max_loops: int = MAX_LOOPS,
) -> list[LoopParams]:
    """Compute all loops up front.

    Args:
        schedule: Validated step ranges
        cap: Harmonics available
        max_loops: Maximum number of loops

    Returns:
        Loops in playback order, ending at the cap

    Examples:
        >>> s = HarmonicSchedule.from_text("1 1 3 1 ; 5 5 20 2")
        >>> [loop.harmonic_count for loop in build_schedule(s, 12)]
        [1, 2, 3, 5, 10, 12]
    """
    return list(iter_loops(schedule, cap, max_loops))


def harmonic_cap(config: RenderConfig, coefficient_count: int) -> int:
    """Harmonics available for drawing, at least 1."""
    return max(1, min(config.max_harmonics, coefficient_count))


class LoopVisibility(NamedTuple):
    """Which elements are drawn during one loop."""

    contour: bool
    trace: bool
    circles: bool


def loop_visibility(config: RenderConfig, loop_index: int) -> LoopVisibility:
    """Evaluate the three visibility predicates for a zero-based loop index."""
    return LoopVisibility(
        contour=config.show_contour.is_visible(loop_index),
        trace=config.show_trace.is_visible(loop_index),
        circles=config.show_fourier_circles.is_visible(loop_index),
    )
