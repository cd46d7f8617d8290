"""Per-loop animation parameters."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LoopParams:
    """Parameters for one full t-cycle of the animation.

    Attributes:
        harmonic_count: Number of leading Fourier terms drawn in this loop
        speed: Relative animation speed for this loop
    """

    harmonic_count: int
    speed: float

    def to_list(self) -> list[float]:
        """Serialize as a compact [harmonic_count, speed] pair."""
        return [self.harmonic_count, self.speed]
