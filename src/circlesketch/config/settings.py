"""Configuration settings for Circles Sketch."""

from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from circlesketch.utils.numbers import format_number


class StepRange(BaseModel):
    """One range of the harmonic schedule.

    While the current harmonic count is in [from, to), each loop advances
    it by ``step`` and animates at ``speed``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    from_: int = Field(alias="from", ge=1, description="First harmonic count of the range")
    step: int = Field(ge=1, description="Harmonic count increment per loop")
    to: int = Field(description="Exclusive upper bound of the range")
    speed: float = Field(default=1.0, gt=0.0, allow_inf_nan=False, description="Relative animation speed")

    @model_validator(mode="after")
    def _check_bounds(self) -> "StepRange":
        if self.to <= self.from_:
            raise ValueError(f"range 'to' ({self.to}) must exceed 'from' ({self.from_})")
        return self

    def contains(self, count: int) -> bool:
        """Check whether a harmonic count falls in [from, to)."""
        return self.from_ <= count < self.to

    def to_text(self) -> str:
        """Format as the compact "from step to speed" group."""
        return f"{self.from_} {self.step} {self.to} {format_number(self.speed)}"


class HarmonicSchedule(BaseModel):
    """Ordered, non-overlapping list of step ranges.

    Accepts a list of range mappings, a ``{ranges: [...]}`` mapping, or the
    compact text form ``"from step to speed ; from step to speed ; ..."``.
    Ranges are validated, never re-sorted.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    ranges: list[StepRange] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"ranges": _parse_schedule_groups(data)}
        if isinstance(data, list):
            return {"ranges": data}
        return data

    @model_validator(mode="after")
    def _check_order(self) -> "HarmonicSchedule":
        for prev, nxt in zip(self.ranges, self.ranges[1:]):
            if nxt.from_ < prev.to:
                raise ValueError(
                    f"ranges must be ascending and non-overlapping: "
                    f"[{prev.from_}, {prev.to}) is followed by [{nxt.from_}, {nxt.to})"
                )
        return self

    @classmethod
    def from_text(cls, text: str) -> "HarmonicSchedule":
        """Parse the compact text form.

        Args:
            text: Groups of "from step to speed" separated by ';'

        Returns:
            Validated schedule

        Raises:
            pydantic.ValidationError: If a group is malformed or ranges are invalid
        """
        return cls.model_validate(text)

    def to_text(self) -> str:
        """Format in the compact text form the page lets users edit."""
        return " ; ".join(r.to_text() for r in self.ranges)

    def range_for(self, count: int) -> StepRange | None:
        """Find the range containing a harmonic count."""
        for r in self.ranges:
            if r.contains(count):
                return r
        return None

    def next_range_start(self, count: int) -> int | None:
        """If count falls in a gap between two ranges, return the next range's start."""
        for prev, nxt in zip(self.ranges, self.ranges[1:]):
            if prev.to <= count < nxt.from_:
                return nxt.from_
        return None


def _parse_schedule_groups(text: str) -> list[dict[str, Any]]:
    groups = [g.strip() for g in text.split(";")]
    ranges = []
    for group in groups:
        if not group:
            continue
        parts = group.split()
        if len(parts) != 4:
            raise ValueError(f"schedule group '{group}' must have 4 numbers: from step to speed")
        try:
            values = [float(p) for p in parts]
        except ValueError:
            raise ValueError(f"schedule group '{group}' contains a non-numeric value") from None
        for name, value in zip(("from", "step", "to"), values):
            if not value.is_integer():
                raise ValueError(f"schedule group '{group}': '{name}' must be an integer")
        ranges.append(
            {
                "from": int(values[0]),
                "step": int(values[1]),
                "to": int(values[2]),
                "speed": values[3],
            }
        )
    return ranges


class AlwaysVisible(BaseModel):
    """Element is drawn in every loop."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["always"] = "always"

    def is_visible(self, loop_index: int) -> bool:  # noqa: ARG002
        return True


class NeverVisible(BaseModel):
    """Element is never drawn."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["never"] = "never"

    def is_visible(self, loop_index: int) -> bool:  # noqa: ARG002
        return False


class CongruenceVisible(BaseModel):
    """Element is drawn when ``loop_index mod modulo`` is one of ``residues``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["congruence"] = "congruence"
    modulo: int = Field(gt=0, description="Period in loops")
    residues: list[int] = Field(min_length=1, description="Loop residues that are drawn")

    @model_validator(mode="after")
    def _check_residues(self) -> "CongruenceVisible":
        for r in self.residues:
            if not 0 <= r < self.modulo:
                raise ValueError(f"residue {r} must be in [0, {self.modulo})")
        return self

    def is_visible(self, loop_index: int) -> bool:
        return loop_index % self.modulo in self.residues


VisibilityPredicate = Annotated[
    AlwaysVisible | NeverVisible | CongruenceVisible,
    Field(discriminator="kind"),
]


def _coerce_visibility(value: Any) -> Any:
    """Normalize the YAML shapes of a visibility predicate to the tagged form."""
    if isinstance(value, BaseModel):
        return value
    if isinstance(value, str):
        name = value.strip().lower()
        if name in ("always", "never"):
            return {"kind": name}
        raise ValueError(f"unknown visibility '{value}' (expected always, never or a congruence)")
    if isinstance(value, dict):
        data = dict(value)
        if len(data) == 1:
            key, inner = next(iter(data.items()))
            if isinstance(key, str) and key.lower() == "congruence" and isinstance(inner, dict):
                data = dict(inner)
        if "congruents" in data:
            data["residues"] = data.pop("congruents")
        if "kind" not in data:
            data["kind"] = "congruence"
        return data
    return value


def _visibility_to_config(value: AlwaysVisible | NeverVisible | CongruenceVisible) -> Any:
    if isinstance(value, CongruenceVisible):
        return {"modulo": value.modulo, "residues": list(value.residues)}
    return value.kind


class RenderConfig(BaseModel):
    """Configuration for one sketch: Fourier resolution, schedule and display knobs.

    Unknown keys are rejected so a misspelt option never silently falls
    back to its default.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_harmonics: int = Field(
        default=100,
        gt=0,
        description="Maximum number of Fourier terms drawn",
    )
    steps: HarmonicSchedule = Field(
        default_factory=lambda: HarmonicSchedule.from_text("1 1 10 1 ; 10 5 50 2 ; 50 25 1000 4"),
        description="How the harmonic count grows loop over loop",
    )
    show_contour: VisibilityPredicate = Field(default_factory=AlwaysVisible)
    show_trace: VisibilityPredicate = Field(default_factory=AlwaysVisible)
    show_fourier_circles: VisibilityPredicate = Field(default_factory=AlwaysVisible)
    show_point: bool = Field(default=True, description="Draw the sparkling tracing point")
    show_nh: bool = Field(default=True, description="Label the harmonic count")
    trace_length: float = Field(
        default=1.0,
        ge=0.0,
        le=1.0,
        description="Trace length as a fraction of the point count",
    )
    opacity: float = Field(default=0.9, ge=0.0, le=1.0, description="Trace opacity")
    trace_width: float = Field(default=0.6, gt=0.0, allow_inf_nan=False, description="Trace stroke width")
    contour_width: float = Field(default=0.2, gt=0.0, allow_inf_nan=False, description="Contour stroke width")
    trace_colors: list[str] = Field(
        default_factory=lambda: ["red", "yellow", "lime", "cyan", "magenta"],
        min_length=1,
        description="Trace colors, cycled per loop",
    )
    flip_y: bool = Field(default=False, description="Negate y before processing")

    @field_validator("show_contour", "show_trace", "show_fourier_circles", mode="before")
    @classmethod
    def _normalize_visibility(cls, value: Any) -> Any:
        return _coerce_visibility(value)

    @field_serializer("show_contour", "show_trace", "show_fourier_circles")
    def _serialize_visibility(self, value: AlwaysVisible | NeverVisible | CongruenceVisible) -> Any:
        return _visibility_to_config(value)

    @field_serializer("steps")
    def _serialize_steps(self, value: HarmonicSchedule) -> list[dict[str, Any]]:
        return [r.model_dump(by_alias=True) for r in value.ranges]


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}' (expected one of {', '.join(LOG_LEVELS)})")
        return level


class SketchSettings(BaseModel):
    """Main application settings."""

    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SketchSettings:
    """Get default application settings."""
    return SketchSettings()
