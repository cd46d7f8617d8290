"""Logging utilities for Circles Sketch."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

HANDLER_MARK = "_circlesketch_handler"


@dataclass
class RunStats:
    """Statistics from one generation run."""

    input_points: int = 0
    resampled_points: int = 0
    coefficient_count: int = 0
    loop_count: int = 0
    outputs: list[str] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Replace handlers installed by an earlier call
    for handler in [h for h in root_logger.handlers if getattr(h, HANDLER_MARK, False)]:
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, HANDLER_MARK, True)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, HANDLER_MARK, True)
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("circlesketch")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class SketchLogger:
    """Logger for tracking pipeline progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RunStats()

    def log_input_loaded(self, source: str, point_count: int) -> None:
        """Log the raw contour read from an input."""
        self._logger.info("Input loaded", source=source, points=point_count)
        self._stats.input_points = point_count

    def log_resampled(self, original: int, resampled: int) -> None:
        """Log contour resampling."""
        self._logger.debug("Contour resampled", original=original, resampled=resampled)
        self._stats.resampled_points = resampled

    def log_decomposition(self, terms: int, coefficients: int, duration_ms: float) -> None:
        """Log Fourier decomposition."""
        self._logger.info(
            "Decomposition computed",
            terms=terms,
            coefficients=coefficients,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.coefficient_count = coefficients

    def log_schedule(self, loops: int, cap: int, schedule: str) -> None:
        """Log the computed loop schedule."""
        self._logger.debug("Schedule built", loops=loops, cap=cap, schedule=schedule)
        self._stats.loop_count = loops

    def log_output_written(self, path: str, size: int) -> None:
        """Log a written output document."""
        self._logger.info("Output written", path=path, bytes=size)
        self._stats.outputs.append(path)

    def log_error(self, error: Exception) -> None:
        """Log a failed run."""
        self._logger.error(
            "Generation failed",
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> RunStats:
        """Get current run statistics."""
        return self._stats
