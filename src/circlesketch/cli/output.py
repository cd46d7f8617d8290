"""Rich console output helpers for the CLI."""

from rich.console import Console
from rich.text import Text

from circlesketch.utils import RunStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Circles Sketch[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_input_info(source: str, point_count: int) -> None:
    """Print what was read from the input.

    Args:
        source: Input file path or text
        point_count: Number of contour points
    """
    line = Text("  ")
    line.append(source)
    console.print(line)
    console.print(f"  {point_count:,} points")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(stats: RunStats) -> None:
    """Print success message with summary.

    Args:
        stats: Statistics of the finished run
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(stats.duration_seconds)}")

    for path in stats.outputs:
        line = Text("  ")
        line.append(path, style="bold")
        console.print(line)

    console.print(
        f"  {stats.resampled_points:,} points {SYM_DOT} "
        f"{stats.coefficient_count} coefficients {SYM_DOT} {stats.loop_count} loops"
    )


def print_error(message: str, details: str | list[str] | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information, one line per item
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] ", Text(message), sep="")
    if isinstance(details, str):
        details = [details]
    for detail in details or []:
        console.print(Text(f"  {detail}"))
