"""CLI application entry point for circles sketch.

This module provides the main CLI interface using Typer.
"""

import shlex
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from circlesketch import __version__
from circlesketch.cli.output import (
    SYM_OK,
    console,
    print_error,
    print_header,
    print_input_info,
    print_step,
    print_success,
)
from circlesketch.config import (
    LoggingConfig,
    RenderConfig,
    SketchSettings,
    dump_config,
    resolve_config,
)
from circlesketch.core.pipeline import SketchGenerator
from circlesketch.domain import Contour
from circlesketch.exceptions import CircleSketchError, ConfigValidationError
from circlesketch.io import contour_of_text, list_fonts as installed_fonts, read_points_file, read_svg_file

PROG_NAME = "circles-sketch"
CONFIG_SUFFIX = "-config.yml"

# Create the Typer app
app = typer.Typer(
    name=PROG_NAME,
    help="Animate any contour as a sum of rotating circles (Fourier epicycles).",
    add_completion=False,
    no_args_is_help=True,
)

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help=f"YAML render config (default: {{stem}}{CONFIG_SUFFIX} next to the input)",
    ),
]
OutputOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Output stem; writes {stem}.html and {stem}-embed.html",
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Circles Sketch[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Draw contours with circles: points files, SVG paths or text."""


def text_stem(text: str) -> str:
    """Derive an output stem from text: lower-cased, spaces to dashes.

    Examples:
        >>> text_stem("Hello, World!")
        'hello-world'
    """
    stem = "".join(ch for ch in text.lower().replace(" ", "-") if ch.isalnum() or ch == "-")
    return stem or "text"


def output_stem(output: Path | None, default: Path) -> Path:
    """Resolve the output stem, accepting a path that already ends in .html."""
    if output is None:
        return default
    if output.suffix.lower() == ".html":
        return output.with_suffix("")
    return output


def default_config_path(stem: Path) -> Path:
    """Conventional config location for an input or output stem."""
    return stem.parent / f"{stem.name}{CONFIG_SUFFIX}"


def command_line(*args: str, **options: Path | str | None) -> str:
    """Rebuild the invoking command line for display on the page."""
    words = [PROG_NAME, *args]
    for name, value in options.items():
        if value is not None:
            words += [f"--{name.replace('_', '-')}", str(value)]
    return shlex.join(words)


def _generate(
    source: str,
    load_contour: Callable[[], Contour],
    stem: Path,
    config_path: Path | None,
    default_config: Path,
    config_required: bool,
    command: str,
    log_file: Path | None,
    log_level: str,
    quiet: bool,
) -> None:
    """Load config and input, then run the pipeline and report.

    Any CircleSketchError is reported and turned into exit code 1.
    """
    if not quiet:
        print_header(__version__)

    try:
        config = resolve_config(config_path, default_config, required=config_required)
        settings = SketchSettings(
            render=config,
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
        generator = SketchGenerator(settings, quiet=quiet)

        if not quiet:
            print_step("Reading input")
        contour = load_contour()
        if not quiet:
            print_input_info(source, len(contour))

        if not quiet:
            print_step("Drawing with circles")
        stats = generator.generate(
            contour,
            output_stem=stem,
            source=source,
            command=command,
        )
    except ConfigValidationError as e:
        print_error("Invalid configuration", details=e.errors)
        raise typer.Exit(code=1)
    except ValidationError as e:
        print_error("Invalid option", details=[err["msg"] for err in e.errors()])
        raise typer.Exit(code=1)
    except CircleSketchError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_success(stats)


@app.command()
def points(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="YAML file with a 'points' list of [x, y] pairs",
            show_default=False,
        ),
    ],
    config: ConfigOption = None,
    output: OutputOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Draw the contour of a points file.

    The config file {stem}-config.yml next to the input is required unless
    --config is given.

    Example:
        circles-sketch points square.yml
    """
    input_stem = input_file.with_suffix("")
    _generate(
        source=str(input_file),
        load_contour=lambda: read_points_file(input_file),
        stem=output_stem(output, input_stem),
        config_path=config,
        default_config=default_config_path(input_stem),
        config_required=True,
        command=command_line("points", str(input_file), config=config, output=output),
        log_file=log_file,
        log_level=log_level,
        quiet=quiet,
    )


@app.command()
def svg(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="SVG file whose <path> elements are drawn",
            show_default=False,
        ),
    ],
    config: ConfigOption = None,
    output: OutputOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Draw the paths of an SVG file.

    Example:
        circles-sketch svg logo.svg -o build/logo
    """
    input_stem = input_file.with_suffix("")
    _generate(
        source=str(input_file),
        load_contour=lambda: read_svg_file(input_file),
        stem=output_stem(output, input_stem),
        config_path=config,
        default_config=default_config_path(input_stem),
        config_required=False,
        command=command_line("svg", str(input_file), config=config, output=output),
        log_file=log_file,
        log_level=log_level,
        quiet=quiet,
    )


@app.command()
def text(
    content: Annotated[
        str,
        typer.Argument(
            help="Text to draw",
            show_default=False,
        ),
    ],
    font: Annotated[
        str,
        typer.Option(
            "--font",
            "-f",
            help="PostScript name of an installed font, or a font file path",
        ),
    ],
    config: ConfigOption = None,
    output: OutputOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Draw text rendered with a font.

    Example:
        circles-sketch text "Hello" --font Helvetica-Bold
    """
    stem = output_stem(output, Path(text_stem(content)))
    _generate(
        source=content,
        load_contour=lambda: contour_of_text(content, font),
        stem=stem,
        config_path=config,
        default_config=default_config_path(stem),
        config_required=False,
        command=command_line("text", content, font=font, config=config, output=output),
        log_file=log_file,
        log_level=log_level,
        quiet=quiet,
    )


@app.command("list-fonts")
def list_fonts() -> None:
    """List the PostScript names of installed fonts."""
    try:
        names = installed_fonts()
    except CircleSketchError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    for name in names:
        console.print(name, markup=False, highlight=False)


@app.command("init-config")
def init_config(
    path: Annotated[
        Path,
        typer.Argument(
            help="Where to write the config file",
            show_default=False,
        ),
    ],
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Overwrite an existing file",
        ),
    ] = False,
) -> None:
    """Write a config file with every option at its default."""
    if path.exists() and not force:
        print_error(
            f"File already exists: {path}",
            details="Use --force to overwrite it.",
        )
        raise typer.Exit(code=1)

    try:
        path.write_text(dump_config(RenderConfig()), encoding="utf-8")
    except OSError as e:
        print_error(f"Could not write config: {e.strerror or e}")
        raise typer.Exit(code=1)

    console.print(f"[green]{SYM_OK}[/green] Wrote {path}", highlight=False)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
