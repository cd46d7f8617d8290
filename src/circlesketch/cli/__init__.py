"""Command-line interface for circles sketch.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Points, SVG and text inputs
- Config file discovery next to the input
- Font listing and config scaffolding
- Detailed error reporting
"""

from circlesketch.cli.app import cli, main

__all__ = ["cli", "main"]
