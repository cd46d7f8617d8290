"""Output writer for generated HTML documents.

This module provides the OutputWriter class, which places the full page
and the embeddable fragment next to each other under a common stem.
"""

import os
import tempfile
from pathlib import Path

from circlesketch.exceptions import OutputWriteError

EMBED_SUFFIX = "-embed"


class OutputWriter:
    """Writes the page and embed documents for one sketch.

    Both documents are first written to temporary files in the target
    directory and only moved into place once both succeeded.

    Example:
        writer = OutputWriter(Path("out/hello"))
        written = writer.write(page=page_html, embed=embed_html)
    """

    def __init__(self, stem: Path) -> None:
        """Initialize the writer.

        Args:
            stem: Output path without extension, e.g. ``out/hello``
        """
        self._stem = Path(stem)

    @property
    def page_path(self) -> Path:
        """Path of the full page (``<stem>.html``)."""
        return self._stem.parent / f"{self._stem.name}.html"

    @property
    def embed_path(self) -> Path:
        """Path of the embeddable fragment (``<stem>-embed.html``)."""
        return self._stem.parent / f"{self._stem.name}{EMBED_SUFFIX}.html"

    def write(self, page: str, embed: str) -> list[tuple[Path, int]]:
        """Write both documents.

        Args:
            page: Full page HTML
            embed: Embeddable fragment HTML

        Returns:
            (path, size in bytes) for each file written

        Raises:
            OutputWriteError: If a file cannot be written
        """
        directory = self.page_path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(str(directory), str(e)) from e

        staged: list[tuple[str, Path, int]] = []
        try:
            for target, content in ((self.page_path, page), (self.embed_path, embed)):
                data = content.encode("utf-8")
                try:
                    fd, tmp_name = tempfile.mkstemp(
                        dir=directory, prefix=f".{target.name}.", suffix=".tmp"
                    )
                    staged.append((tmp_name, target, len(data)))
                    with os.fdopen(fd, "wb") as f:
                        f.write(data)
                except OSError as e:
                    raise OutputWriteError(str(target), str(e)) from e

            replaced: list[Path] = []
            for tmp_name, target, _ in staged:
                try:
                    os.replace(tmp_name, target)
                except OSError as e:
                    for done in replaced:
                        done.unlink(missing_ok=True)
                    raise OutputWriteError(str(target), str(e)) from e
                replaced.append(target)
        finally:
            for tmp_name, _, _ in staged:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)

        return [(target, size) for _, target, size in staged]
