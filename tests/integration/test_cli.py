"""End-to-end tests of the command-line interface."""

from pathlib import Path
from unittest.mock import patch

import pytest
import yaml
from typer.testing import CliRunner

from circlesketch import __version__
from circlesketch.cli.app import app, command_line, output_stem, text_stem
from circlesketch.config import RenderConfig, load_config

runner = CliRunner()

SQUARE_POINTS = "points:\n  - [0, 0]\n  - [10, 0]\n  - [10, 10]\n  - [0, 10]\n  - [0, 0]\n"
SQUARE_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><path d="M 0 0 H 10 V 10 H 0 Z"/></svg>'
SMALL_CONFIG = "max_harmonics: 6\nsteps: 1 1 3 1 ; 3 3 10 2\n"


@pytest.fixture
def points_file(tmp_path: Path) -> Path:
    path = tmp_path / "square.yml"
    path.write_text(SQUARE_POINTS, encoding="utf-8")
    return path


class TestPointsCommand:
    """Tests for the points command."""

    def test_generates_documents(self, points_file: Path, tmp_path: Path):
        """Test the conventional config is picked up and both files written."""
        (tmp_path / "square-config.yml").write_text(SMALL_CONFIG, encoding="utf-8")

        result = runner.invoke(app, ["points", str(points_file)])

        assert result.exit_code == 0, result.output
        page = tmp_path / "square.html"
        assert page.exists()
        assert (tmp_path / "square-embed.html").exists()
        assert "Complete" in result.output
        assert 'value="1 1 3 1 ; 3 3 10 2"' in page.read_text(encoding="utf-8")

    def test_config_required(self, points_file: Path, tmp_path: Path):
        """Test a points run without any config fails."""
        result = runner.invoke(app, ["points", str(points_file)])

        assert result.exit_code == 1
        assert "Error" in result.output
        assert not (tmp_path / "square.html").exists()

    def test_explicit_config_and_output(self, points_file: Path, tmp_path: Path):
        """Test --config and --output."""
        config = tmp_path / "custom.yml"
        config.write_text(SMALL_CONFIG, encoding="utf-8")

        result = runner.invoke(
            app,
            ["points", str(points_file), "--config", str(config), "-o", str(tmp_path / "out" / "shape.html"), "-q"],
        )

        assert result.exit_code == 0, result.output
        assert (tmp_path / "out" / "shape.html").exists()
        assert (tmp_path / "out" / "shape-embed.html").exists()
        assert result.output.strip() == ""

    def test_invalid_config(self, points_file: Path, tmp_path: Path):
        """Test an invalid option is reported and nothing is written."""
        (tmp_path / "square-config.yml").write_text("max_harmonics: 0\nshow_trace: sometimes\n", encoding="utf-8")

        result = runner.invoke(app, ["points", str(points_file)])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert "max_harmonics" in result.output
        assert not (tmp_path / "square.html").exists()

    def test_malformed_points(self, tmp_path: Path):
        """Test a broken points file."""
        path = tmp_path / "bad.yml"
        path.write_text("points: [[0]]\n", encoding="utf-8")
        (tmp_path / "bad-config.yml").write_text(SMALL_CONFIG, encoding="utf-8")

        result = runner.invoke(app, ["points", str(path)])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_invalid_log_level(self, points_file: Path, tmp_path: Path):
        """Test an unknown log level is rejected."""
        (tmp_path / "square-config.yml").write_text(SMALL_CONFIG, encoding="utf-8")

        result = runner.invoke(app, ["points", str(points_file), "--log-level", "chatty"])

        assert result.exit_code == 1
        assert "Invalid option" in result.output

    def test_log_file(self, points_file: Path, tmp_path: Path):
        """Test structured events are written to the log file."""
        (tmp_path / "square-config.yml").write_text(SMALL_CONFIG, encoding="utf-8")
        log_file = tmp_path / "run.log"

        result = runner.invoke(app, ["points", str(points_file), "--log-file", str(log_file), "-q"])

        assert result.exit_code == 0, result.output
        assert "Output written" in log_file.read_text(encoding="utf-8")


class TestSvgCommand:
    """Tests for the svg command."""

    def test_defaults_without_config(self, tmp_path: Path):
        """Test built-in defaults apply when no config exists."""
        svg = tmp_path / "logo.svg"
        svg.write_text(SQUARE_SVG, encoding="utf-8")

        result = runner.invoke(app, ["svg", str(svg)])

        assert result.exit_code == 0, result.output
        page = (tmp_path / "logo.html").read_text(encoding="utf-8")
        assert 'value="1 1 10 1 ; 10 5 50 2 ; 50 25 1000 4"' in page
        assert "Generated by<br/>circles-sketch svg" in page

    def test_missing_explicit_config(self, tmp_path: Path):
        """Test an explicit config path must exist."""
        svg = tmp_path / "logo.svg"
        svg.write_text(SQUARE_SVG, encoding="utf-8")

        result = runner.invoke(app, ["svg", str(svg), "--config", str(tmp_path / "nope.yml")])

        assert result.exit_code == 1
        assert not (tmp_path / "logo.html").exists()

    def test_bad_path_data(self, tmp_path: Path):
        """Test malformed path data fails the run."""
        svg = tmp_path / "bad.svg"
        svg.write_text('<svg><path d="M 0 0 L 1"/></svg>', encoding="utf-8")

        result = runner.invoke(app, ["svg", str(svg)])

        assert result.exit_code == 1
        assert "Invalid path data" in result.output


class TestTextCommand:
    """Tests for the text command."""

    def test_text_with_font_file(self, test_font: Path, tmp_path: Path, monkeypatch):
        """Test the output stem is derived from the text."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "a-b-config.yml").write_text(SMALL_CONFIG, encoding="utf-8")

        result = runner.invoke(app, ["text", "A B!", "--font", str(test_font)])

        assert result.exit_code == 0, result.output
        page = tmp_path / "a-b.html"
        assert page.exists()
        assert (tmp_path / "a-b-embed.html").exists()
        assert 'value="1 1 3 1 ; 3 3 10 2"' in page.read_text(encoding="utf-8")

    def test_unknown_font(self, tmp_path: Path):
        """Test a font name that is not installed."""
        with patch("circlesketch.io.font_reader.system_font_dirs", return_value=[]):
            result = runner.invoke(app, ["text", "Hi", "--font", "NoSuchFont-Regular", "-o", str(tmp_path / "hi")])

        assert result.exit_code == 1
        assert "Font not found" in result.output


class TestUtilityCommands:
    """Tests for list-fonts, init-config and --version."""

    def test_version(self):
        """Test --version prints the version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_list_fonts(self):
        """Test installed font names are listed one per line."""
        with patch("circlesketch.cli.app.installed_fonts", return_value=["Alpha-Bold", "Beta[wght]"]):
            result = runner.invoke(app, ["list-fonts"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["Alpha-Bold", "Beta[wght]"]

    def test_init_config(self, tmp_path: Path):
        """Test the written config holds every default."""
        path = tmp_path / "config.yml"

        result = runner.invoke(app, ["init-config", str(path)])

        assert result.exit_code == 0, result.output
        assert load_config(path) == RenderConfig()
        assert yaml.safe_load(path.read_text(encoding="utf-8"))["show_contour"] == "always"

    def test_init_config_no_overwrite(self, tmp_path: Path):
        """Test an existing file is kept unless forced."""
        path = tmp_path / "config.yml"
        path.write_text("max_harmonics: 3\n", encoding="utf-8")

        result = runner.invoke(app, ["init-config", str(path)])
        assert result.exit_code == 1
        assert path.read_text(encoding="utf-8") == "max_harmonics: 3\n"

        result = runner.invoke(app, ["init-config", str(path), "--force"])
        assert result.exit_code == 0
        assert load_config(path) == RenderConfig()


class TestHelpers:
    """Tests for CLI helper functions."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Hello", "hello"),
            ("Hello World", "hello-world"),
            ("Hi, there!", "hi-there"),
            ("?!", "text"),
        ],
    )
    def test_text_stem(self, text, expected):
        """Test stems derived from text."""
        assert text_stem(text) == expected

    def test_output_stem(self):
        """Test explicit stems with and without the .html suffix."""
        default = Path("square")
        assert output_stem(None, default) == default
        assert output_stem(Path("out/shape.html"), default) == Path("out/shape")
        assert output_stem(Path("out/shape"), default) == Path("out/shape")

    def test_command_line(self):
        """Test the displayed command quotes arguments and skips unset options."""
        assert command_line("text", "Hello World", font="Arial", config=None) == (
            "circles-sketch text 'Hello World' --font Arial"
        )
