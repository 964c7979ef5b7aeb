"""Tests for the developer command line."""

from unittest.mock import patch

import pytest
from structlog.testing import capture_logs
from typer.testing import CliRunner

from outline_forge import __version__
from outline_forge.cli.app import app, parse_rect, parse_size
from outline_forge.domain import Rect
from outline_forge.exceptions import GeometryParseError

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep CLI runs from installing root log handlers or printing log events."""
    with patch("outline_forge.cli.app.configure_logging") as configure, capture_logs():
        yield configure


class TestArgumentParsing:
    """Tests for rect and size arguments."""

    def test_parse_rect(self):
        """Four comma-separated numbers make a rect."""
        assert parse_rect("20, 40,120,80") == Rect(20, 40, 120, 80)

    @pytest.mark.parametrize("value", ["", "1,2,3", "a,b,c,d", "1,2,3,4,5", "1.2.3,0,1,1"])
    def test_parse_rect_invalid(self, value):
        """Anything else is rejected."""
        with pytest.raises(GeometryParseError):
            parse_rect(value)

    def test_parse_size(self):
        """Sizes use WIDTHxHEIGHT."""
        assert parse_size("1280x720") == (1280.0, 720.0)
        assert parse_size("800X600") == (800.0, 600.0)

    def test_parse_size_invalid(self):
        """A missing separator is rejected."""
        with pytest.raises(GeometryParseError):
            parse_size("1280")


class TestOutlineCommand:
    """Tests for `outline-forge outline`."""

    def test_rounded_outline(self):
        """The outline path is printed."""
        result = runner.invoke(
            app, ["outline", "20,40,120,80", "--radius", "30px", "-w", "4px", "-o", "6px"]
        )
        assert result.exit_code == 0
        assert "M 50.00 32.00 H 110.00 A 38.00 38.00 0 0 1 148.00 70.00" in result.output
        assert "rounded rect" in result.output

    def test_json_output(self):
        """--json prints the SVG attributes."""
        result = runner.invoke(
            app, ["outline", "0,0,10,10", "--style", "dashed", "--color", "red", "--json"]
        )
        assert result.exit_code == 0
        assert (
            '"d": "M 0.00 -1.00 H 10.00 A 1.00 1.00 0 0 1 11.00 0.00 '
            "V 10.00 A 1.00 1.00 0 0 1 10.00 11.00 "
            "H 0.00 A 1.00 1.00 0 0 1 -1.00 10.00 "
            'V 0.00 A 1.00 1.00 0 0 1 0.00 -1.00 Z"'
        ) in result.output
        assert '"stroke-dasharray": "8 5"' in result.output
        assert '"stroke": "red"' in result.output

    def test_clip_path_outline(self):
        """A clip polygon is followed instead of the box."""
        result = runner.invoke(
            app,
            ["outline", "50,75,80,80", "--clip-path", "polygon(50% 0%, 100% 100%, 0% 100%)"],
        )
        assert result.exit_code == 0
        assert "M 90.00 72.76 L 131.62 156.00 L 48.38 156.00 Z" in result.output
        assert "clip polygon" in result.output

    def test_no_outline(self):
        """Style none has nothing to draw."""
        result = runner.invoke(app, ["outline", "0,0,10,10", "--style", "none"])
        assert result.exit_code == 1
        assert "No outline to draw" in result.output

    def test_too_thin(self):
        """Widths below the minimum have nothing to draw."""
        result = runner.invoke(app, ["outline", "0,0,10,10", "--width", "0.2px"])
        assert result.exit_code == 1

    def test_bad_rect(self):
        """Malformed rects are reported."""
        result = runner.invoke(app, ["outline", "nonsense"])
        assert result.exit_code == 1
        assert "x,y,width,height" in result.output


class TestSpotlightCommand:
    """Tests for `outline-forge spotlight`."""

    def test_plain_stage(self):
        """The viewport and stage hole are printed."""
        result = runner.invoke(app, ["spotlight", "100,100,50,20", "--viewport", "800x600"])
        assert result.exit_code == 0
        assert "M 800.00 0.00 L 0.00 0.00 L 0.00 600.00" in result.output
        assert "M 95.00 90.00 H 155.00 A 5.00 5.00 0 0 1 160.00 95.00" in result.output

    def test_stage_options(self):
        """Padding and stage radius are configurable."""
        result = runner.invoke(
            app,
            ["spotlight", "100,100,50,20", "--padding", "0", "--stage-radius", "0"],
        )
        assert result.exit_code == 0
        assert "M 100.00 100.00 H 150.00 V 120.00 H 100.00 V 100.00 Z" in result.output

    def test_bad_viewport(self):
        """Malformed viewport sizes are reported."""
        result = runner.invoke(app, ["spotlight", "0,0,10,10", "--viewport", "big"])
        assert result.exit_code == 1
        assert "WIDTHxHEIGHT" in result.output


class TestTraceCommand:
    """Tests for `outline-forge trace`."""

    def test_trace_square(self, tmp_path):
        """A filled mask prints its clip polygon."""
        mask_file = tmp_path / "square.txt"
        mask_file.write_text("\n".join(["#" * 20] * 20) + "\n", encoding="utf-8")

        result = runner.invoke(app, ["trace", str(mask_file)])

        assert result.exit_code == 0
        assert (
            "polygon(2.50% 2.50%, 97.50% 2.50%, 97.50% 97.50%, 2.50% 97.50%)" in result.output
        )
        assert "20x20 cells" in result.output

    def test_quiet_with_tolerance(self, tmp_path):
        """--quiet prints only the polygon."""
        mask_file = tmp_path / "small.txt"
        mask_file.write_text("##\n##\n", encoding="utf-8")

        result = runner.invoke(app, ["trace", str(mask_file), "-t", "0.5", "-q"])

        assert result.exit_code == 0
        assert result.output.strip() == (
            "polygon(25.00% 25.00%, 75.00% 25.00%, 75.00% 75.00%, 25.00% 75.00%)"
        )

    def test_custom_foreground(self, tmp_path):
        """Foreground characters are configurable."""
        mask_file = tmp_path / "stars.txt"
        mask_file.write_text("**\n**\n", encoding="utf-8")

        result = runner.invoke(
            app, ["trace", str(mask_file), "--foreground", "*", "-t", "0.5", "-q"]
        )

        assert result.exit_code == 0
        assert "polygon(25.00% 25.00%" in result.output

    def test_missing_file(self, tmp_path):
        """A missing mask file is reported."""
        result = runner.invoke(app, ["trace", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1
        assert "Mask file not found" in result.output

    def test_blank_file(self, tmp_path):
        """A mask file without cells is reported."""
        mask_file = tmp_path / "blank.txt"
        mask_file.write_text("\n\n", encoding="utf-8")

        result = runner.invoke(app, ["trace", str(mask_file)])

        assert result.exit_code == 1
        assert "mask has no cells" in " ".join(result.output.split())

    def test_undecodable_file(self, tmp_path):
        """A mask file that is not UTF-8 is reported as a read failure."""
        mask_file = tmp_path / "binary.txt"
        mask_file.write_bytes(b"##\xff\n##\n")

        result = runner.invoke(app, ["trace", str(mask_file)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert "Failed to read mask" in " ".join(result.output.split())

    def test_no_boundary(self, tmp_path):
        """A mask without a usable boundary is reported."""
        mask_file = tmp_path / "dot.txt"
        mask_file.write_text("...\n.#.\n...\n", encoding="utf-8")

        result = runner.invoke(app, ["trace", str(mask_file)])

        assert result.exit_code == 1
        assert "No usable boundary found" in result.output

    def test_extraction_logged(self, tmp_path):
        """Each extraction emits a structured event."""
        mask_file = tmp_path / "small.txt"
        mask_file.write_text("##\n##\n", encoding="utf-8")

        with capture_logs() as logs:
            runner.invoke(app, ["trace", str(mask_file), "-q"])

        assert logs[-1]["event"] == "Clip polygon extraction failed"
        assert logs[-1]["log_level"] == "warning"
        assert logs[-1]["mask"] == "2x2"


class TestAppOptions:
    """Tests for global options."""

    def test_version(self):
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"Outline Forge v{__version__}" in result.output

    def test_logging_configured(self, no_logging_setup, tmp_path):
        """Global log options reach the logging setup."""
        log_file = tmp_path / "run.log"
        result = runner.invoke(
            app,
            ["--log-file", str(log_file), "--log-level", "DEBUG", "outline", "0,0,10,10"],
        )
        assert result.exit_code == 0
        no_logging_setup.assert_called_once_with(
            log_file=log_file, console_level="DEBUG", file_level="DEBUG"
        )
