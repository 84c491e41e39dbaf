"""Unit tests for the command line interface."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from glyphbadge import __version__
from glyphbadge.cli.app import app

runner = CliRunner()


class TestRenderCommand:
    """Tests for the render command."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"glyphbadge v{__version__}" in result.output

    def test_render_to_stdout(self, test_font_path: Path) -> None:
        result = runner.invoke(
            app, ["passing", "--label", "build", "--style", "flat", "--font", str(test_font_path)]
        )
        assert result.exit_code == 0, result.output
        assert result.stdout.startswith('<svg width="93" height="20"')
        assert result.stdout.rstrip().endswith("</svg>")

    def test_render_to_file(self, test_font_path: Path, tmp_path: Path) -> None:
        output = tmp_path / "badge.svg"
        result = runner.invoke(
            app, ["42", "--font", str(test_font_path), "--output", str(output)]
        )
        assert result.exit_code == 0, result.output
        assert output.read_text(encoding="utf-8").startswith("<svg")
        assert "badge.svg" in result.output

    def test_quiet_file_output(self, test_font_path: Path, tmp_path: Path) -> None:
        output = tmp_path / "badge.svg"
        result = runner.invoke(
            app, ["42", "-f", str(test_font_path), "-o", str(output), "--quiet"]
        )
        assert result.exit_code == 0
        assert output.exists()
        assert "badge.svg" not in result.output

    def test_color_overrides(self, test_font_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "ok",
                "-l",
                "ci",
                "-f",
                str(test_font_path),
                "--color",
                "green",
                "--label-color",
                "2a2a2a",
            ],
        )
        assert result.exit_code == 0, result.output
        assert 'fill="#3C1"' in result.stdout
        assert 'fill="#2A2A2A"' in result.stdout

    def test_approximate(self) -> None:
        result = runner.invoke(app, ["passing", "--approximate", "--escape"])
        assert result.exit_code == 0, result.output
        assert "<text" in result.stdout

    def test_pretty(self, test_font_path: Path) -> None:
        result = runner.invoke(app, ["ok", "-f", str(test_font_path), "--pretty"])
        assert result.exit_code == 0
        assert "\n\t<defs>\n" in result.stdout

    @pytest.mark.parametrize(
        ("args", "message"),
        [
            (["ok", "--style", "plastic"], "Unrecognized style"),
            (["ok", "--color", "navy"], "Unrecognized color"),
            (["ok", "--font", "does-not-exist.ttf"], "Font file not found"),
            (["ok", "--verbose", "--quiet"], "--verbose and --quiet"),
            (["ok", "--approximate", "--font", "x.ttf"], "--font with --approximate"),
        ],
    )
    def test_option_errors(self, args: list[str], message: str) -> None:
        result = runner.invoke(app, args)
        assert result.exit_code == 1
        assert message in result.output

    def test_invalid_text(self, test_font_path: Path) -> None:
        result = runner.invoke(app, ["a&b", "-f", str(test_font_path)])
        assert result.exit_code == 1
        assert "Invalid character" in result.output

    def test_escape_flag_accepts_unsafe_text(self, test_font_path: Path) -> None:
        result = runner.invoke(app, ["a&b", "-f", str(test_font_path), "--escape"])
        assert result.exit_code == 0

    def test_corrupt_font(self, tmp_path: Path) -> None:
        broken = tmp_path / "broken.ttf"
        broken.write_bytes(b"not a font")
        result = runner.invoke(app, ["ok", "-f", str(broken)])
        assert result.exit_code == 1
        assert "Could not load font" in result.output
