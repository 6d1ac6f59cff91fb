"""Unit tests for the table2katex command-line front end."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import io
import json
from unittest.mock import patch

import pytest

from table2katex.cli import build_parser, main, style_from_args, watch
from table2katex.schema import Size, TextStyle
from table2katex.session import ConversionSession


def run_cli(argv: list[str], stdin: str = "") -> int:
    with patch("sys.stdin", io.StringIO(stdin)):
        return main(argv)


class TestStyleFromArgs:

    def test_defaults(self):
        style = style_from_args(build_parser().parse_args([]))
        assert style.bold_header is True
        assert style.bold_first_column is False
        assert style.size == Size.NORMAL
        assert style.text_style == TextStyle.SERIF
        assert style.row_spacing == 1.0
        assert style.export_mode is False

    def test_flags(self):
        args = build_parser().parse_args(["--no-bold-header", "--bold-first-column", "--size", "large", "--text-style", "sans", "--export"])
        style = style_from_args(args)
        assert style.bold_header is False
        assert style.bold_first_column is True
        assert style.size == Size.LARGE
        assert style.text_style == TextStyle.SANS
        assert style.export_mode is True


class TestMain:

    def test_stdin_markdown(self, capsys):
        assert run_cli([], "| a | b |\n|--|--:|\n| 1 | 2 |\n") == 0
        out = capsys.readouterr().out
        assert r"\begin{array}{|l|r|} \hline" in out
        assert r"\textbf{a} & \textbf{b}" in out

    def test_file_input(self, tmp_path, capsys):
        path = tmp_path / "table.csv"
        path.write_text("x,y\n1,2\n", encoding="utf-8")
        assert main([str(path), "--align", "c,right"]) == 0
        assert "{|c|r|}" in capsys.readouterr().out

    def test_align_all(self, capsys):
        assert run_cli(["--align-all", "center"], "a,b,c") == 0
        assert "{|c|c|c|}" in capsys.readouterr().out

    def test_export(self, capsys):
        assert run_cli(["--export"], "a,b\n1,2") == 0
        lines = capsys.readouterr().out.rstrip("\n").split("\n")
        assert lines[0] == "$$"
        assert lines[-1] == "$$"
        assert len(lines) == 3

    def test_preview_json(self, capsys):
        assert run_cli(["--preview", "--size", "small"], "a,b") == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["scale"] == 0.85
        assert payload["latex"].startswith(r"\begin{array}")

    def test_empty_input(self, capsys):
        assert run_cli([], "\n  \n") == 0
        assert capsys.readouterr().out == ""

    def test_unparseable_input(self, capsys):
        assert run_cli(["--format", "markdown"], "|---|---|") == 1
        assert "Could not parse the table" in capsys.readouterr().err

    def test_bad_row_spacing(self):
        with pytest.raises(SystemExit):
            run_cli(["--row-spacing", "0"], "a,b")

    def test_watch_requires_file(self):
        with pytest.raises(SystemExit):
            run_cli(["--watch"], "")


class TestWatch:

    def test_missing_file_does_not_crash(self, tmp_path):
        args = build_parser().parse_args([str(tmp_path / "gone.csv"), "--watch"])
        session = ConversionSession(style_from_args(args))
        with patch("table2katex.cli.time.sleep", side_effect=KeyboardInterrupt), patch("table2katex.cli.Debouncer.schedule") as mock_schedule:
            watch(tmp_path / "gone.csv", session, args)
        mock_schedule.assert_not_called()

    def test_file_removed_between_polls(self, tmp_path):
        path = tmp_path / "table.csv"
        path.write_text("a,b\n", encoding="utf-8")
        args = build_parser().parse_args([str(path), "--watch"])
        session = ConversionSession(style_from_args(args))

        def remove_then_stop(_seconds):
            if path.exists():
                path.unlink()
                return
            raise KeyboardInterrupt

        with patch("table2katex.cli.time.sleep", side_effect=remove_then_stop), patch("table2katex.cli.Debouncer.schedule") as mock_schedule:
            watch(path, session, args)
        assert mock_schedule.call_count == 1
