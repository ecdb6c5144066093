"""Tests for the command-line interface."""

from __future__ import annotations

import io
from unittest.mock import patch

import pytest

from case_converter.cli import build_parser, main


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.text == []
        assert args.style == "kebab"
        assert args.locale is None
        assert args.preserve_numbers is True
        assert args.preserve_acronyms is False
        assert args.pascal_case is False
        assert args.strict is False
        assert args.serve is False

    def test_no_preserve_numbers(self):
        args = build_parser().parse_args(["--no-preserve-numbers"])
        assert args.preserve_numbers is False

    def test_unknown_style_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--style", "snake"])


class TestMain:

    def test_converts_each_argument(self, capsys):
        main(["Hello World", "fooBar"])
        assert capsys.readouterr().out == "hello-world\nfoo-bar\n"

    def test_style_and_options(self, capsys):
        main([
            "--style", "camel",
            "--preserve-acronyms",
            "--pascal-case",
            "XML_http_request",
        ])
        assert capsys.readouterr().out == "XMLHttpRequest\n"

    def test_dot_without_numbers(self, capsys):
        main(["--style", "dot", "--no-preserve-numbers", "chapter 12 intro"])
        assert capsys.readouterr().out == "chapter.intro\n"

    def test_diacritics_and_locale(self, capsys):
        main(["--normalize-diacritics", "--locale", "tr", "ISTANBUL Café"])
        assert capsys.readouterr().out == "ıstanbul-cafe\n"

    def test_reads_stdin_when_no_arguments(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("a b\nc_d\n\n"))
        main(["--style", "pascal"])
        assert capsys.readouterr().out == "AB\nCD\n\n"

    def test_serve_launches_api(self):
        with patch("case_converter.server.app.run_api") as run_api:
            main(["--serve"])
        run_api.assert_called_once_with()

    def test_strict_error_exits_with_status_1(self, capsys):
        with patch("case_converter.cli.convert", side_effect=_strict_failure):
            with pytest.raises(SystemExit) as exc_info:
                main(["--strict", "x"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("Error: ")

    def test_unknown_default_style_exits_with_status_1(self, capsys, monkeypatch):
        monkeypatch.setattr("case_converter.cli.DEFAULT_STYLE", "snake")
        with pytest.raises(SystemExit) as exc_info:
            main(["x"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("Error: Unknown case style 'snake'")


def _strict_failure(*args, **kwargs):
    from case_converter.errors import InvalidInputError
    raise InvalidInputError("Input is None")
