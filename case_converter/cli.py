"""Command-line interface for case conversion.

WHY: Shell scripts and build tooling need to rename things without
writing Python. The CLI exposes the same pipeline and options as the
library, plus a switch to launch the HTTP API.

HOW: argparse collects the style and options. Each positional argument
is converted and printed on its own line; with no positional arguments,
every stdin line is converted instead. ``--serve`` starts uvicorn.

RULES:
- One output line per input argument / stdin line, in order
- Errors go to stderr as "Error: ..." with exit status 1
- --strict maps to throw_on_invalid=True
- Python 3.9 compatible — no match/case, no X | Y unions
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, List, Optional

from case_converter.config import DEFAULT_STYLE
from case_converter.converters import convert
from case_converter.core.options import ConversionOptions
from case_converter.errors import CaseConversionError
from case_converter.styles import STYLES


def _options_from_args(args: argparse.Namespace) -> ConversionOptions:
    return ConversionOptions.build(
        normalize_diacritics=args.normalize_diacritics,
        locale=args.locale,
        throw_on_invalid=args.strict,
        preserve_numbers=args.preserve_numbers,
        preserve_acronyms=args.preserve_acronyms,
        pascal_case=args.pascal_case,
    )


def _read_stdin_lines() -> Iterable[str]:
    for line in sys.stdin:
        yield line.rstrip("\n")


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separate from main() so tests can inspect the parser without
    converting anything.
    """
    parser = argparse.ArgumentParser(
        prog="case_converter",
        description="Convert text to kebab-case, dot.case, camelCase or PascalCase.",
    )

    parser.add_argument(
        "text",
        nargs="*",
        help="Text to convert. Reads one item per line from stdin when omitted.",
    )

    parser.add_argument(
        "--style",
        choices=sorted(STYLES.keys()),
        default=DEFAULT_STYLE,
        help="Target case style (default: %(default)s).",
    )

    parser.add_argument(
        "--locale",
        default=None,
        help="Locale tag for case mapping, e.g. 'tr' or 'en-US'.",
    )

    parser.add_argument(
        "--normalize-diacritics",
        action="store_true",
        help="Strip accents before converting (Crème → creme).",
    )

    parser.add_argument(
        "--preserve-numbers",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Keep number-only words (default: %(default)s).",
    )

    parser.add_argument(
        "--preserve-acronyms",
        action="store_true",
        help="camel/pascal only: keep all-caps words such as XML unchanged.",
    )

    parser.add_argument(
        "--pascal-case",
        action="store_true",
        help="camel only: capitalize the first word too.",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on invalid input instead of printing an empty line.",
    )

    parser.add_argument(
        "--serve",
        action="store_true",
        help="Start the HTTP API instead of converting text.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m case_converter``.

    argv=None means use sys.argv; an explicit list is for testing.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.serve:
        from case_converter.server.app import run_api
        run_api()
        return

    if args.style not in STYLES:
        print(
            "Error: Unknown case style {!r}. Available: {}".format(
                args.style, ", ".join(sorted(STYLES))
            ),
            file=sys.stderr,
        )
        sys.exit(1)

    options = _options_from_args(args)
    items = args.text if args.text else _read_stdin_lines()

    try:
        for item in items:
            print(convert(item, args.style, options))
    except CaseConversionError as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
