"""Public conversion functions, one per case style.

WHY: Callers want ``to_kebab_case("Hello World")`` — not a pipeline.
These functions are the supported entry points; each is a thin wrapper
over the shared pipeline with a fixed style.

HOW: convert() builds validated options, runs normalize → filter →
tokenize, and assembles the tokens under the requested style. Options
can be passed as a ConversionOptions, a mapping (snake_case or camelCase
keys), keyword arguments, or any mix; keywords win.

RULES:
- Strict mode (throw_on_invalid=True) raises InvalidOptionError or
  InvalidInputError on the first invalid condition; nothing is returned
- Tolerant mode never raises for bad input or options; bad input → ""
- Unknown style keys raise KeyError in both modes

Examples:
    to_kebab_case(" Hello__WORLD--test ")          -> "hello-world-test"
    to_dot_case(["  multiple", "SEPARATORS_here"]) -> "multiple.separators.here"
    to_camel_case("XML_http_request", preserve_acronyms=True, pascal_case=True)
                                                   -> "XMLHttpRequest"
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from case_converter.core.assembler import assemble, resolve_style
from case_converter.core.options import ConversionOptions
from case_converter.core.tokenizer import tokenize_text
from case_converter.styles.base import BaseCaseStyle

OptionsArg = Optional[Union[ConversionOptions, Mapping[str, Any]]]


def convert(
    value: Any,
    style: Union[str, BaseCaseStyle],
    options: OptionsArg = None,
    **overrides: Any,
) -> str:
    """Convert ``value`` to the given case style."""
    renderer = resolve_style(style)
    opts = ConversionOptions.build(options, **overrides)
    tokens = tokenize_text(value, opts)
    return assemble(tokens, renderer, opts)


def to_kebab_case(value: Any, options: OptionsArg = None, **overrides: Any) -> str:
    """Lowercase words joined by hyphens: ``"hello world"`` → ``"hello-world"``."""
    return convert(value, "kebab", options, **overrides)


def to_dot_case(value: Any, options: OptionsArg = None, **overrides: Any) -> str:
    """Lowercase words joined by dots: ``"hello world"`` → ``"hello.world"``."""
    return convert(value, "dot", options, **overrides)


def to_camel_case(value: Any, options: OptionsArg = None, **overrides: Any) -> str:
    """lowerCamelCase by default; ``pascal_case=True`` gives UpperCamelCase."""
    return convert(value, "camel", options, **overrides)


def to_pascal_case(value: Any, options: OptionsArg = None, **overrides: Any) -> str:
    return convert(value, "pascal", options, **overrides)
