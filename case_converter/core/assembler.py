"""Final pipeline stage: render tokens under a case style.

RULES:
- style may be a registry key ("kebab", "dot", "camel", "pascal") or a
  BaseCaseStyle instance
- An empty token list renders as "" for every style
- Unknown keys raise KeyError listing the registered styles
"""

from __future__ import annotations

from typing import List, Union

from case_converter.core.options import ConversionOptions
from case_converter.styles import STYLES
from case_converter.styles.base import BaseCaseStyle


def resolve_style(style: Union[str, BaseCaseStyle]) -> BaseCaseStyle:
    """Return a style instance for a registry key or pass an instance through."""
    if isinstance(style, BaseCaseStyle):
        return style
    try:
        return STYLES[style]()
    except KeyError:
        raise KeyError(
            "Unknown case style '{}'. Available: {}".format(
                style, ", ".join(sorted(STYLES))
            )
        ) from None


def assemble(
    tokens: List[str],
    style: Union[str, BaseCaseStyle],
    options: ConversionOptions,
) -> str:
    renderer = resolve_style(style)
    if not tokens:
        return ""
    return renderer.render(tokens, options)
