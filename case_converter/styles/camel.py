"""camelCase and PascalCase styles.

WHY: Camel styles are the only ones where per-token casing depends on
position (first word vs. the rest) and on the acronym option, so they
need their own renderer.

HOW: Each token is rendered independently and the renderings are
concatenated. The first token is the only one whose treatment depends
on pascal_case.

RULES:
- preserve_acronyms + all-uppercase token of length > 1 → unchanged,
  first token included ("XML" stays "XML")
- First token: lowercased, or capitalized when pascal_case is set
- Every other token: first char uppercased, rest lowercased
- Locale-aware casing via case_converter.core.casing
- PascalStyle is CamelStyle with pascal_case forced on
"""

from __future__ import annotations

import dataclasses
from typing import List

from case_converter.core import casing
from case_converter.core.options import ConversionOptions
from case_converter.styles.base import BaseCaseStyle


class CamelStyle(BaseCaseStyle):
    key = "camel"
    joiner = ""

    @property
    def name(self) -> str:
        return "camelCase"

    def render(self, tokens: List[str], options: ConversionOptions) -> str:
        parts = []
        for index, token in enumerate(tokens):
            if options.preserve_acronyms and casing.is_acronym(token):
                parts.append(token)
            elif index == 0 and not options.pascal_case:
                parts.append(casing.lower(token, options.locale))
            else:
                parts.append(casing.capitalize(token, options.locale))
        return "".join(parts)


class PascalStyle(CamelStyle):
    key = "pascal"

    @property
    def name(self) -> str:
        return "PascalCase"

    def render(self, tokens: List[str], options: ConversionOptions) -> str:
        if not options.pascal_case:
            options = dataclasses.replace(options, pascal_case=True)
        return super().render(tokens, options)
