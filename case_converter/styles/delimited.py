"""kebab-case and dot.case styles.

RULES:
- Every token is lowercased (Turkic-aware when a locale is set)
- preserve_acronyms and pascal_case do not apply
"""

from __future__ import annotations

from case_converter.styles.base import DelimitedStyle


class KebabStyle(DelimitedStyle):
    key = "kebab"
    joiner = "-"

    @property
    def name(self) -> str:
        return "kebab-case"


class DotStyle(DelimitedStyle):
    key = "dot"
    joiner = "."

    @property
    def name(self) -> str:
        return "dot.case"
