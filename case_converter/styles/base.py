"""Abstract base for case styles.

WHY: Every output style consumes the same token list but renders it
differently. A shared interface lets the converters, the CLI, and the
API work with any style generically.

HOW: BaseCaseStyle is an ABC with ``key``, ``name``, ``joiner`` and a
``render()`` method. DelimitedStyle covers every "lowercase words joined
by one character" style so kebab and dot are one line each.

To add a new style:
1. Create a module in styles/
2. Subclass BaseCaseStyle (or DelimitedStyle)
3. Register it in STYLES in styles/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from case_converter.core import casing
from case_converter.core.options import ConversionOptions


class BaseCaseStyle(ABC):
    """Renders an ordered token list as one string."""

    key: str = ""
    joiner: str = ""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable style name, e.g. 'kebab-case'."""

    @abstractmethod
    def render(self, tokens: List[str], options: ConversionOptions) -> str:
        """Join tokens under this style.

        Args:
            tokens: Non-empty word tokens in input order.
            options: Validated options; styles read only what applies to them.
        """


class DelimitedStyle(BaseCaseStyle):
    """Lowercase every token and join with ``joiner``."""

    def render(self, tokens: List[str], options: ConversionOptions) -> str:
        return self.joiner.join(casing.lower(token, options.locale) for token in tokens)
