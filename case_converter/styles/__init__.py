"""Case style registry — pluggable assembly strategies.

WHY: The converters, CLI, and API need a single lookup to find the
right style by name. A central dict makes adding a style trivial:
create the class, import it here, add one line.

HOW: STYLES maps string keys to style *classes* (not instances).
Callers instantiate as needed: ``style = STYLES["kebab"]()``.

RULES:
- Keys are the short identifiers used by the CLI and the HTTP API
- Values are BaseCaseStyle subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from case_converter.styles.camel import CamelStyle, PascalStyle
from case_converter.styles.delimited import DotStyle, KebabStyle

if TYPE_CHECKING:
    from case_converter.styles.base import BaseCaseStyle

STYLES: dict[str, type[BaseCaseStyle]] = {
    "kebab": KebabStyle,
    "dot": DotStyle,
    "camel": CamelStyle,
    "pascal": PascalStyle,
}
