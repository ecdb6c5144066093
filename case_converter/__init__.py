"""case_converter — Unicode-aware case conversion utilities.

WHY: Identifiers and labels arrive in every shape ("Hello__WORLD--test",
"XMLHttpRequest", ["  multiple", "SEPARATORS_here"]). This package turns
any of them into kebab-case, dot.case, camelCase or PascalCase with one
consistent set of word-boundary rules.

HOW: One shared pipeline — normalize, filter, tokenize, assemble — with
pluggable styles for the final step. A small FastAPI service and a CLI
sit on top.

RULES:
- Every style shares the same tokenization
- Conversion is pure; no module-level state is read or written
- The names exported here are the supported public API
"""

from case_converter.converters import (
    convert,
    to_camel_case,
    to_dot_case,
    to_kebab_case,
    to_pascal_case,
)
from case_converter.core.options import ConversionOptions
from case_converter.core.tokenizer import tokenize_text
from case_converter.errors import (
    CaseConversionError,
    InvalidInputError,
    InvalidOptionError,
)

__version__ = "0.1.0"

__all__ = [
    "CaseConversionError",
    "ConversionOptions",
    "InvalidInputError",
    "InvalidOptionError",
    "convert",
    "to_camel_case",
    "to_dot_case",
    "to_kebab_case",
    "to_pascal_case",
    "tokenize_text",
]
