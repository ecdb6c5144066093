"""Input canonicalization: sequence joining, NFC, diacritic stripping.

WHY: Downstream stages compare codepoints one at a time. The same visible
text can arrive composed ("é") or decomposed ("e" + U+0301); without a
canonical form the filter and tokenizer would treat them differently.

HOW: Sequences are joined with a single space, then the text is
normalized to NFC. When diacritic stripping is requested the text is
decomposed (NFD), combining marks (category Mn) are dropped, and the
result is recomposed (NFC).

RULES:
- str input passes through; list/tuple elements are joined with " "
- None elements become ""; other non-str elements go through str()
- None or any other kind → InvalidInputError (strict) or "" (tolerant)
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Any

from case_converter.core.options import ConversionOptions
from case_converter.errors import InvalidInputError

logger = logging.getLogger(__name__)


def strip_diacritics(text: str) -> str:
    """Remove combining marks: ``"Crème brûlée"`` → ``"Creme brulee"``."""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", stripped)


def coerce_input(value: Any, options: ConversionOptions) -> str:
    """Turn the raw input into a single string, or reject it."""
    if value is None:
        if options.throw_on_invalid:
            raise InvalidInputError("Input is None")
        logger.debug("Input is None, returning empty output")
        return ""

    if isinstance(value, str):
        return value

    if isinstance(value, (list, tuple)):
        parts = []
        for part in value:
            if part is None:
                parts.append("")
            elif isinstance(part, str):
                parts.append(part)
            else:
                parts.append(str(part))
        return " ".join(parts)

    if options.throw_on_invalid:
        raise InvalidInputError(
            "Input must be a string or a sequence of strings, got {}".format(
                type(value).__name__
            )
        )
    logger.debug("Unsupported input type %s, returning empty output", type(value).__name__)
    return ""


def normalize(value: Any, options: ConversionOptions) -> str:
    """Canonicalize raw input to NFC text (optionally without diacritics)."""
    text = coerce_input(value, options)
    if not text:
        return ""

    text = unicodedata.normalize("NFC", text)
    if options.normalize_diacritics:
        text = strip_diacritics(text)
    return text
