"""Locale-aware lower/upper case mapping.

Python's str.lower/str.upper implement the default Unicode mappings.
The only locale-specific tailoring applied here is the Turkic dotted and
dotless I (``tr``, ``az``); every other locale, and no locale, uses the
defaults, except that capital dotted I lowers to a plain ``i``.
"""

from __future__ import annotations

from typing import Optional

from case_converter.config import (
    DEFAULT_LOWER_MAP,
    TURKIC_LANGUAGES,
    TURKIC_LOWER_MAP,
    TURKIC_UPPER_MAP,
)


def _language(locale: Optional[str]) -> Optional[str]:
    if not locale:
        return None
    return locale.split("-", 1)[0].lower()


def lower(text: str, locale: Optional[str] = None) -> str:
    if _language(locale) in TURKIC_LANGUAGES:
        text = text.translate(TURKIC_LOWER_MAP)
    else:
        text = text.translate(DEFAULT_LOWER_MAP)
    return text.lower()


def upper(text: str, locale: Optional[str] = None) -> str:
    if _language(locale) in TURKIC_LANGUAGES:
        text = text.translate(TURKIC_UPPER_MAP)
    return text.upper()


def capitalize(text: str, locale: Optional[str] = None) -> str:
    """Uppercase the first character and lowercase the rest."""
    if not text:
        return text
    return upper(text[0], locale) + lower(text[1:], locale)


def is_acronym(token: str) -> bool:
    """True for multi-char tokens of uppercase letters and digits only ("XML", "HTTP2")."""
    if len(token) < 2:
        return False
    return all(ch.isupper() or ch.isdecimal() for ch in token)
