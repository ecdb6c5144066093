"""Word tokenization with case and digit transition splitting.

WHY: After filtering, a raw token may still hold several words glued by
casing ("XMLHttpRequest") or digits ("version2Beta"). Every output style
needs the same word list, so this is the single place where word
boundaries are decided.

HOW: The filtered text is split on the boundary marker. Pure-number
tokens are handled by the number policy and never split. Every other
token is scanned left to right comparing (prev, curr) with a one-char
lookahead, and a boundary is placed before curr when a transition rule
fires.

RULES:
- lower → Upper splits: "fooBar" → ["foo", "Bar"]
- digit ↔ non-digit splits: "abc123def" → ["abc", "123", "def"]
- Upper Upper lower splits before the last capital:
  "XMLHttp" → ["XML", "Http"]
- A trailing acronym stays whole: "fooXML" → ["foo", "XML"]
- Case tests use str.islower/str.isupper, so uncased scripts never split
- Pure-digit tokens are dropped when preserve_numbers is False
- Empty tokens/segments are never emitted
"""

from __future__ import annotations

from typing import Any, List

from case_converter.config import BOUNDARY_MARKER
from case_converter.core.filters import filter_text
from case_converter.core.normalizer import normalize
from case_converter.core.options import ConversionOptions


def is_number_token(token: str) -> bool:
    """True for tokens made only of decimal digits ("2024", "٣")."""
    return token.isdecimal()


def _is_boundary(prev: str, curr: str, nxt: str) -> bool:
    if prev.islower() and curr.isupper():
        return True
    if prev.isdecimal() != curr.isdecimal():
        return True
    return prev.isupper() and curr.isupper() and nxt.islower()


def split_transitions(token: str) -> List[str]:
    """Split one raw token on case and digit transitions."""
    segments: List[str] = []
    start = 0
    length = len(token)

    for index in range(1, length):
        prev = token[index - 1]
        curr = token[index]
        nxt = token[index + 1] if index + 1 < length else ""

        if _is_boundary(prev, curr, nxt):
            if index > start:
                segments.append(token[start:index])
            start = index

    if length > start:
        segments.append(token[start:])
    return segments


def tokenize(text: str, options: ConversionOptions) -> List[str]:
    """Split filtered text into ordered word tokens.

    Args:
        text: Output of filter_text (single-space separated, trimmed).
        options: Only preserve_numbers is consulted here.

    Returns:
        Tokens in left-to-right order of appearance.
    """
    tokens: List[str] = []
    if not text:
        return tokens

    for raw in text.split(BOUNDARY_MARKER):
        if not raw:
            continue
        if is_number_token(raw):
            if options.preserve_numbers:
                tokens.append(raw)
            continue
        tokens.extend(segment for segment in split_transitions(raw) if segment)

    return tokens


def tokenize_text(value: Any, options: ConversionOptions) -> List[str]:
    """Run normalizer, filter, and tokenizer over raw input."""
    return tokenize(filter_text(normalize(value, options)), options)
