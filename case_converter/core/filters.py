"""Separator collapsing and punctuation removal.

WHY: Real-world identifiers mix every kind of separator ("user__id",
"path/to.file", "a - b"). Treating all of them as one boundary, and
dropping punctuation that is not part of any word, leaves the tokenizer
with a single, simple split rule.

HOW: A regex replaces each run of whitespace or explicit separators with
one space. A character-class pass then keeps only letters, numbers,
space separators, and emoji/pictographs (looked up in EMOJI_RANGES).
Finally the text is trimmed and internal whitespace collapsed.

RULES:
- Runs of whitespace, "_", "-", ".", "/", "\\" → one space
- Kept: Unicode categories L*, N*, Zs, the ASCII space, emoji ranges
- Everything else (punctuation, symbols, controls, marks) is deleted
- Result has no leading/trailing space and no double spaces
"""

from __future__ import annotations

import bisect
import re
import unicodedata

from case_converter.config import BOUNDARY_MARKER, EMOJI_RANGES, SEPARATOR_CHARS

_SEPARATOR_RUN_RE = re.compile(r"[\s{}]+".format(re.escape(SEPARATOR_CHARS)))
_WHITESPACE_RUN_RE = re.compile(r"\s+")

_RANGE_STARTS = [start for start, _ in EMOJI_RANGES]


def is_pictographic(ch: str) -> bool:
    """True if the codepoint lies in one of the configured emoji ranges."""
    cp = ord(ch)
    idx = bisect.bisect_right(_RANGE_STARTS, cp) - 1
    if idx < 0:
        return False
    return cp <= EMOJI_RANGES[idx][1]


def _is_kept(ch: str) -> bool:
    if ch == BOUNDARY_MARKER:
        return True
    category = unicodedata.category(ch)
    if category[0] in ("L", "N") or category == "Zs":
        return True
    return is_pictographic(ch)


def collapse_separators(text: str) -> str:
    """Replace every separator run with a single boundary marker."""
    return _SEPARATOR_RUN_RE.sub(BOUNDARY_MARKER, text)


def strip_punctuation(text: str) -> str:
    """Delete characters that are neither word material nor emoji."""
    return "".join(ch for ch in text if _is_kept(ch))


def filter_text(text: str) -> str:
    """Run the full separator/punctuation filter over normalized text."""
    if not text:
        return ""
    working = collapse_separators(text)
    working = strip_punctuation(working)
    return _WHITESPACE_RUN_RE.sub(BOUNDARY_MARKER, working.strip())
