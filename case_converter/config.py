"""Configuration constants, character tables, and .env loading.

WHY: Centralizes every tunable value so it is easy to find, update, and
override. Separator sets, emoji ranges, and locale tables are plain data
structures (not buried in regexes inside the pipeline) so both humans
and tools can modify them confidently.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level tuples, sets, and strings. Server defaults can be
overridden through CASE_CONVERTER_* environment variables.

RULES:
- SEPARATOR_CHARS lists the explicit (non-whitespace) word boundaries
- EMOJI_RANGES are inclusive codepoint ranges kept by the filter
- TURKIC_LANGUAGES drive dotted/dotless I case mapping
- All server defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the process is started from)
load_dotenv()

# ---------------------------------------------------------------------------
# Pipeline tables
# ---------------------------------------------------------------------------

SEPARATOR_CHARS = "_-./\\"
"""Explicit separators equivalent to whitespace (underscore, hyphen, period, slashes)."""

BOUNDARY_MARKER = " "
"""Canonical single-space boundary every separator run collapses to."""

# Emoji-presentation / extended-pictographic blocks (inclusive).
EMOJI_RANGES: tuple[tuple[int, int], ...] = (
    (0x00A9, 0x00A9),    # copyright sign
    (0x00AE, 0x00AE),    # registered sign
    (0x203C, 0x203C),
    (0x2049, 0x2049),
    (0x2122, 0x2122),
    (0x2139, 0x2139),
    (0x2194, 0x2199),
    (0x21A9, 0x21AA),
    (0x231A, 0x231B),
    (0x2328, 0x2328),
    (0x23CF, 0x23CF),
    (0x23E9, 0x23F3),
    (0x23F8, 0x23FA),
    (0x24C2, 0x24C2),
    (0x25AA, 0x25AB),
    (0x25B6, 0x25B6),
    (0x25C0, 0x25C0),
    (0x25FB, 0x25FE),
    (0x2600, 0x27BF),    # misc symbols, dingbats
    (0x2934, 0x2935),
    (0x2B05, 0x2B07),
    (0x2B1B, 0x2B1C),
    (0x2B50, 0x2B50),
    (0x2B55, 0x2B55),
    (0x3030, 0x3030),
    (0x303D, 0x303D),
    (0x3297, 0x3297),
    (0x3299, 0x3299),
    (0x1F000, 0x1F0FF),  # mahjong, domino, playing cards
    (0x1F10D, 0x1F10F),
    (0x1F12F, 0x1F12F),
    (0x1F16C, 0x1F171),
    (0x1F17E, 0x1F17F),
    (0x1F18E, 0x1F18E),
    (0x1F191, 0x1F19A),
    (0x1F1E6, 0x1F1FF),  # regional indicators
    (0x1F201, 0x1F20F),
    (0x1F21A, 0x1F21A),
    (0x1F22F, 0x1F22F),
    (0x1F232, 0x1F23A),
    (0x1F23C, 0x1F23F),
    (0x1F249, 0x1F3FA),
    (0x1F400, 0x1F53D),
    (0x1F546, 0x1F64F),
    (0x1F680, 0x1F6FF),  # transport and map
    (0x1F774, 0x1F77F),
    (0x1F7D5, 0x1F7FF),
    (0x1F80C, 0x1F80F),
    (0x1F848, 0x1F84F),
    (0x1F85A, 0x1F85F),
    (0x1F888, 0x1F88F),
    (0x1F8AE, 0x1F8FF),
    (0x1F90C, 0x1F93A),
    (0x1F93C, 0x1F945),
    (0x1F947, 0x1FAFF),  # supplemental symbols and pictographs
    (0x1FC00, 0x1FFFD),
)

# ---------------------------------------------------------------------------
# Locale tables
# ---------------------------------------------------------------------------

TURKIC_LANGUAGES: frozenset[str] = frozenset({"tr", "az"})
"""Primary language subtags whose I/i case mapping differs from the default."""

TURKIC_LOWER_MAP = {ord("I"): "ı", ord("İ"): "i"}
TURKIC_UPPER_MAP = {ord("i"): "İ", ord("ı"): "I"}

DEFAULT_LOWER_MAP = {ord("İ"): "i"}
"""Capital dotted I lowers to a plain i instead of i plus a combining dot."""

# ---------------------------------------------------------------------------
# Server / CLI defaults
# ---------------------------------------------------------------------------

DEFAULT_STYLE = os.getenv("CASE_CONVERTER_DEFAULT_STYLE", "kebab")
API_HOST = os.getenv("CASE_CONVERTER_HOST", "0.0.0.0")
API_PORT = int(os.getenv("CASE_CONVERTER_PORT", "8000"))
MAX_COMMENTS = int(os.getenv("CASE_CONVERTER_MAX_COMMENTS", "1000"))
