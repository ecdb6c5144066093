"""Validated configuration record for the conversion pipeline.

WHY: Callers pass options as keyword arguments, plain dicts (often with
the camelCase names used by JavaScript callers), or a ready-made record.
The pipeline stages need one fully-defaulted, immutable shape so they
never re-check types.

HOW: ConversionOptions is a frozen dataclass. ConversionOptions.build()
merges the inputs, validates each field independently, and either
returns a complete record or raises InvalidOptionError (strict mode).

RULES:
- throw_on_invalid is resolved first; it decides the policy for every
  other field
- Non-bool booleans: strict → InvalidOptionError, tolerant → bool(value)
- Non-str locale: strict → InvalidOptionError, tolerant → None
- Malformed locale strings always fall back to None (never raise)
- Unknown keys are ignored
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Union

from case_converter.errors import InvalidOptionError

logger = logging.getLogger(__name__)

# camelCase spellings accepted in mappings, mapped to field names.
_ALIASES: Dict[str, str] = {
    "normalizeDiacritics": "normalize_diacritics",
    "throwOnInvalid": "throw_on_invalid",
    "preserveNumbers": "preserve_numbers",
    "preserveAcronyms": "preserve_acronyms",
    "pascalCase": "pascal_case",
}

# Primary subtag of 2-8 letters, then alphanumeric subtags of 1-8 chars.
_LOCALE_RE = re.compile(r"^[A-Za-z]{2,8}(?:[-_][A-Za-z0-9]{1,8})*$")

_BOOL_FIELDS = (
    "normalize_diacritics",
    "preserve_numbers",
    "preserve_acronyms",
    "pascal_case",
)


@dataclass(frozen=True)
class ConversionOptions:
    """Fully-defaulted options shared by every pipeline stage.

    Attributes:
        normalize_diacritics: Strip combining marks after NFD decomposition.
        locale: Normalized BCP-47 tag (lowercase, ``-`` separated) or None.
        throw_on_invalid: Raise on invalid input/options instead of degrading.
        preserve_numbers: Keep pure-digit tokens in the output.
        preserve_acronyms: Camel styles only; keep uppercase runs intact.
        pascal_case: Camel styles only; capitalize the first word too.
    """

    normalize_diacritics: bool = False
    locale: Optional[str] = None
    throw_on_invalid: bool = False
    preserve_numbers: bool = True
    preserve_acronyms: bool = False
    pascal_case: bool = False

    @classmethod
    def build(
        cls,
        options: Union[None, "ConversionOptions", Mapping[str, Any]] = None,
        **overrides: Any,
    ) -> "ConversionOptions":
        """Validate raw option values and return a complete record.

        Args:
            options: None, an existing ConversionOptions, or a mapping keyed
                by field names or their camelCase aliases.
            **overrides: Individual option values; these win over ``options``.

        Raises:
            InvalidOptionError: Only when throw_on_invalid resolves to True
                and some value has the wrong kind.
        """
        raw = _collect(options, overrides)

        raw_throw = raw.get("throw_on_invalid", False)
        throw = bool(raw_throw)
        if throw and not isinstance(raw_throw, bool):
            raise InvalidOptionError(
                'Option "throw_on_invalid" must be a boolean', field="throw_on_invalid"
            )

        values: Dict[str, Any] = {"throw_on_invalid": throw}
        defaults = cls()

        for name in _BOOL_FIELDS:
            if name not in raw:
                continue
            value = raw[name]
            if not isinstance(value, bool):
                if throw:
                    raise InvalidOptionError(
                        'Option "{}" must be a boolean'.format(name), field=name
                    )
                value = bool(value)
            values[name] = value

        values["locale"] = _resolve_locale(raw.get("locale"), throw)

        for name in _BOOL_FIELDS:
            values.setdefault(name, getattr(defaults, name))
        return cls(**values)


def _collect(
    options: Union[None, ConversionOptions, Mapping[str, Any]],
    overrides: Mapping[str, Any],
) -> Dict[str, Any]:
    """Merge options and overrides into one dict keyed by field names."""
    known = {f.name for f in fields(ConversionOptions)}
    raw: Dict[str, Any] = {}

    if isinstance(options, ConversionOptions):
        for name in known:
            raw[name] = getattr(options, name)
    elif isinstance(options, Mapping):
        raw.update(options)
    elif options is not None:
        # An options "bag" of the wrong kind carries no usable values.
        logger.debug("Ignoring options of type %s", type(options).__name__)

    raw.update(overrides)

    merged: Dict[str, Any] = {}
    for key, value in raw.items():
        name = _ALIASES.get(key, key)
        if name not in known:
            logger.debug("Ignoring unknown option %r", key)
            continue
        merged[name] = value
    return merged


def _resolve_locale(value: Any, throw: bool) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        if throw:
            raise InvalidOptionError('Option "locale" must be a string', field="locale")
        return None
    tag = value.strip()
    if not _LOCALE_RE.match(tag):
        logger.debug("Malformed locale %r, using default case mapping", value)
        return None
    return tag.replace("_", "-").lower()
