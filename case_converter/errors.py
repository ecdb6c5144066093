"""Exception taxonomy for conversion and comment storage.

Conversion errors subclass TypeError: every one of them reports a value
of the wrong kind. They are only raised when ``throw_on_invalid`` is set;
otherwise the pipeline degrades silently.
"""

from __future__ import annotations

from typing import Optional


class CaseConversionError(TypeError):
    """Base class for strict-mode conversion failures."""


class InvalidInputError(CaseConversionError):
    """The primary input is None or not text / a sequence of text."""


class InvalidOptionError(CaseConversionError):
    """An option value has the wrong kind.

    Attributes:
        field: Name of the offending option (Python spelling).
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class CommentStoreError(RuntimeError):
    """The comments store could not complete an operation."""
