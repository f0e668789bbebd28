"""Exceptions raised by corestr."""

from typing import Optional


class CoreStringsError(Exception):
    """Base class for corestr errors."""


class FormatEncodingError(CoreStringsError, AssertionError):
    """The renderer reported a negative size for a template.

    This is a programming error (template and arguments do not match),
    not a runtime condition. Callers are not expected to recover from it.
    """

    def __init__(self, template: str, reason: Optional[str] = None):
        self.template = template
        self.reason = reason
        message = f"Encoding error while formatting {template!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ConversionError(CoreStringsError, UnicodeError):
    """Narrow/wide text conversion failed on malformed input."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.position = position
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)
