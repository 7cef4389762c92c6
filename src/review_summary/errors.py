"""Exception types raised by review-summary.

All errors derive from ``ReviewSummaryError`` (itself a ``ValueError``) so a
caller can catch every recoverable render failure with one clause.
"""

from __future__ import annotations

__all__ = ["MalformedInputError", "NoDataError", "ReviewSummaryError"]


class ReviewSummaryError(ValueError):
    """Base class for recoverable render failures."""


class MalformedInputError(ReviewSummaryError):
    """A JSON-text input (or long-text subtree) could not be parsed.

    Attributes:
        path: JSON Pointer (RFC 6901) of the offending value.  The document
              root is ``""``.
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(f"{message} (at {path or '<root>'})")
        self.message = message
        self.path = path


class NoDataError(ReviewSummaryError):
    """The data document is absent or empty after normalization."""

    def __init__(self, message: str = "No form data provided.") -> None:
        super().__init__(message)
