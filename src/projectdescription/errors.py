"""Errors raised while decoding serialized project descriptions."""

from __future__ import annotations


class DecodingError(ValueError):
    """Raised when serialized data cannot be turned into a model value.

    Attributes:
        key: The offending key, or None when the payload as a whole is invalid.
    """

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key
