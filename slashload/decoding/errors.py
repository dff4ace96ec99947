"""Errors raised while decoding a token stream."""

from __future__ import annotations

from typing import Optional


class DecodeError(Exception):
    """Raised when a cursor cannot supply a conforming value."""

    def __init__(self, message: str, *, index: Optional[int] = None) -> None:
        if index is not None:
            message = f"{message} (token #{index})"
        super().__init__(message)
        self.index = index


class ExhaustedInputError(DecodeError):
    """Raised when attempting to read past the last token."""

    def __init__(self, index: int) -> None:
        super().__init__("Unexpected end of input", index=index)


class FormatError(DecodeError):
    """Raised when a token exists but does not parse as the expected kind."""

    def __init__(
        self, token: str, expected: str, *, index: Optional[int] = None, reason: str = ""
    ) -> None:
        message = f"Cannot decode {token!r} as {expected}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, index=index)
        self.token = token
        self.expected = expected
