"""Input format errors raised by the case reader."""

from __future__ import annotations


class InputFormatError(ValueError):
    """Base class for malformed case input."""


class MalformedCountError(InputFormatError):
    """Raised when a pattern count is not a non-negative integer."""

    def __init__(self, token: str, position: int) -> None:
        self.token = token
        self.position = position
        super().__init__(
            f"Malformed pattern count {token!r} at token {position}"
        )


class TruncatedPatternListError(InputFormatError):
    """Raised when input ends before a case's declared patterns are read."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Truncated pattern list: expected {expected} pattern(s), "
            f"got {actual}"
        )
