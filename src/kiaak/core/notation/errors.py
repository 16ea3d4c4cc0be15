"""Parse failure type shared by every notation decoder."""

from __future__ import annotations

from enum import StrEnum


class ParseErrorKind(StrEnum):
    """Why a decoder rejected its input."""

    UNEXPECTED_SYMBOL = "unexpected symbol"
    INVALID_COORDINATE = "invalid coordinate"
    MALFORMED_STICK_THROW = "malformed stick throw"
    NO_MATCHING_SHAPE = "no matching move shape"


class NotationError(ValueError):
    """Raised when notation text cannot be decoded.

    *remainder* is the unconsumed input at the point of failure. For
    :attr:`ParseErrorKind.NO_MATCHING_SHAPE` the deepest failure among the
    tried alternatives is kept in *cause*.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        remainder: str,
        cause: NotationError | None = None,
    ) -> None:
        super().__init__(f"{kind}: {message}")
        self.kind = kind
        self.message = message
        self.remainder = remainder
        self.cause = cause

    def __reduce__(self) -> tuple[type[NotationError], tuple[object, ...]]:
        return type(self), (self.kind, self.message, self.remainder, self.cause)
