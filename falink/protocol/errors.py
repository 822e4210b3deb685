"""Exceptions raised by the FA-link codec."""

from __future__ import annotations

from .protocol import type_code_name

__all__ = [
    "FALinkError",
    "TooShortToParseError",
    "TooShortToMarshalError",
    "FrameNotImplementedError",
    "FieldRangeError",
]


class FALinkError(Exception):
    """Base class for every codec failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TooShortToParseError(FALinkError, ValueError):
    """Raised when a buffer is too short to decode the requested structure."""

    def __init__(self, what: str, required: int, actual: int) -> None:
        super().__init__(f"too short to decode as {what}: need {required} bytes, got {actual}")
        self.required = required
        self.actual = actual


class TooShortToMarshalError(FALinkError, ValueError):
    """Raised when a target buffer cannot hold the serialized structure."""

    def __init__(self, what: str, required: int, actual: int) -> None:
        super().__init__(f"insufficient buffer to serialize {what}: need {required} bytes, have {actual}")
        self.required = required
        self.actual = actual


class FrameNotImplementedError(FALinkError, NotImplementedError):
    """Raised when a header carries a type code with no registered decoder."""

    def __init__(self, type_code: int) -> None:
        super().__init__(f"frame type {type_code_name(type_code)} ({type_code}) is not implemented")
        self.type_code = type_code


class FieldRangeError(FALinkError, ValueError):
    """Raised when a value does not fit the wire field that carries it."""

    def __init__(self, what: str, detail: str) -> None:
        super().__init__(f"{what} encoding failed: {detail}")
        self.what = what
