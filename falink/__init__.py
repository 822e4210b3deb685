"""FA-link frame codec package initialisation."""

__version__ = "0.1.0"

from .protocol import (  # noqa: E402
    Cyclic,
    FALinkError,
    FieldRangeError,
    FrameNotImplementedError,
    Header,
    ParticipationRequest,
    Token,
    TooShortToMarshalError,
    TooShortToParseError,
    Trigger,
    TypeCode,
    parse,
    parse_header,
)

__all__ = [
    "__version__",
    "Cyclic",
    "FALinkError",
    "FieldRangeError",
    "FrameNotImplementedError",
    "Header",
    "ParticipationRequest",
    "Token",
    "TooShortToMarshalError",
    "TooShortToParseError",
    "Trigger",
    "TypeCode",
    "parse",
    "parse_header",
]
