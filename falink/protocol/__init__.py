"""FA-link protocol codec: header, frame variants and dispatch."""

from . import protocol, header, frames, dispatcher
from .dispatcher import FRAME_TYPES, parse, peek_type_code
from .errors import (
    FALinkError,
    FieldRangeError,
    FrameNotImplementedError,
    TooShortToMarshalError,
    TooShortToParseError,
)
from .frames import Cyclic, FALinkFrame, ParticipationFrame, ParticipationRequest, Token, Trigger, fit_name, name_text
from .header import Header, parse_header
from .protocol import TypeCode

__all__ = [
    "FRAME_TYPES",
    "Cyclic",
    "FALinkError",
    "FALinkFrame",
    "FrameNotImplementedError",
    "Header",
    "ParticipationFrame",
    "ParticipationRequest",
    "Token",
    "TooShortToMarshalError",
    "TooShortToParseError",
    "Trigger",
    "TypeCode",
    "fit_name",
    "name_text",
    "parse",
    "parse_header",
    "peek_type_code",
    "protocol",
    "header",
    "frames",
    "dispatcher",
]
