"""Type-code dispatch from raw bytes to frame variants.

The registry is a closed set. A header whose type code has no entry is
rejected with :class:`FrameNotImplementedError` instead of being decoded as a
generic frame.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from ..util import log_hexdump
from . import protocol
from .errors import FALinkError, FrameNotImplementedError, TooShortToParseError
from .frames import Cyclic, FALinkFrame, ParticipationRequest, Token, Trigger

__all__ = ["FRAME_TYPES", "parse", "peek_type_code"]

logger = logging.getLogger(__name__)

FRAME_TYPES: Final[Mapping[int, type[FALinkFrame]]] = MappingProxyType(
    {
        protocol.TypeCode.TOKEN: Token,
        protocol.TypeCode.CYCLIC: Cyclic,
        protocol.TypeCode.PARTICIPATION_REQUEST: ParticipationRequest,
        protocol.TypeCode.TRIGGER: Trigger,
    }
)


def peek_type_code(data: bytes | bytearray | memoryview) -> int:
    """Read the TCD field at offset 40 without decoding the rest of the header."""
    if len(data) < protocol.HEADER_SIZE:
        raise TooShortToParseError("header", protocol.HEADER_SIZE, len(data))
    start = protocol.TYPE_CODE_OFFSET
    return protocol.TYPE_CODE_STRUCT.parse(bytes(data[start : start + 2]))


def parse(data: bytes | bytearray | memoryview) -> FALinkFrame:
    """Decode *data* as whichever frame variant its type code selects."""
    type_code = peek_type_code(data)
    frame_type = FRAME_TYPES.get(type_code)
    if frame_type is None:
        logger.debug("Rejecting frame with unsupported type code %s", protocol.type_code_name(type_code))
        raise FrameNotImplementedError(type_code)

    try:
        frame = frame_type.decode(data)
    except FALinkError as exc:
        exc.add_note(f"raised during dispatch decode of {protocol.type_code_name(type_code)} ({type_code})")
        raise

    log_hexdump(logger, logging.DEBUG, f"parsed {frame_type.NAME}", bytes(data[: frame.marshal_len()]))
    return frame
