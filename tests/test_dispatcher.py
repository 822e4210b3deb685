"""Tests for type-code dispatch."""

from __future__ import annotations

import logging

import pytest

from falink.protocol import dispatcher, protocol
from falink.protocol.errors import FALinkError, FrameNotImplementedError, TooShortToParseError
from falink.protocol.frames import Cyclic, ParticipationRequest, Token, Trigger
from falink.protocol.protocol import TypeCode
from tests.test_constants import CYCLIC_CAPTURE, TOKEN_CAPTURE, TRIGGER_CAPTURE


def _with_type_code(raw: bytes, type_code: int) -> bytes:
    patched = bytearray(raw)
    patched[40:42] = type_code.to_bytes(2, "big")
    return bytes(patched)


def test_peek_type_code() -> None:
    assert dispatcher.peek_type_code(TOKEN_CAPTURE) == TypeCode.TOKEN
    assert dispatcher.peek_type_code(TRIGGER_CAPTURE) == TypeCode.TRIGGER


def test_parse_token() -> None:
    frame = dispatcher.parse(TOKEN_CAPTURE)
    assert isinstance(frame, Token)
    assert frame == Token.new()


def test_parse_trigger() -> None:
    frame = dispatcher.parse(TRIGGER_CAPTURE)
    assert isinstance(frame, Trigger)
    assert frame.node_name == b"NODE      "


def test_parse_participation_request() -> None:
    raw = _with_type_code(TRIGGER_CAPTURE, TypeCode.PARTICIPATION_REQUEST)
    frame = dispatcher.parse(raw)
    assert isinstance(frame, ParticipationRequest)
    assert frame.encode() == raw


def test_parse_cyclic() -> None:
    frame = dispatcher.parse(CYCLIC_CAPTURE)
    assert isinstance(frame, Cyclic)
    assert frame.encode() == CYCLIC_CAPTURE


def test_end_to_end_token() -> None:
    token = Token.new(source_node=0x01, destination_node=0x55)
    parsed = dispatcher.parse(token.encode())
    assert parsed == token
    assert parsed.header.source_address == 0x00010001
    assert parsed.header.destination_address == 0x00010055


@pytest.mark.parametrize(
    "type_code",
    [
        TypeCode.BYTE_BLOCK_READ,
        TypeCode.BYTE_BLOCK_WRITE,
        TypeCode.WORD_BLOCK_READ,
        TypeCode.WORD_BLOCK_WRITE,
        TypeCode.NETWORK_PARAMETER_READ,
        TypeCode.NETWORK_PARAMETER_WRITE,
        TypeCode.STOP_COMMAND,
        TypeCode.OPERATION_COMMAND,
        TypeCode.PROFILE_READ,
        0,
        0xFFFF,
    ],
)
def test_unsupported_type_codes_are_rejected(type_code: int) -> None:
    with pytest.raises(FrameNotImplementedError) as excinfo:
        dispatcher.parse(_with_type_code(TOKEN_CAPTURE, type_code))
    assert excinfo.value.type_code == type_code
    assert isinstance(excinfo.value, NotImplementedError)


def test_registry_is_closed() -> None:
    assert set(dispatcher.FRAME_TYPES) == {
        TypeCode.TOKEN,
        TypeCode.CYCLIC,
        TypeCode.PARTICIPATION_REQUEST,
        TypeCode.TRIGGER,
    }
    with pytest.raises(TypeError):
        dispatcher.FRAME_TYPES[1] = Token  # type: ignore[index]


@pytest.mark.parametrize("raw", [TOKEN_CAPTURE[:63], TRIGGER_CAPTURE[:63], CYCLIC_CAPTURE[:63], b""])
def test_parse_rejects_short_buffers(raw: bytes) -> None:
    with pytest.raises(TooShortToParseError):
        dispatcher.parse(raw)


def test_parse_accepts_minimum_token() -> None:
    assert isinstance(dispatcher.parse(TOKEN_CAPTURE[: protocol.HEADER_SIZE]), Token)


def test_variant_errors_propagate_with_dispatch_note() -> None:
    with pytest.raises(TooShortToParseError) as excinfo:
        dispatcher.parse(TRIGGER_CAPTURE[:80])
    assert excinfo.value.required == protocol.PARTICIPATION_FRAME_SIZE
    assert any("dispatch decode of TRIGGER" in note for note in excinfo.value.__notes__)


def test_parse_logs_hexdump(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="falink.protocol.dispatcher"):
        dispatcher.parse(TOKEN_CAPTURE)
    assert "[HEXDUMP] parsed token frame: 46 41 43 4E" in caplog.text


def test_all_errors_share_base_class() -> None:
    for exc_type in (FrameNotImplementedError, TooShortToParseError):
        assert issubclass(exc_type, FALinkError)
