"""FA-link frame variants.

Every variant owns exactly one :class:`~falink.protocol.header.Header` plus an
optional body:

- :class:`Token`: header only, 64 bytes.
- :class:`Trigger` / :class:`ParticipationRequest`: header followed by three
  10-byte space padded names and a 2-byte reserved trailer, 96 bytes.
- :class:`Cyclic`: header followed by an opaque payload, 64 + len(data) bytes.

The ``new`` constructors derive TFL, BSIZE and TCD. ``decode`` never checks that
the decoded length fields agree with the buffer.
"""

from __future__ import annotations

from typing import Any, ClassVar, Self

import msgspec

from . import protocol
from .errors import FieldRangeError, TooShortToParseError
from .header import Header, require_room

__all__ = [
    "FALinkFrame",
    "Token",
    "ParticipationFrame",
    "Trigger",
    "ParticipationRequest",
    "Cyclic",
    "fit_name",
    "name_text",
]


def fit_name(name: str | bytes) -> bytes:
    """Right-pad *name* with spaces to 10 bytes, truncating longer names."""
    raw = name.encode("ascii") if isinstance(name, str) else bytes(name)
    return raw[: protocol.NAME_FIELD_SIZE].ljust(protocol.NAME_FIELD_SIZE, bytes([protocol.NAME_PAD_BYTE]))


def name_text(raw: bytes) -> str:
    """Render a stored name field without its space padding."""
    return raw.rstrip(bytes([protocol.NAME_PAD_BYTE])).decode("ascii", errors="replace")


def _base_header(**fields: Any) -> Header:
    values: dict[str, Any] = {
        "major_version": protocol.DEFAULT_MAJOR_VERSION,
        "minor_version": protocol.DEFAULT_MINOR_VERSION,
        "token_mode": True,
        "processing_type": protocol.DEFAULT_PROCESSING_TYPE,
        "current_block_number": protocol.DEFAULT_BLOCK_NUMBER,
        "total_block_number": protocol.DEFAULT_BLOCK_NUMBER,
        "token_watchdog": protocol.DEFAULT_TOKEN_WATCHDOG,
    }
    values.update(fields)
    return Header(**values)


class FALinkFrame(msgspec.Struct, frozen=True, kw_only=True):
    """Common behaviour of every frame variant."""

    TYPE_CODE: ClassVar[int]
    NAME: ClassVar[str] = "frame"

    header: Header

    @property
    def type_code(self) -> int:
        return self.header.type_code

    def encode_body(self) -> bytes:
        return b""

    def marshal_len(self) -> int:
        return protocol.HEADER_SIZE + len(self.encode_body())

    def encode(self) -> bytes:
        """Serialize header and body into wire bytes."""
        return self.header.encode() + self.encode_body()

    def marshal_into(self, buffer: bytearray | memoryview, offset: int = 0) -> None:
        """Write the frame into *buffer* at *offset*; nothing is written on failure."""
        encoded = self.encode()
        require_room(self.NAME, buffer, offset, len(encoded))
        buffer[offset : offset + len(encoded)] = encoded

    @classmethod
    def decode(cls, data: bytes | bytearray | memoryview) -> Any:
        raise NotImplementedError


class Token(FALinkFrame, frozen=True, kw_only=True):
    """Token frame passing the transmission right. Carries no body."""

    TYPE_CODE = protocol.TypeCode.TOKEN
    NAME = "token frame"

    @classmethod
    def new(
        cls,
        source_node: int = protocol.DEFAULT_TOKEN_SOURCE_NODE,
        destination_node: int = protocol.DEFAULT_TOKEN_DESTINATION_NODE,
        *,
        token_holder: bool = False,
        participating: bool = False,
        **header_fields: Any,
    ) -> "Token":
        header = _base_header(
            source_node=source_node,
            destination_node=destination_node,
            token_holder=token_holder,
            participating=participating,
            **header_fields,
        )
        return cls(
            header=header.replace(
                type_code=cls.TYPE_CODE,
                total_frame_length=protocol.HEADER_SIZE,
                frame_byte_size=protocol.HEADER_SIZE,
            )
        )

    @classmethod
    def decode(cls, data: bytes | bytearray | memoryview) -> "Token":
        return cls(header=Header.decode(data))


class ParticipationFrame(FALinkFrame, frozen=True, kw_only=True):
    """Header plus node, vendor and manufacturer names (96 bytes).

    Names are stored exactly as they appear on the wire: 10 bytes each,
    including padding. Direct construction rejects other widths; use
    :meth:`new` or :func:`fit_name` to pad.
    """

    NAME = "participation frame"

    node_name: bytes = fit_name(b"")
    vendor_name: bytes = fit_name(b"")
    manufacturer_name: bytes = fit_name(b"")

    def __post_init__(self) -> None:
        for field in ("node_name", "vendor_name", "manufacturer_name"):
            width = len(getattr(self, field))
            if width != protocol.NAME_FIELD_SIZE:
                raise FieldRangeError(self.NAME, f"{field} must be {protocol.NAME_FIELD_SIZE} bytes, got {width}")

    @classmethod
    def new(
        cls,
        source_node: int,
        destination_node: int = protocol.BROADCAST_NODE,
        *,
        node_name: str | bytes = b"",
        vendor_name: str | bytes = b"",
        manufacturer_name: str | bytes = b"",
        version_sequence: int = 0,
        sequence: int = 0,
        common_address1: int = 0,
        common_size1: int = 4,
        common_address2: int = 0,
        common_size2: int = 64,
        **header_fields: Any,
    ) -> Self:
        fields: dict[str, Any] = {"message_format": protocol.DEFAULT_MESSAGE_FORMAT}
        fields.update(header_fields)
        header = _base_header(
            source_node=source_node,
            destination_node=destination_node,
            version_sequence=version_sequence,
            sequence=sequence,
            common_address1=common_address1,
            common_size1=common_size1,
            common_address2=common_address2,
            common_size2=common_size2,
            **fields,
        )
        return cls(
            header=header.replace(
                type_code=cls.TYPE_CODE,
                total_frame_length=protocol.PARTICIPATION_FRAME_SIZE,
                frame_byte_size=protocol.PARTICIPATION_FRAME_SIZE,
            ),
            node_name=fit_name(node_name),
            vendor_name=fit_name(vendor_name),
            manufacturer_name=fit_name(manufacturer_name),
        )

    def encode_body(self) -> bytes:
        # The reserved trailer is always written as zero.
        return protocol.PARTICIPATION_BODY_STRUCT.build(
            {
                "node_name": self.node_name,
                "vendor_name": self.vendor_name,
                "manufacturer_name": self.manufacturer_name,
                "reserved": 0,
            }
        )

    def marshal_len(self) -> int:
        return protocol.PARTICIPATION_FRAME_SIZE

    @classmethod
    def decode(cls, data: bytes | bytearray | memoryview) -> Self:
        if len(data) < protocol.PARTICIPATION_FRAME_SIZE:
            raise TooShortToParseError(cls.NAME, protocol.PARTICIPATION_FRAME_SIZE, len(data))
        header = Header.decode(data)
        body: Any = protocol.PARTICIPATION_BODY_STRUCT.parse(
            bytes(data[protocol.HEADER_SIZE : protocol.PARTICIPATION_FRAME_SIZE])
        )
        return cls(
            header=header,
            node_name=body.node_name,
            vendor_name=body.vendor_name,
            manufacturer_name=body.manufacturer_name,
        )


class Trigger(ParticipationFrame, frozen=True, kw_only=True):
    TYPE_CODE = protocol.TypeCode.TRIGGER
    NAME = "trigger frame"


class ParticipationRequest(ParticipationFrame, frozen=True, kw_only=True):
    TYPE_CODE = protocol.TypeCode.PARTICIPATION_REQUEST
    NAME = "participation request frame"


class Cyclic(FALinkFrame, frozen=True, kw_only=True):
    """Header followed by a caller-sized cyclic data payload.

    ``decode`` takes every byte after the header as payload and copies it, so
    the frame never aliases the input buffer. Trailing bytes beyond the logical
    frame end up in ``data``.
    """

    TYPE_CODE = protocol.TypeCode.CYCLIC
    NAME = "cyclic frame"

    data: bytes = b""

    @classmethod
    def new(
        cls,
        source_node: int,
        destination_node: int,
        version_sequence: int = 0,
        common_address1: int = 4,
        common_size1: int = 4,
        common_address2: int = 64,
        common_size2: int = 64,
        data: bytes | bytearray | memoryview = b"",
        **header_fields: Any,
    ) -> "Cyclic":
        payload = bytes(data)
        if len(payload) > protocol.MAX_CYCLIC_DATA_SIZE:
            raise FieldRangeError(
                cls.NAME, f"payload of {len(payload)} bytes exceeds {protocol.MAX_CYCLIC_DATA_SIZE}"
            )
        fields: dict[str, Any] = {"message_format": protocol.DEFAULT_MESSAGE_FORMAT}
        fields.update(header_fields)
        header = _base_header(
            source_node=source_node,
            destination_node=destination_node,
            version_sequence=version_sequence,
            common_address1=common_address1,
            common_size1=common_size1,
            common_address2=common_address2,
            common_size2=common_size2,
            **fields,
        )
        total = protocol.HEADER_SIZE + len(payload)
        return cls(
            header=header.replace(
                type_code=cls.TYPE_CODE,
                total_frame_length=total,
                frame_byte_size=total,
            ),
            data=payload,
        )

    def encode_body(self) -> bytes:
        return self.data

    @classmethod
    def decode(cls, data: bytes | bytearray | memoryview) -> "Cyclic":
        header = Header.decode(data)
        return cls(header=header, data=bytes(data[protocol.HEADER_SIZE :]))
