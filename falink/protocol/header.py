"""FA-link common header codec.

Header layout (64 bytes, big-endian)::

    0  H_TYPE (4)   4  TFL (4)    8  SA (4)     12 DA (4)
    16 V_SEQ (4)    20 SEQ (4)    24 M_CTL (4)  28 ULS (2)   30 M_SZ (2)
    32 M_ADD (4)    36 MFT (1)    37 M_RLT (1)  38 reserved (2)
    40 TCD (2)      42 VER (2)    44 C_AD1 (2)  46 C_SZ1 (2)
    48 C_AD2 (2)    50 C_SZ2 (2)  52 MODE (2)   54 P_TYPE (1) 55 PRI (1)
    56 CBN (1)      57 TBN (1)    58 BSIZE (2)  60 LKS (1)   61 TW (1)
    62 RCT (2)

The header keeps the bit-packed words (SA/DA, M_CTL, MODE) as separate named
sub-fields. Packed integers only exist at the serialization boundary.
Decoding never validates field values, only the buffer length.
"""

from __future__ import annotations

from typing import Any

import msgspec
from construct import ConstructError

from . import protocol
from .errors import FieldRangeError, TooShortToMarshalError, TooShortToParseError

__all__ = ["Header", "parse_header", "require_room"]


def require_room(what: str, buffer: bytearray | memoryview, offset: int, size: int) -> None:
    """Fail before writing when *buffer* cannot hold *size* bytes at *offset*."""
    available = len(buffer) - offset
    if offset < 0 or available < size:
        raise TooShortToMarshalError(what, size, max(available, 0))


class Header(msgspec.Struct, frozen=True, kw_only=True):
    """The 64-byte prefix shared by every FA-link frame."""

    frame_type_tag: bytes = protocol.FRAME_TYPE_TAG
    total_frame_length: int = protocol.HEADER_SIZE
    source_node: int = 0
    source_network: int = protocol.NETWORK_PREFIX
    destination_node: int = 0
    destination_network: int = protocol.NETWORK_PREFIX
    version_sequence: int = 0
    sequence: int = 0
    token_holder: bool = False
    participating: bool = False
    control_reserved: int = 0
    upper_layer_size: int = 0
    message_size: int = 0
    message_address: int = 0
    message_format: int = 0
    message_related: int = 0
    reserved: int = 0
    type_code: int = 0
    protocol_version: int = 0
    common_address1: int = 0
    common_size1: int = 0
    common_address2: int = 0
    common_size2: int = 0
    minor_version: int = 0
    major_version: int = 0
    token_mode: bool = False
    mode_reserved: int = 0
    processing_type: int = 0
    priority: int = 0
    current_block_number: int = 0
    total_block_number: int = 0
    frame_byte_size: int = protocol.HEADER_SIZE
    link_status: int = 0
    token_watchdog: int = 0
    refresh_cycle_time: int = 0

    @property
    def source_address(self) -> int:
        return protocol.pack_address(self.source_node, self.source_network)

    @property
    def destination_address(self) -> int:
        return protocol.pack_address(self.destination_node, self.destination_network)

    @property
    def control_flags(self) -> int:
        return protocol.pack_control_flags(self.token_holder, self.participating, self.control_reserved)

    @property
    def mode_flags(self) -> int:
        return protocol.pack_mode_flags(self.minor_version, self.major_version, self.token_mode, self.mode_reserved)

    def replace(self, **changes: Any) -> "Header":
        """Return a copy of this header with *changes* applied."""
        return msgspec.structs.replace(self, **changes)

    def marshal_len(self) -> int:
        return protocol.HEADER_SIZE

    def encode(self) -> bytes:
        """Serialize the header into exactly 64 bytes."""
        values = msgspec.structs.asdict(self)
        for name in (
            "source_node",
            "source_network",
            "destination_node",
            "destination_network",
            "token_holder",
            "participating",
            "control_reserved",
            "minor_version",
            "major_version",
            "token_mode",
            "mode_reserved",
        ):
            del values[name]
        values["source_address"] = self.source_address
        values["destination_address"] = self.destination_address
        values["control_flags"] = self.control_flags
        values["mode_flags"] = self.mode_flags
        try:
            return protocol.HEADER_STRUCT.build(values)
        except ConstructError as e:
            raise FieldRangeError("Header", str(e)) from e

    def marshal_into(self, buffer: bytearray | memoryview, offset: int = 0) -> None:
        """Write the header into *buffer* at *offset*."""
        require_room("header", buffer, offset, protocol.HEADER_SIZE)
        buffer[offset : offset + protocol.HEADER_SIZE] = self.encode()

    @classmethod
    def decode(cls, data: bytes | bytearray | memoryview) -> "Header":
        """Decode the first 64 bytes of *data* into a :class:`Header`."""
        if len(data) < protocol.HEADER_SIZE:
            raise TooShortToParseError("header", protocol.HEADER_SIZE, len(data))

        container: Any = protocol.HEADER_STRUCT.parse(bytes(data[: protocol.HEADER_SIZE]))
        fields = {k: v for k, v in container.items() if not k.startswith("_")}

        source_node, source_network = protocol.unpack_address(fields.pop("source_address"))
        destination_node, destination_network = protocol.unpack_address(fields.pop("destination_address"))
        token_holder, participating, control_reserved = protocol.unpack_control_flags(fields.pop("control_flags"))
        minor_version, major_version, token_mode, mode_reserved = protocol.unpack_mode_flags(
            fields.pop("mode_flags")
        )
        return cls(
            source_node=source_node,
            source_network=source_network,
            destination_node=destination_node,
            destination_network=destination_network,
            token_holder=token_holder,
            participating=participating,
            control_reserved=control_reserved,
            minor_version=minor_version,
            major_version=major_version,
            token_mode=token_mode,
            mode_reserved=mode_reserved,
            **fields,
        )


def parse_header(data: bytes | bytearray | memoryview) -> Header:
    """Decode *data* as an FA-link common header."""
    return Header.decode(data)
