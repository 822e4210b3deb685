"""FA-link wire constants, type codes and binary layouts.

All multi-byte integers on the wire are big-endian and there is no
alignment padding. The common header is always 64 bytes.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Final

from construct import Bytes, Int8ub, Int16ub, Int32ub, Struct as BinStruct  # type: ignore

FRAME_TYPE_TAG: Final[bytes] = b"FACN"
NETWORK_PREFIX: Final[int] = 0x00010000
NODE_MASK: Final[int] = 0xFF
BROADCAST_NODE: Final[int] = 0xFF

UINT8_MASK: Final[int] = 0xFF
UINT16_MASK: Final[int] = 0xFFFF
UINT32_MASK: Final[int] = 0xFFFFFFFF

TYPE_CODE_BASE: Final[int] = 65000
TYPE_CODE_OFFSET: Final[int] = 40

# MCTL: bit 31 token holder may transmit, bit 30 participation in progress.
CONTROL_TOKEN_HOLDER_SHIFT: Final[int] = 31
CONTROL_PARTICIPATING_SHIFT: Final[int] = 30
CONTROL_RESERVED_MASK: Final[int] = 0x3FFFFFFF

# MODE: bits 8-15 minor version, bits 4-7 major version, bit 0 token mode.
MODE_MINOR_SHIFT: Final[int] = 8
MODE_MAJOR_SHIFT: Final[int] = 4
MODE_MINOR_MASK: Final[int] = 0xFF
MODE_MAJOR_MASK: Final[int] = 0x0F
MODE_TOKEN_MODE_MASK: Final[int] = 0x01
MODE_RESERVED_MASK: Final[int] = 0x000E

NAME_FIELD_SIZE: Final[int] = 10
NAME_PAD_BYTE: Final[int] = 0x20

DEFAULT_MAJOR_VERSION: Final[int] = 3
DEFAULT_MINOR_VERSION: Final[int] = 0
DEFAULT_PROCESSING_TYPE: Final[int] = 0x80
DEFAULT_BLOCK_NUMBER: Final[int] = 1
DEFAULT_TOKEN_WATCHDOG: Final[int] = 0x32
DEFAULT_MESSAGE_FORMAT: Final[int] = 0x0A
DEFAULT_TOKEN_SOURCE_NODE: Final[int] = 0x01
DEFAULT_TOKEN_DESTINATION_NODE: Final[int] = 0x55


class TypeCode(IntEnum):
    """Frame type codes carried at header offset 40."""

    TOKEN = TYPE_CODE_BASE
    CYCLIC = TYPE_CODE_BASE + 1
    PARTICIPATION_REQUEST = TYPE_CODE_BASE + 2
    BYTE_BLOCK_READ = TYPE_CODE_BASE + 3
    BYTE_BLOCK_WRITE = TYPE_CODE_BASE + 4
    WORD_BLOCK_READ = TYPE_CODE_BASE + 5
    WORD_BLOCK_WRITE = TYPE_CODE_BASE + 6
    NETWORK_PARAMETER_READ = TYPE_CODE_BASE + 7
    NETWORK_PARAMETER_WRITE = TYPE_CODE_BASE + 8
    STOP_COMMAND = TYPE_CODE_BASE + 9
    OPERATION_COMMAND = TYPE_CODE_BASE + 10
    PROFILE_READ = TYPE_CODE_BASE + 11
    TRIGGER = TYPE_CODE_BASE + 12


HEADER_STRUCT: Final = BinStruct(
    "frame_type_tag" / Bytes(4),
    "total_frame_length" / Int32ub,
    "source_address" / Int32ub,
    "destination_address" / Int32ub,
    "version_sequence" / Int32ub,
    "sequence" / Int32ub,
    "control_flags" / Int32ub,
    "upper_layer_size" / Int16ub,
    "message_size" / Int16ub,
    "message_address" / Int32ub,
    "message_format" / Int8ub,
    "message_related" / Int8ub,
    "reserved" / Int16ub,
    "type_code" / Int16ub,
    "protocol_version" / Int16ub,
    "common_address1" / Int16ub,
    "common_size1" / Int16ub,
    "common_address2" / Int16ub,
    "common_size2" / Int16ub,
    "mode_flags" / Int16ub,
    "processing_type" / Int8ub,
    "priority" / Int8ub,
    "current_block_number" / Int8ub,
    "total_block_number" / Int8ub,
    "frame_byte_size" / Int16ub,
    "link_status" / Int8ub,
    "token_watchdog" / Int8ub,
    "refresh_cycle_time" / Int16ub,
)
HEADER_SIZE: Final[int] = HEADER_STRUCT.sizeof()  # type: ignore
TYPE_CODE_STRUCT: Final = Int16ub

PARTICIPATION_BODY_STRUCT: Final = BinStruct(
    "node_name" / Bytes(NAME_FIELD_SIZE),
    "vendor_name" / Bytes(NAME_FIELD_SIZE),
    "manufacturer_name" / Bytes(NAME_FIELD_SIZE),
    "reserved" / Int16ub,
)
PARTICIPATION_BODY_SIZE: Final[int] = PARTICIPATION_BODY_STRUCT.sizeof()  # type: ignore
PARTICIPATION_FRAME_SIZE: Final[int] = HEADER_SIZE + PARTICIPATION_BODY_SIZE
# BSIZE is a u16 and counts the header.
MAX_CYCLIC_DATA_SIZE: Final[int] = UINT16_MASK - HEADER_SIZE

assert HEADER_SIZE == 64
assert PARTICIPATION_FRAME_SIZE == 96


def pack_address(node: int, network: int = NETWORK_PREFIX) -> int:
    """Combine a network prefix and an 8-bit node number into SA/DA."""
    return ((network & ~NODE_MASK) | (node & NODE_MASK)) & UINT32_MASK


def unpack_address(value: int) -> tuple[int, int]:
    """Split an SA/DA value into ``(node, network)``."""
    return value & NODE_MASK, value & ~NODE_MASK & UINT32_MASK


def pack_control_flags(token_holder: bool, participating: bool, reserved: int = 0) -> int:
    return (
        (int(token_holder) << CONTROL_TOKEN_HOLDER_SHIFT)
        | (int(participating) << CONTROL_PARTICIPATING_SHIFT)
        | (reserved & CONTROL_RESERVED_MASK)
    )


def unpack_control_flags(value: int) -> tuple[bool, bool, int]:
    """Return ``(token_holder, participating, reserved_bits)`` from MCTL."""
    return (
        bool((value >> CONTROL_TOKEN_HOLDER_SHIFT) & 1),
        bool((value >> CONTROL_PARTICIPATING_SHIFT) & 1),
        value & CONTROL_RESERVED_MASK,
    )


def pack_mode_flags(minor_version: int, major_version: int, token_mode: bool, reserved: int = 0) -> int:
    return (
        ((minor_version & MODE_MINOR_MASK) << MODE_MINOR_SHIFT)
        | ((major_version & MODE_MAJOR_MASK) << MODE_MAJOR_SHIFT)
        | (reserved & MODE_RESERVED_MASK)
        | (int(token_mode) & MODE_TOKEN_MODE_MASK)
    )


def unpack_mode_flags(value: int) -> tuple[int, int, bool, int]:
    """Return ``(minor_version, major_version, token_mode, reserved_bits)`` from MODE."""
    return (
        (value >> MODE_MINOR_SHIFT) & MODE_MINOR_MASK,
        (value >> MODE_MAJOR_SHIFT) & MODE_MAJOR_MASK,
        bool(value & MODE_TOKEN_MODE_MASK),
        value & MODE_RESERVED_MASK,
    )


def type_code_name(value: int) -> str:
    try:
        return TypeCode(value).name
    except ValueError:
        return f"UNKNOWN(0x{value:04X})"
