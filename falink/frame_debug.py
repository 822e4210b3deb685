"""Developer helper to build or inspect FA-link frames.

Examples::

    falink-frame-debug --type TOKEN --destination 0x55
    falink-frame-debug --type CYCLIC --destination 1 --data "00 01 02 03"
    falink-frame-debug --decode 4641434e00000040...

Nothing is sent anywhere. Built frames are printed as hex so they can be
replayed with whatever transport the caller owns.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from collections.abc import Sequence
from typing import Any

import msgspec
from marshmallow import ValidationError

from .builder import FrameBuilder
from .config.logging import configure_logging
from .config.settings import load_codec_config
from .protocol import dispatcher, protocol
from .protocol.errors import FALinkError
from .protocol.frames import FALinkFrame, ParticipationFrame, name_text
from .util import hex_with_spacing, parse_hex

logger = logging.getLogger("falink.frame_debug")


class FrameDebugSnapshot(msgspec.Struct, frozen=True, kw_only=True):
    type_code: int
    type_name: str
    frame_length: int
    total_frame_length: int
    frame_byte_size: int
    source_address: int
    destination_address: int
    body_length: int
    frame_hex: str
    names: tuple[str, ...] = ()

    def render(self) -> str:
        lines = [
            f"type=0x{self.type_code:04X} ({self.type_name})",
            f"length={self.frame_length} tfl={self.total_frame_length} bsize={self.frame_byte_size}",
            f"sa=0x{self.source_address:08X} da=0x{self.destination_address:08X}",
            f"body_length={self.body_length}",
        ]
        if self.names:
            lines.append("names=" + ",".join(repr(name) for name in self.names))
        lines.append(f"frame={self.frame_hex}")
        return "\n".join(lines)


def _resolve_type_code(value: str) -> int:
    candidate = value.strip()
    if not candidate:
        raise ValueError("type may not be empty")
    try:
        return int(candidate, 0)
    except ValueError:
        pass
    try:
        return protocol.TypeCode[candidate.upper()].value
    except KeyError as exc:
        raise ValueError(f"Unknown frame type '{value}'") from exc


def _node(value: str) -> int:
    number = int(value, 0)
    if not 0 <= number <= protocol.NODE_MASK:
        raise argparse.ArgumentTypeError(f"node number {value} outside 0..255")
    return number


def build_snapshot(frame: FALinkFrame) -> FrameDebugSnapshot:
    encoded = frame.encode()
    names: tuple[str, ...] = ()
    if isinstance(frame, ParticipationFrame):
        names = tuple(name_text(raw) for raw in (frame.node_name, frame.vendor_name, frame.manufacturer_name))
    header = frame.header
    return FrameDebugSnapshot(
        type_code=header.type_code,
        type_name=protocol.type_code_name(header.type_code),
        frame_length=len(encoded),
        total_frame_length=header.total_frame_length,
        frame_byte_size=header.frame_byte_size,
        source_address=header.source_address,
        destination_address=header.destination_address,
        body_length=len(encoded) - protocol.HEADER_SIZE,
        frame_hex=hex_with_spacing(encoded),
        names=names,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build or decode FA-link frames")
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--type", dest="frame_type", help="Frame type name (TOKEN, TRIGGER, ...) or numeric code")
    mode.add_argument("--decode", help="Hex encoded frame to decode")
    parser.add_argument("--config", help="TOML file with a [falink] table")
    parser.add_argument("--destination", type=_node, default=protocol.BROADCAST_NODE, help="Destination node")
    parser.add_argument("--data", help="Hex payload for cyclic frames")
    parser.add_argument("--json", action="store_true", help="Print the snapshot as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def _emit(snapshot: FrameDebugSnapshot, as_json: bool) -> None:
    if as_json:
        sys.stdout.write(msgspec.json.encode(snapshot).decode("utf-8") + "\n")
    else:
        sys.stdout.write(snapshot.render() + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_codec_config(args.config)
    except (ValidationError, ValueError) as exc:
        parser.error(f"invalid configuration: {exc}")
    if args.verbose:
        config = dataclasses.replace(config, debug_logging=True)
    configure_logging(config)

    try:
        if args.decode is not None:
            raw = parse_hex(args.decode)
        else:
            type_code = _resolve_type_code(args.frame_type)
            payload = parse_hex(args.data)
    except ValueError as exc:
        parser.error(str(exc))

    frame: Any
    try:
        if args.decode is not None:
            frame = dispatcher.parse(raw)
        else:
            frame = FrameBuilder(config).build(type_code, args.destination, payload)
        logger.debug("Rendering %s", frame.NAME)
        snapshot = build_snapshot(frame)
    except FALinkError as exc:
        logger.info("Frame error: %s", exc)
        sys.stderr.write(f"error: {exc}\n")
        return 1

    _emit(snapshot, args.json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
