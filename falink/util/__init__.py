"""General-purpose utilities for the FA-link codec."""

from __future__ import annotations

import logging

__all__ = [
    "hex_with_spacing",
    "log_hexdump",
    "parse_hex",
]


def hex_with_spacing(data: bytes) -> str:
    return data.hex(" ").upper()


def parse_hex(text: str | None) -> bytes:
    """Parse user supplied hex such as ``"0102"``, ``"0x0102"`` or ``"01 02"``."""
    if not text:
        return b""
    cleaned = "".join(text.split())
    if cleaned[:2].lower() == "0x":
        cleaned = cleaned[2:]
    if len(cleaned) % 2:
        raise ValueError("Hex input must contain an even number of digits")
    try:
        return bytes.fromhex(cleaned)
    except ValueError as exc:
        raise ValueError(f"Invalid hex input: {text!r}") from exc


def log_hexdump(logger_instance: logging.Logger, level: int, label: str, data: bytes) -> None:
    """Log binary data in hexadecimal format using syslog-friendly output.

    Format: [HEXDUMP] %s: %s
    """
    if not logger_instance.isEnabledFor(level):
        return

    logger_instance.log(level, "[HEXDUMP] %s: %s", label, hex_with_spacing(data))
