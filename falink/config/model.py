"""Data model for FA-link codec configuration."""

from __future__ import annotations

from dataclasses import dataclass

from ..const import (
    DEFAULT_COMMON_ADDRESS1,
    DEFAULT_COMMON_ADDRESS2,
    DEFAULT_COMMON_SIZE1,
    DEFAULT_COMMON_SIZE2,
    DEFAULT_DEBUG_LOGGING,
    DEFAULT_LOG_FORMAT,
    DEFAULT_MAJOR_VERSION,
    DEFAULT_MANUFACTURER_NAME,
    DEFAULT_MINOR_VERSION,
    DEFAULT_NODE_NAME,
    DEFAULT_NODE_NUMBER,
    DEFAULT_REFRESH_CYCLE_TIME,
    DEFAULT_SYSLOG_LOGGING,
    DEFAULT_TOKEN_WATCHDOG,
    DEFAULT_VENDOR_NAME,
)


@dataclass(slots=True)
class CodecConfig:
    """Local node identity and header defaults used when building frames."""

    node_number: int = DEFAULT_NODE_NUMBER
    node_name: str = DEFAULT_NODE_NAME
    vendor_name: str = DEFAULT_VENDOR_NAME
    manufacturer_name: str = DEFAULT_MANUFACTURER_NAME
    major_version: int = DEFAULT_MAJOR_VERSION
    minor_version: int = DEFAULT_MINOR_VERSION
    token_watchdog: int = DEFAULT_TOKEN_WATCHDOG
    refresh_cycle_time: int = DEFAULT_REFRESH_CYCLE_TIME
    common_address1: int = DEFAULT_COMMON_ADDRESS1
    common_size1: int = DEFAULT_COMMON_SIZE1
    common_address2: int = DEFAULT_COMMON_ADDRESS2
    common_size2: int = DEFAULT_COMMON_SIZE2
    debug_logging: bool = DEFAULT_DEBUG_LOGGING
    log_format: str = DEFAULT_LOG_FORMAT
    syslog_logging: bool = DEFAULT_SYSLOG_LOGGING
