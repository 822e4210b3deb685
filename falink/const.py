"""Default values for the codec configuration."""

from __future__ import annotations

from typing import Final

from .protocol import protocol

DEFAULT_CONFIG_SECTION: Final[str] = "falink"
DEFAULT_NODE_NUMBER: Final[int] = protocol.DEFAULT_TOKEN_SOURCE_NODE
DEFAULT_NODE_NAME: Final[str] = ""
DEFAULT_VENDOR_NAME: Final[str] = ""
DEFAULT_MANUFACTURER_NAME: Final[str] = ""
DEFAULT_MAJOR_VERSION: Final[int] = protocol.DEFAULT_MAJOR_VERSION
DEFAULT_MINOR_VERSION: Final[int] = protocol.DEFAULT_MINOR_VERSION
DEFAULT_TOKEN_WATCHDOG: Final[int] = protocol.DEFAULT_TOKEN_WATCHDOG
DEFAULT_REFRESH_CYCLE_TIME: Final[int] = 0
DEFAULT_COMMON_ADDRESS1: Final[int] = 4
DEFAULT_COMMON_SIZE1: Final[int] = 4
DEFAULT_COMMON_ADDRESS2: Final[int] = 64
DEFAULT_COMMON_SIZE2: Final[int] = 64
DEFAULT_DEBUG_LOGGING: Final[bool] = False

MIN_NODE_NUMBER: Final[int] = 1
MAX_NODE_NUMBER: Final[int] = 254
DEFAULT_LOG_FORMAT: Final[str] = "text"
DEFAULT_SYSLOG_LOGGING: Final[bool] = False
LOG_FORMATS: Final[tuple[str, ...]] = ("text", "json")
