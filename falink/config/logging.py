"""Logging setup for FA-link tooling.

Log lines go to stderr so that frame output on stdout stays clean. Text is
the default console format; ``log_format = "json"`` switches to one JSON
object per line. Syslog is only used when ``syslog_logging`` is enabled and a
local syslog socket exists.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from logging.config import dictConfig
from logging.handlers import SysLogHandler
from pathlib import Path
from typing import Any

import msgspec

from .model import CodecConfig

LOGGER_NAME = "falink"
CONSOLE_FORMAT = "%(levelname)-7s %(name)s: %(message)s"
SYSLOG_SOCKETS: tuple[Path, ...] = (Path("/dev/log"), Path("/var/run/log"))

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RECORD_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}


def _render_extra(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return f"[{bytes(value).hex(' ').upper()}]"
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


class StructuredLogFormatter(logging.Formatter):
    """One JSON object per record, with the ``falink.`` prefix dropped."""

    def format(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith(LOGGER_NAME + "."):
            name = name[len(LOGGER_NAME) + 1 :]

        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": name,
            "message": record.getMessage(),
        }
        extra = {k: _render_extra(v) for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}
        if extra:
            payload["extra"] = extra
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return msgspec.json.encode(payload).decode("utf-8")


def find_syslog_socket() -> Path | None:
    for candidate in SYSLOG_SOCKETS:
        if candidate.exists():
            return candidate
    return None


def _handlers(config: CodecConfig, level: str) -> dict[str, dict[str, Any]]:
    handlers: dict[str, dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "formatter": config.log_format,
            "level": level,
        }
    }
    if config.syslog_logging:
        socket = find_syslog_socket()
        if socket is None:
            logging.getLogger(LOGGER_NAME).warning("syslog_logging enabled but no syslog socket found")
        else:
            handlers["syslog"] = {
                "class": "logging.handlers.SysLogHandler",
                "address": str(socket),
                "facility": SysLogHandler.LOG_USER,
                "formatter": "json",
                "level": level,
            }
    return handlers


def configure_logging(config: CodecConfig) -> None:
    """Attach handlers to the ``falink`` logger; the root logger is left alone."""
    level = "DEBUG" if config.debug_logging else "WARNING"
    handlers = _handlers(config, level)

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "text": {"format": CONSOLE_FORMAT},
                "json": {"()": StructuredLogFormatter},
            },
            "handlers": handlers,
            "loggers": {
                LOGGER_NAME: {
                    "level": level,
                    "handlers": list(handlers),
                    "propagate": False,
                }
            },
        }
    )
    logging.getLogger(LOGGER_NAME).debug("Logging to %s at %s", ", ".join(handlers), level)
