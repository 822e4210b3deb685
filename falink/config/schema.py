"""Marshmallow schema for CodecConfig validation."""

from __future__ import annotations

from typing import Any, Dict

from marshmallow import Schema, ValidationError, fields, post_load, pre_load, validate, validates_schema

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
    LOG_FORMATS,
    MAX_NODE_NUMBER,
    MIN_NODE_NUMBER,
)
from ..protocol import protocol
from .model import CodecConfig

_NAME_FIELDS = ("node_name", "vendor_name", "manufacturer_name")
_UINT8 = validate.Range(min=0, max=protocol.UINT8_MASK)
_UINT16 = validate.Range(min=0, max=protocol.UINT16_MASK)


class CodecConfigSchema(Schema):
    """Declarative validation schema for the codec configuration."""

    node_number = fields.Int(
        load_default=DEFAULT_NODE_NUMBER,
        validate=validate.Range(min=MIN_NODE_NUMBER, max=MAX_NODE_NUMBER),
    )
    node_name = fields.Str(load_default=DEFAULT_NODE_NAME)
    vendor_name = fields.Str(load_default=DEFAULT_VENDOR_NAME)
    manufacturer_name = fields.Str(load_default=DEFAULT_MANUFACTURER_NAME)

    major_version = fields.Int(load_default=DEFAULT_MAJOR_VERSION, validate=validate.Range(min=0, max=15))
    minor_version = fields.Int(load_default=DEFAULT_MINOR_VERSION, validate=_UINT8)
    token_watchdog = fields.Int(load_default=DEFAULT_TOKEN_WATCHDOG, validate=_UINT8)
    refresh_cycle_time = fields.Int(load_default=DEFAULT_REFRESH_CYCLE_TIME, validate=_UINT16)

    common_address1 = fields.Int(load_default=DEFAULT_COMMON_ADDRESS1, validate=_UINT16)
    common_size1 = fields.Int(load_default=DEFAULT_COMMON_SIZE1, validate=_UINT16)
    common_address2 = fields.Int(load_default=DEFAULT_COMMON_ADDRESS2, validate=_UINT16)
    common_size2 = fields.Int(load_default=DEFAULT_COMMON_SIZE2, validate=_UINT16)

    debug_logging = fields.Bool(load_default=DEFAULT_DEBUG_LOGGING)
    log_format = fields.Str(load_default=DEFAULT_LOG_FORMAT, validate=validate.OneOf(LOG_FORMATS))
    syslog_logging = fields.Bool(load_default=DEFAULT_SYSLOG_LOGGING)

    @pre_load
    def strip_names(self, data: Dict[str, Any], **kwargs: Any) -> Dict[str, Any]:
        data = dict(data)
        for name in _NAME_FIELDS:
            if isinstance(data.get(name), str):
                data[name] = data[name].strip()
        return data

    @validates_schema
    def validate_names(self, data: Dict[str, Any], **kwargs: Any) -> None:
        for name in _NAME_FIELDS:
            value = data.get(name, "")
            try:
                raw = value.encode("ascii")
            except UnicodeEncodeError as exc:
                raise ValidationError(f"{name} must be ASCII", field_name=name) from exc
            # Longer names would be silently truncated on the wire.
            if len(raw) > protocol.NAME_FIELD_SIZE:
                raise ValidationError(
                    f"{name} must be at most {protocol.NAME_FIELD_SIZE} bytes",
                    field_name=name,
                )

    @post_load
    def make_config(self, data: Dict[str, Any], **kwargs: Any) -> CodecConfig:
        return CodecConfig(**data)
