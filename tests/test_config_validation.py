"""Tests for codec configuration loading and validation."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from marshmallow import ValidationError

from falink.config.model import CodecConfig
from falink.config.schema import CodecConfigSchema
from falink.config.settings import load_codec_config
from falink.const import DEFAULT_NODE_NUMBER, DEFAULT_TOKEN_WATCHDOG


def test_defaults_without_path() -> None:
    config = load_codec_config()
    assert config == CodecConfig()
    assert config.node_number == DEFAULT_NODE_NUMBER
    assert config.token_watchdog == DEFAULT_TOKEN_WATCHDOG


def test_load_from_toml(tmp_path: Path) -> None:
    path = tmp_path / "falink.toml"
    path.write_text(
        "[falink]\n"
        "node_number = 12\n"
        'node_name = "  PLC-12 "\n'
        "token_watchdog = 64\n"
        "debug_logging = true\n"
        'log_format = "json"\n'
        "syslog_logging = true\n",
        encoding="utf-8",
    )

    config = load_codec_config(path)

    assert config.node_number == 12
    assert config.node_name == "PLC-12"
    assert config.token_watchdog == 64
    assert config.debug_logging is True
    assert config.log_format == "json"
    assert config.syslog_logging is True


def test_missing_file_falls_back_to_defaults(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        config = load_codec_config(tmp_path / "absent.toml")
    assert config == CodecConfig()
    assert "not found" in caplog.text


def test_missing_section_falls_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "other.toml"
    path.write_text("[other]\nkey = 1\n", encoding="utf-8")
    assert load_codec_config(path) == CodecConfig()


def test_section_must_be_a_table(tmp_path: Path) -> None:
    path = tmp_path / "bad.toml"
    path.write_text('falink = "nope"\n', encoding="utf-8")
    with pytest.raises(ValueError, match="must be a table"):
        load_codec_config(path)


@pytest.mark.parametrize(
    "raw",
    [
        {"node_number": 0},
        {"node_number": 255},
        {"major_version": 16},
        {"token_watchdog": 256},
        {"common_size1": 70000},
        {"node_name": "NODE-NAME-TOO-LONG"},
        {"vendor_name": "VENDÖR"},
        {"unknown_key": 1},
        {"log_format": "xml"},
    ],
)
def test_schema_rejects_invalid_values(raw: dict) -> None:
    with pytest.raises(ValidationError):
        CodecConfigSchema().load(raw)


def test_schema_returns_config() -> None:
    config = CodecConfigSchema().load({"node_number": 254, "manufacturer_name": "ACME"})
    assert isinstance(config, CodecConfig)
    assert config.node_number == 254
    assert config.manufacturer_name == "ACME"
