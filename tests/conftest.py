"""Pytest configuration for FA-link codec tests."""

from __future__ import annotations

import pytest

from falink.config.model import CodecConfig


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "fuzz: randomized robustness checks against the decoder")


@pytest.fixture()
def codec_config() -> CodecConfig:
    return CodecConfig(
        node_number=0x12,
        node_name="PLC-12",
        vendor_name="ACME",
        manufacturer_name="ACME-FA",
        token_watchdog=0x40,
        refresh_cycle_time=20,
    )
