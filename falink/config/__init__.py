"""Configuration helpers for the FA-link codec."""

from . import logging, settings  # noqa: F401  # pyright: ignore[reportUnusedImport]
from .model import CodecConfig
from .schema import CodecConfigSchema
from .settings import load_codec_config

__all__ = ["CodecConfig", "CodecConfigSchema", "load_codec_config", "logging", "settings"]
