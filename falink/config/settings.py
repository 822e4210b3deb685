"""Settings loader for the FA-link codec.

Configuration is read from the ``[falink]`` table of a TOML file. A missing
file or table falls back to defaults. Environment variables are not used as
overrides.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from ..const import DEFAULT_CONFIG_SECTION
from .model import CodecConfig
from .schema import CodecConfigSchema

logger = logging.getLogger(__name__)


def _load_raw_config(path: Path) -> dict[str, Any]:
    if not path.exists():
        logger.warning("Config file %s not found; using defaults.", path)
        return {}

    raw = tomllib.loads(path.read_text(encoding="utf-8"))
    section = raw.get(DEFAULT_CONFIG_SECTION)
    if section is None:
        logger.warning("Config section '%s' not found in %s; using defaults.", DEFAULT_CONFIG_SECTION, path)
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{DEFAULT_CONFIG_SECTION}' in {path} must be a table")
    return section


def load_codec_config(path: str | Path | None = None) -> CodecConfig:
    """Load and validate the codec configuration.

    Raises ``marshmallow.ValidationError`` when a value is out of range.
    """
    raw = _load_raw_config(Path(path)) if path is not None else {}
    config: CodecConfig = CodecConfigSchema().load(raw)
    logger.debug("Loaded codec config for node %d", config.node_number)
    return config
