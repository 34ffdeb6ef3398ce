"""Configuration loader — adjgraph.yml parsing and defaults."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

import yaml
from pydantic import ValidationError

from adjgraph.logger import logger
from adjgraph.model import AdjGraphConfig


def load_config(path: Path | None = None) -> AdjGraphConfig:
    """Load config from YAML file, or return defaults if no path given."""
    if path is None:
        logger.debug("No config file provided, using defaults")
        return AdjGraphConfig()

    from pathlib import Path as _Path

    p = _Path(str(path))

    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning("Config file not found: %s, using defaults", path)
        return AdjGraphConfig()
    except OSError as e:
        logger.warning("Cannot read config file %s: %s, using defaults", path, e)
        return AdjGraphConfig()

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.warning("Malformed YAML in %s: %s, using defaults", path, e)
        return AdjGraphConfig()

    if raw is None:
        return AdjGraphConfig()
    if not isinstance(raw, dict):
        logger.warning("Config file %s is not a YAML mapping, using defaults", path)
        return AdjGraphConfig()

    try:
        return AdjGraphConfig.model_validate(raw)
    except ValidationError as e:
        logger.warning("Invalid config in %s: %s, using defaults", path, e)
        return AdjGraphConfig()
