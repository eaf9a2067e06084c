"""
Configuration loader — reads tswpinit.yml into a ScaffoldConfig.

The file is optional: with no file every setting keeps its default.
When no explicit path is given the loader searches upward from the
current directory, so a config in a parent workspace applies to every
project scaffolded below it.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from tswpinit.core.models.config import ScaffoldConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "tswpinit.yml"


class ConfigError(Exception):
    """Raised when the configuration is invalid or names something unknown."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for tswpinit.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to tswpinit.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path | None = None, search: bool = True) -> ScaffoldConfig:
    """Load and validate the scaffold configuration.

    Args:
        path: Explicit path to a config file. Must exist if given.
        search: When ``path`` is None, search upward for tswpinit.yml.

    Returns:
        Validated ScaffoldConfig (defaults when no file is found).

    Raises:
        ConfigError: If an explicit file is missing, or a file is invalid.
    """
    if path is None:
        path = find_config_file() if search else None
        if path is None:
            logger.debug("No %s found, using defaults", CONFIG_FILE)
            return ScaffoldConfig()
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = ScaffoldConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded config from %s (preset=%s)", path, config.preset)
    return config
