"""
Preset loader — loads preset definitions from YAML files.

Bundled presets live in tswpinit/core/data/presets/<name>.yml. A user
directory (config ``presets_dir``) is read after them, so a user preset
with the same name replaces the bundled one.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from tswpinit.core.config.loader import ConfigError
from tswpinit.core.data import PRESETS_DIR
from tswpinit.core.models.preset import Preset

logger = logging.getLogger(__name__)


def load_preset(path: Path) -> Preset | None:
    """Load a single preset definition from a YAML file.

    Returns:
        Preset model, or None if loading fails.
    """
    try:
        raw = path.read_text(encoding="utf-8")
        data = yaml.safe_load(raw)
        if not isinstance(data, dict):
            logger.warning("Preset file %s is not a mapping, skipping", path)
            return None
        data.setdefault("name", path.stem)
        preset = Preset.model_validate(data)
        logger.debug("Loaded preset: %s from %s", preset.name, path)
        return preset
    except Exception as e:
        logger.warning("Failed to load preset from %s: %s", path, e)
        return None


def discover_presets(extra_dir: Path | None = None) -> dict[str, Preset]:
    """Load every bundled preset, then every preset in ``extra_dir``.

    Returns:
        Presets keyed by name, sorted by name.
    """
    presets: dict[str, Preset] = {}
    dirs = [PRESETS_DIR]
    if extra_dir is not None:
        if not extra_dir.is_dir():
            raise ConfigError(f"Presets directory not found: {extra_dir}")
        dirs.append(extra_dir)

    for directory in dirs:
        for path in sorted(directory.glob("*.yml")):
            preset = load_preset(path)
            if preset is None:
                continue
            if preset.name in presets:
                logger.info("Preset '%s' overridden by %s", preset.name, path)
            presets[preset.name] = preset

    return dict(sorted(presets.items()))


def get_preset(name: str, extra_dir: Path | None = None) -> Preset:
    """Look up a preset by name.

    Raises:
        ConfigError: If no preset has that name.
    """
    presets = discover_presets(extra_dir)
    try:
        return presets[name]
    except KeyError:
        raise ConfigError(
            f"Unknown preset '{name}'. Available: {', '.join(presets) or 'none'}"
        ) from None
