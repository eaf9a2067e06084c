"""
Bundled data — the shipped scaffold presets.

Preset definitions live in ``presets/<name>.yml`` next to this module
and are read by ``tswpinit.core.config.preset_loader``.
"""

from __future__ import annotations

from pathlib import Path

DATA_DIR = Path(__file__).parent
PRESETS_DIR = DATA_DIR / "presets"
