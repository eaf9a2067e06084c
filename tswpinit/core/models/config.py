"""
Scaffold configuration model — the contents of tswpinit.yml.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

DEFAULT_PRESET = "emotion"


class ScaffoldConfig(BaseModel):
    """User configuration for a scaffold run.

    Every field has a default, so an absent config file is the same
    as an empty one. CLI flags override these values.
    """

    package_manager: Literal["yarn", "npm"] = "yarn"
    preset: str = DEFAULT_PRESET
    format_sources: bool = False
    formatter_command: list[str] = Field(default_factory=lambda: ["npx", "prettier"])
    command_timeout: int | None = None   # seconds; None waits forever
    presets_dir: str | None = None
    extra_packages: list[str] = Field(default_factory=list)
