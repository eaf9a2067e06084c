"""
Init use case — scaffold a new project.

The top-level entry point: loads config, resolves the preset, runs the
scaffold pipeline, and turns any abort into a result with an error.
This is the one place scaffold errors are caught.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from tswpinit.adapters.registry import AdapterRegistry, default_registry
from tswpinit.core.config.loader import ConfigError, load_config
from tswpinit.core.config.preset_loader import get_preset
from tswpinit.core.engine.pipeline import ScaffoldPipeline, ScaffoldReport
from tswpinit.core.errors import ScaffoldError
from tswpinit.core.models.config import ScaffoldConfig

logger = logging.getLogger(__name__)


@dataclass
class InitResult:
    """Result of scaffolding a project."""

    report: ScaffoldReport | None = None
    target: Path | None = None
    preset: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        if self.error:
            result: dict = {"error": self.error}
            if self.report:
                result["partial"] = self.report.to_dict()
            return result
        return self.report.to_dict() if self.report else {}


def resolve_config(
    config: ScaffoldConfig | None = None,
    config_path: Path | None = None,
    **overrides,
) -> ScaffoldConfig:
    """Load the config file and apply non-None CLI overrides on top."""
    base = config or load_config(config_path)
    updates = {k: v for k, v in overrides.items() if v is not None}
    if not updates:
        return base
    return ScaffoldConfig.model_validate({**base.model_dump(), **updates})


def init_project(
    target_dir: Path | str | None = None,
    preset: str | None = None,
    config: ScaffoldConfig | None = None,
    config_path: Path | None = None,
    package_manager: str | None = None,
    format_sources: bool | None = None,
    show_stdout: bool = False,
    show_stderr: bool = False,
    registry: AdapterRegistry | None = None,
) -> InitResult:
    """Scaffold a project into ``target_dir`` (default: the current directory).

    Args:
        target_dir: Directory to scaffold into; created if missing,
            refused if not empty.
        preset: Preset name; overrides the config.
        config: Ready-made config; skips loading a file.
        config_path: Explicit config file (otherwise searched upward).
        package_manager: 'yarn' or 'npm'; overrides the config.
        format_sources: Run Prettier on generated sources; overrides the config.
        show_stdout: Echo package-manager stdout.
        show_stderr: Echo package-manager stderr.
        registry: Adapter registry (default: real shell + filesystem).

    Returns:
        InitResult — ``error`` is set if the run aborted.
    """
    target = Path(target_dir or Path.cwd()).resolve()
    result = InitResult(target=target)

    try:
        cfg = resolve_config(
            config,
            config_path,
            preset=preset,
            package_manager=package_manager,
            format_sources=format_sources,
        )
        extra_dir = Path(cfg.presets_dir).expanduser() if cfg.presets_dir else None
        chosen = get_preset(cfg.preset, extra_dir)
    except ConfigError as e:
        result.error = str(e)
        return result
    except ValueError as e:
        result.error = f"Invalid option: {e}"
        return result

    result.preset = chosen.name
    pipeline = ScaffoldPipeline(
        target=target,
        preset=chosen,
        config=cfg,
        registry=registry or default_registry(),
        show_stdout=show_stdout,
        show_stderr=show_stderr,
    )

    try:
        result.report = pipeline.run()
    except (ScaffoldError, OSError) as e:
        logger.debug("Scaffold of %s aborted", target, exc_info=True)
        result.report = pipeline.report
        result.error = str(e)

    return result
