"""
CLI commands for scaffold presets.

Thin wrappers over ``tswpinit.core.config.preset_loader``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click


def _extra_presets_dir(ctx: click.Context) -> Path | None:
    """The user presets directory from the loaded config, if any."""
    from tswpinit.core.config.loader import load_config

    config = load_config(ctx.obj.get("config_path"))
    return Path(config.presets_dir).expanduser() if config.presets_dir else None


@click.group("presets")
def presets() -> None:
    """Presets — the project flavours init can scaffold."""


@presets.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_presets(ctx: click.Context, as_json: bool) -> None:
    """List available presets."""
    from tswpinit.core.config.loader import ConfigError
    from tswpinit.core.config.preset_loader import discover_presets
    from tswpinit.core.models.config import DEFAULT_PRESET

    try:
        found = discover_presets(_extra_presets_dir(ctx))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(
            [{"name": p.name, "description": p.description} for p in found.values()],
            indent=2,
        ))
        return

    click.secho("📦 Presets:", fg="cyan", bold=True)
    for preset in found.values():
        marker = " (default)" if preset.name == DEFAULT_PRESET else ""
        click.echo(f"   • {preset.name}{marker} — {preset.description}")


@presets.command("show")
@click.argument("name")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def show_preset(ctx: click.Context, name: str, as_json: bool) -> None:
    """Show what a preset installs and generates."""
    from tswpinit.core.config.loader import ConfigError
    from tswpinit.core.config.preset_loader import get_preset

    try:
        preset = get_preset(name, _extra_presets_dir(ctx))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(preset.model_dump(mode="json"), indent=2))
        return

    click.secho(f"📦 {preset.name}", fg="cyan", bold=True)
    if preset.description:
        click.echo(f"   {preset.description}")
    click.echo()

    kind = "dev dependencies" if preset.dev else "dependencies"
    click.secho(f"   Packages ({preset.package_count}, {kind}):", fg="white", bold=True)
    for package in preset.packages:
        click.echo(f"     • {package}")
    click.echo()

    click.secho("   Webpack:", fg="white", bold=True)
    click.echo(f"     TypeScript loaders: {', '.join(preset.ts_loaders)}")
    for rule in preset.rules:
        loaders = ", ".join(rule.use) if rule.use else rule.loader
        click.echo(f"     /{rule.test}/ → {loaders}")
    click.echo()

    click.echo(f"   Component: {preset.component}")
    click.echo(f"   Babel:     {'yes' if preset.babelrc is not None else 'no'}")
    click.echo(f"   Start:     {preset.start_script}")
