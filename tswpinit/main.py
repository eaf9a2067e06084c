"""
ts-wp-init — CLI entrypoint.

Usage:
    ts-wp-init init my-app
    ts-wp-init init my-app --preset less --package-manager npm
    ts-wp-init presets list
    python -m tswpinit.main --help
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from tswpinit import __version__
from tswpinit.core.observability import console
from tswpinit.core.observability.logging_config import (
    ENV_FILE,
    ENV_FILE_LEVEL,
    resolve_level,
    setup_logging,
)
from tswpinit.ui.cli.presets import presets


@click.group()
@click.version_option(version=__version__, prog_name="ts-wp-init")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress progress output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to tswpinit.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """ts-wp-init — scaffold a TypeScript + webpack + React project."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
    )
    console.set_quiet(quiet)


@cli.command()
@click.argument("target_dir", required=False, type=click.Path(file_okay=False))
@click.option("--preset", "-p", default=None, help="Preset to scaffold (see 'presets list').")
@click.option(
    "--package-manager",
    "-m",
    type=click.Choice(["yarn", "npm"]),
    default=None,
    help="Package manager used to init and install (default: yarn).",
)
@click.option(
    "--format/--no-format",
    "format_sources",
    default=None,
    help="Run Prettier over generated sources.",
)
@click.option("--show-stdout", is_flag=True, help="Echo package-manager output.")
@click.option("--show-stderr", is_flag=True, help="Echo package-manager warnings.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def init(
    ctx: click.Context,
    target_dir: str | None,
    preset: str | None,
    package_manager: str | None,
    format_sources: bool | None,
    show_stdout: bool,
    show_stderr: bool,
    as_json: bool,
) -> None:
    """Scaffold a project into TARGET_DIR (default: current directory).

    TARGET_DIR is created if missing and must be empty otherwise.
    """
    from tswpinit.core.use_cases.init import init_project

    if as_json:
        console.set_quiet(True)

    result = init_project(
        target_dir=target_dir,
        preset=preset,
        config_path=ctx.obj.get("config_path"),
        package_manager=package_manager,
        format_sources=format_sources,
        show_stdout=show_stdout,
        show_stderr=show_stderr,
        registry=ctx.obj.get("registry"),
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if not result.ok:
            sys.exit(1)
        return

    if not result.ok:
        click.secho(f"❌ {result.error}", fg="red", err=True)
        sys.exit(1)

    if not ctx.obj.get("quiet"):
        click.echo()
        click.secho(f"✅ {result.target} ready ({result.preset})", fg="green", bold=True)
        manager = result.report.package_manager if result.report else "yarn"
        click.echo(f"   cd {result.target} && {manager} start")


cli.add_command(presets)


if __name__ == "__main__":
    cli()
