"""
Scaffold pipeline — the fixed, sequential run.

Flow:
    prepare target → package manager (init, add) → generated files → patch manifest

Each step finishes on disk before the next starts: the manifest patch
reads the package.json written by the package manager. The first failed
step raises and the run stops; whatever was written so far stays.
"""

from __future__ import annotations

import functools
import json
import logging
import shlex
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from tswpinit.adapters.registry import AdapterRegistry
from tswpinit.core.errors import CommandError, FileOperationError, TargetNotEmptyError
from tswpinit.core.models.action import Action, Receipt
from tswpinit.core.models.config import ScaffoldConfig
from tswpinit.core.models.preset import Preset
from tswpinit.core.models.template import WriteRequest
from tswpinit.core.observability import console
from tswpinit.core.services.formatter import format_source
from tswpinit.core.services.generators import (
    GeneratorContext,
    component,
    editor,
    html,
    style,
    tsconfig,
    webpack,
)
from tswpinit.core.services.writer import write_file, write_json

logger = logging.getLogger(__name__)

GENERATORS = (tsconfig, webpack, html, component, style, editor)

MANIFEST = "package.json"


def package_manager_commands(
    package_manager: str,
    packages: list[str],
    dev: bool = True,
) -> list[str]:
    """The commands that create the manifest and install ``packages``."""
    quoted = " ".join(shlex.quote(p) for p in packages)
    if package_manager == "npm":
        flag = "--save-dev" if dev else "--save"
        install = f"npm install {flag} {quoted}"
    else:
        install = f"yarn add -D {quoted}" if dev else f"yarn add {quoted}"
    return [f"{package_manager} init --yes", install]


@dataclass
class ScaffoldReport:
    """What a run did, step by step."""

    target: str = ""
    preset: str = ""
    package_manager: str = "yarn"
    receipts: list[Receipt] = field(default_factory=list)
    directories: list[str] = field(default_factory=list)
    files: list[str] = field(default_factory=list)

    @property
    def commands(self) -> list[str]:
        return [r.metadata.get("command", "") for r in self.receipts if r.adapter == "shell"]

    def to_dict(self) -> dict:
        return {
            "target": self.target,
            "preset": self.preset,
            "package_manager": self.package_manager,
            "commands": self.commands,
            "directories": self.directories,
            "files": self.files,
        }


class ScaffoldPipeline:
    """Scaffold one project into ``target``.

    Args:
        target: Absolute target directory; created if missing.
        preset: The scaffold variant.
        config: Run configuration (package manager, formatting, ...).
        registry: Adapter registry with 'shell' and 'filesystem' adapters.
        show_stdout: Echo package-manager stdout.
        show_stderr: Echo package-manager stderr when not empty.
    """

    def __init__(
        self,
        target: Path,
        preset: Preset,
        config: ScaffoldConfig,
        registry: AdapterRegistry,
        show_stdout: bool = False,
        show_stderr: bool = False,
    ):
        self.target = target
        self.preset = preset
        self.config = config
        self.registry = registry
        self.show_stdout = show_stdout
        self.show_stderr = show_stderr
        self.report = ScaffoldReport(
            target=str(target),
            preset=preset.name,
            package_manager=config.package_manager,
        )
        self._created_dirs: set[str] = set()

    # ── Plumbing ────────────────────────────────────────────────

    def _execute(self, action: Action) -> Receipt:
        """Run one action; a failed receipt becomes an exception."""
        receipt = self.registry.execute_action(action, project_root=str(self.target))
        self.report.receipts.append(receipt)

        if receipt.failed:
            logger.debug("Step %s failed: %s", action.id, receipt.error)
            if action.adapter == "shell":
                raise CommandError(action.params["command"], receipt.error or "")
            raise FileOperationError(receipt.error or f"{action.id} failed")
        return receipt

    def _fs(self, action_id: str, operation: str, path: str) -> Receipt:
        return self._execute(Action.filesystem(action_id, operation, path))

    @property
    def packages(self) -> list[str]:
        return [*self.preset.packages, *self.config.extra_packages]

    def commands(self) -> list[str]:
        return package_manager_commands(
            self.config.package_manager, self.packages, dev=self.preset.dev
        )

    def formatter(self):
        return functools.partial(
            format_source,
            command=self.config.formatter_command,
            cwd=str(self.target),
        )

    # ── Steps ───────────────────────────────────────────────────

    def prepare_target(self) -> None:
        """Create the target if missing; refuse it if it has entries."""
        exists = self._fs("target-exists", "exists", str(self.target))
        if not exists.metadata["exists"]:
            self._fs("target-mkdir", "mkdir", str(self.target))

        listing = self._fs("target-list", "list", str(self.target))
        if listing.metadata["count"] > 0:
            raise TargetNotEmptyError(self.target)

    def install(self) -> None:
        """Create the manifest and install the packages."""
        for i, command in enumerate(self.commands()):
            console.log("Executing", command)
            receipt = self._execute(
                Action.shell(f"command-{i}", command, timeout=self.config.command_timeout)
            )
            if self.show_stdout:
                console.dump(receipt.metadata.get("stdout", ""), fg="white")
            if self.show_stderr:
                console.dump(receipt.metadata.get("stderr", ""), fg="red")

    def generate(self) -> list[WriteRequest]:
        ctx = GeneratorContext(
            project_name=self.target.name,
            preset=self.preset,
            format_sources=self.config.format_sources,
        )
        requests: list[WriteRequest] = []
        for generator in GENERATORS:
            requests.extend(generator.generate(ctx))
        return requests

    def write_files(self) -> None:
        formatter = self.formatter()
        for request in self.generate():
            self._ensure_parent(request.path)
            write_file(request, base_dir=self.target, formatter=formatter)
            self.report.files.append(request.path)

    def _ensure_parent(self, path: str) -> None:
        parent = str(PurePosixPath(path).parent)
        if parent == "." or parent in self._created_dirs:
            return
        console.log("Creating", f"{parent}/")
        self._fs(f"mkdir-{parent}", "mkdir", parent)
        self._created_dirs.add(parent)
        self.report.directories.append(parent)

    def patch_manifest(self) -> None:
        """Add the preset's start script to package.json."""
        console.log("Patching", f"{MANIFEST} (adding start script)")
        receipt = self._fs("read-manifest", "read", MANIFEST)
        try:
            manifest = json.loads(receipt.output)
        except json.JSONDecodeError as e:
            raise FileOperationError(f"{MANIFEST} is not valid JSON: {e}") from e

        if not isinstance(manifest.get("scripts"), dict):
            manifest["scripts"] = {}
        manifest["scripts"]["start"] = self.preset.start_script

        write_json(MANIFEST, manifest, base_dir=self.target)
        self.report.files.append(MANIFEST)

    # ── Run ─────────────────────────────────────────────────────

    def run(self) -> ScaffoldReport:
        self.prepare_target()
        console.log("Init", str(self.target), fg="yellow", label_fg=None)
        self.install()
        self.write_files()
        self.patch_manifest()
        logger.info(
            "Scaffolded %s with preset %s (%d files)",
            self.target, self.preset.name, len(self.report.files),
        )
        return self.report
