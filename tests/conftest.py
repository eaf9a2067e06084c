"""
Shared test fixtures and configuration.
"""

import json
from pathlib import Path

import pytest

from tswpinit.adapters.base import ExecutionContext
from tswpinit.adapters.mock import MockAdapter
from tswpinit.adapters.registry import AdapterRegistry
from tswpinit.adapters.shell.filesystem import FilesystemAdapter
from tswpinit.core.observability import console


def fake_package_manager(ctx: ExecutionContext) -> None:
    """Stand-in for 'yarn init --yes': leave a minimal package.json behind."""
    if " init " in f" {ctx.params.get('command', '')} ":
        manifest = Path(ctx.working_dir) / "package.json"
        manifest.write_text(
            json.dumps({"name": Path(ctx.working_dir).name, "version": "1.0.0"}),
            encoding="utf-8",
        )


@pytest.fixture(autouse=True)
def _console_enabled():
    """Every test starts with console output on."""
    console.set_quiet(False)
    yield
    console.set_quiet(False)


@pytest.fixture
def mock_shell() -> MockAdapter:
    """A shell adapter that never spawns anything."""
    return MockAdapter(adapter_name="shell", side_effect=fake_package_manager)


@pytest.fixture
def registry(mock_shell: MockAdapter) -> AdapterRegistry:
    """Registry with the mock shell and the real filesystem adapter."""
    reg = AdapterRegistry()
    reg.register(mock_shell)
    reg.register(FilesystemAdapter())
    return reg


@pytest.fixture
def target(tmp_path: Path) -> Path:
    """A not-yet-existing scaffold target."""
    return tmp_path / "my-app"
