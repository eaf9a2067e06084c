"""
Tests for the scaffold pipeline and the init use case.

The shell adapter is mocked (see conftest); the filesystem adapter and
the file writer are real and work inside tmp_path.
"""

import json
from pathlib import Path

import pytest

from tswpinit.adapters.mock import MockAdapter
from tswpinit.adapters.registry import AdapterRegistry
from tswpinit.adapters.shell.filesystem import FilesystemAdapter
from tswpinit.core.config.preset_loader import get_preset
from tswpinit.core.engine.pipeline import ScaffoldPipeline, package_manager_commands
from tswpinit.core.errors import CommandError, FileOperationError, TargetNotEmptyError
from tswpinit.core.models.config import ScaffoldConfig
from tswpinit.core.use_cases.init import init_project, resolve_config

EMOTION_FILES = [
    "tsconfig.json",
    "webpack.config.js",
    "src/index.html",
    "src/index.tsx",
    ".prettierrc",
    ".babelrc",
    ".editorconfig",
    ".vscode/settings.json",
    "package.json",
]


def _pipeline(target: Path, registry: AdapterRegistry, preset: str = "emotion", **config):
    return ScaffoldPipeline(
        target=target,
        preset=get_preset(preset),
        config=ScaffoldConfig(preset=preset, **config),
        registry=registry,
    )


class TestPackageManagerCommands:
    def test_yarn_dev(self):
        assert package_manager_commands("yarn", ["react", "@types/react"]) == [
            "yarn init --yes",
            "yarn add -D react @types/react",
        ]

    def test_yarn_runtime(self):
        assert package_manager_commands("yarn", ["react"], dev=False)[1] == "yarn add react"

    def test_npm(self):
        assert package_manager_commands("npm", ["react"]) == [
            "npm init --yes",
            "npm install --save-dev react",
        ]
        assert package_manager_commands("npm", ["react"], dev=False)[1] == "npm install --save react"

    def test_names_are_shell_quoted(self):
        assert package_manager_commands("yarn", ["a b"])[1] == "yarn add -D 'a b'"


class TestScaffoldPipeline:
    def test_full_run(self, target: Path, registry: AdapterRegistry, mock_shell: MockAdapter):
        report = _pipeline(target, registry).run()

        assert target.is_dir()
        assert report.files == EMOTION_FILES
        assert report.directories == ["src", ".vscode"]
        for path in EMOTION_FILES:
            assert (target / path).is_file(), path

        preset = get_preset("emotion")
        assert mock_shell.commands == [
            "yarn init --yes",
            "yarn add -D " + " ".join(preset.packages),
        ]
        assert report.commands == mock_shell.commands
        assert all(ctx.project_root == str(target) for ctx in mock_shell.call_log)

    def test_manifest_patched(self, target: Path, registry: AdapterRegistry):
        _pipeline(target, registry).run()
        manifest = json.loads((target / "package.json").read_text(encoding="utf-8"))
        assert manifest["name"] == "my-app"
        assert manifest["version"] == "1.0.0"
        assert manifest["scripts"] == {"start": get_preset("emotion").start_script}

    def test_existing_scripts_kept(self, target: Path, registry: AdapterRegistry):
        def init_with_scripts(ctx):
            (Path(ctx.working_dir) / "package.json").write_text(
                json.dumps({"name": "x", "scripts": {"test": "jest", "start": "old"}})
            )

        registry.register(MockAdapter(adapter_name="shell", side_effect=init_with_scripts))
        _pipeline(target, registry, preset="less").run()
        manifest = json.loads((target / "package.json").read_text())
        assert manifest["scripts"] == {"test": "jest", "start": get_preset("less").start_script}

    def test_npm_and_extra_packages(self, target: Path, registry: AdapterRegistry, mock_shell):
        _pipeline(target, registry, preset="less", package_manager="npm", extra_packages=["lodash"]).run()
        assert mock_shell.commands[0] == "npm init --yes"
        assert mock_shell.commands[1].startswith("npm install --save ")
        assert mock_shell.commands[1].endswith(" ts-loader lodash")

    def test_less_has_no_babelrc(self, target: Path, registry: AdapterRegistry):
        report = _pipeline(target, registry, preset="less").run()
        assert ".babelrc" not in report.files
        assert not (target / ".babelrc").exists()

    def test_empty_existing_dir_accepted(self, target: Path, registry: AdapterRegistry):
        target.mkdir()
        _pipeline(target, registry).run()
        assert (target / "webpack.config.js").is_file()

    def test_non_empty_target_aborts(self, target: Path, registry: AdapterRegistry, mock_shell):
        target.mkdir()
        (target / "README.md").write_text("mine")

        with pytest.raises(TargetNotEmptyError, match="not empty, aborting"):
            _pipeline(target, registry).run()

        assert mock_shell.call_count == 0
        assert sorted(p.name for p in target.iterdir()) == ["README.md"]

    def test_hidden_file_makes_target_non_empty(self, target: Path, registry: AdapterRegistry):
        target.mkdir()
        (target / ".git").mkdir()
        with pytest.raises(TargetNotEmptyError):
            _pipeline(target, registry).run()

    def test_command_failure_stops_run(self, target: Path, registry: AdapterRegistry, mock_shell):
        mock_shell.set_failure("command-1", error="error An unexpected error occurred")
        pipeline = _pipeline(target, registry)

        with pytest.raises(CommandError) as exc_info:
            pipeline.run()

        assert exc_info.value.command.startswith("yarn add -D")
        assert "unexpected error" in str(exc_info.value)
        assert pipeline.report.files == []
        assert not (target / "webpack.config.js").exists()

    def test_missing_manifest(self, target: Path):
        registry = AdapterRegistry()
        registry.register(MockAdapter(adapter_name="shell"))
        registry.register(FilesystemAdapter())
        with pytest.raises(FileOperationError, match="File not found"):
            _pipeline(target, registry).run()
        assert (target / "tsconfig.json").is_file()

    def test_invalid_manifest(self, target: Path, registry: AdapterRegistry):
        def broken_init(ctx):
            (Path(ctx.working_dir) / "package.json").write_text("{")

        registry.register(MockAdapter(adapter_name="shell", side_effect=broken_init))
        with pytest.raises(FileOperationError, match="not valid JSON"):
            _pipeline(target, registry).run()

    def test_progress_lines(self, target: Path, registry: AdapterRegistry, capsys):
        _pipeline(target, registry).run()
        lines = capsys.readouterr().out.splitlines()
        labels = [line.split()[0] for line in lines if line.strip() and not line.startswith(" ")]
        assert labels[:3] == ["Init", "Executing", "Executing"]
        # The patched manifest is the last file written
        assert labels[-2:] == ["Patching", "Writing"]
        assert "Creating" in labels
        assert any(line.startswith("Writing     tsconfig.json") for line in lines)

    def test_show_stdout(self, target: Path, registry: AdapterRegistry, capsys):
        pipeline = _pipeline(target, registry)
        pipeline.show_stdout = True
        pipeline.run()
        assert "[mock] executed" in capsys.readouterr().out

    def test_formatter_used_when_enabled(self, target: Path, registry: AdapterRegistry, monkeypatch):
        formatted = []

        def fake_format(source, filepath, options=None, command=None, cwd=None):
            formatted.append((filepath, tuple(command), cwd))
            return source

        monkeypatch.setattr("tswpinit.core.engine.pipeline.format_source", fake_format)
        _pipeline(target, registry, format_sources=True, formatter_command=["prettier"]).run()

        paths = [f[0] for f in formatted]
        assert paths == ["webpack.config.js", "src/index.html", "src/index.tsx"]
        assert all(f[1] == ("prettier",) and f[2] == str(target) for f in formatted)


class TestInitProject:
    def test_success(self, target: Path, registry: AdapterRegistry):
        result = init_project(target_dir=target, config=ScaffoldConfig(), registry=registry)
        assert result.ok
        assert result.preset == "emotion"
        assert result.target == target.resolve()
        assert result.to_dict()["files"] == EMOTION_FILES

    def test_preset_override(self, target: Path, registry: AdapterRegistry):
        result = init_project(target_dir=target, preset="less", config=ScaffoldConfig(), registry=registry)
        assert result.ok
        assert result.preset == "less"

    def test_unknown_preset(self, target: Path, registry: AdapterRegistry, mock_shell):
        result = init_project(target_dir=target, preset="vue", config=ScaffoldConfig(), registry=registry)
        assert not result.ok
        assert "Unknown preset 'vue'" in result.error
        assert result.report is None
        assert mock_shell.call_count == 0

    def test_abort_keeps_partial_report(self, target: Path, registry: AdapterRegistry, mock_shell):
        mock_shell.set_failure("command-1", error="network down")
        result = init_project(target_dir=target, config=ScaffoldConfig(), registry=registry)
        assert not result.ok
        data = result.to_dict()
        assert "network down" in data["error"]
        assert data["partial"]["commands"][0] == "yarn init --yes"
        assert data["partial"]["files"] == []

    def test_non_empty_target(self, target: Path, registry: AdapterRegistry):
        target.mkdir()
        (target / "x").write_text("")
        result = init_project(target_dir=target, config=ScaffoldConfig(), registry=registry)
        assert result.error == f"Target folder {target.resolve()} not empty, aborting..."

    def test_defaults_to_cwd(self, target: Path, registry: AdapterRegistry, monkeypatch):
        target.mkdir()
        monkeypatch.chdir(target)
        result = init_project(config=ScaffoldConfig(), registry=registry)
        assert result.ok
        assert result.target == target.resolve()

    def test_config_file(self, target: Path, tmp_path: Path, registry: AdapterRegistry, mock_shell):
        config_path = tmp_path / "tswpinit.yml"
        config_path.write_text("package_manager: npm\npreset: basic\n")
        result = init_project(target_dir=target, config_path=config_path, registry=registry)
        assert result.ok
        assert result.preset == "basic"
        assert mock_shell.commands[0] == "npm init --yes"


class TestResolveConfig:
    def test_none_overrides_ignored(self):
        base = ScaffoldConfig(package_manager="npm")
        assert resolve_config(base, preset=None, package_manager=None) is base

    def test_override_applied(self):
        config = resolve_config(ScaffoldConfig(), package_manager="npm", format_sources=True)
        assert config.package_manager == "npm"
        assert config.format_sources is True

    def test_invalid_override(self):
        with pytest.raises(ValueError):
            resolve_config(ScaffoldConfig(), package_manager="pnpm")
