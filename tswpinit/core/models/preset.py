"""
Preset model — one flavour of the scaffolded project.

A preset pins everything that differs between scaffolds: the packages
to install, the compiler options, the webpack loader chain, the Babel
config and the flavour of the entry component. Presets are loaded from
core/data/presets/<name>.yml (and an optional user directory).
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class LoaderRule(BaseModel):
    """A webpack ``module.rules`` entry.

    ``test`` is the source of a JavaScript regular expression literal,
    without the surrounding slashes.
    """

    test: str
    use: list[str] = Field(default_factory=list)
    loader: str = ""


class Preset(BaseModel):
    """Everything a scaffold variant needs to know."""

    name: str
    description: str = ""

    # What gets installed
    packages: list[str] = Field(default_factory=list)
    dev: bool = True                 # install as devDependencies

    # package.json patch
    start_script: str = "webpack-dev-server -d --hot --content-base=dist/"

    # tsconfig.json
    compiler_options: dict[str, Any] = Field(default_factory=dict)

    # webpack.config.js
    extensions: list[str] = Field(default_factory=lambda: [".ts", ".tsx", ".js", ".jsx"])
    ts_loaders: list[str] = Field(default_factory=lambda: ["ts-loader"])
    rules: list[LoaderRule] = Field(default_factory=list)
    devtool: str | None = None

    # .babelrc (None = no file)
    babelrc: dict[str, Any] | None = None

    # src/index.tsx
    component: Literal["plain", "emotion"] = "plain"

    @property
    def package_count(self) -> int:
        return len(self.packages)
