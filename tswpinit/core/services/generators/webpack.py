"""
webpack.config.js generator.

The TypeScript rule comes first and uses the preset's ``ts_loaders``
chain; the preset's extra loader rules follow in declaration order.
"""

from __future__ import annotations

from tswpinit.core.models.preset import LoaderRule
from tswpinit.core.models.template import Template, WriteRequest
from tswpinit.core.services.generators import GeneratorContext
from tswpinit.core.templating.deindent import indent_tail

TS_TEST = r"\.tsx?$"

_WEBPACK_CONFIG = """
    const path = require('path');
    const HtmlWebpackPlugin = require('html-webpack-plugin');

    module.exports = {
      entry: './src',
      output: {
        path: path.resolve(__dirname, 'dist'),
        filename: 'app.js'
      },
      resolve: {
        extensions: $extensions
      },$devtool
      module: {
        rules: [
          $rules
        ]
      },
      plugins: [
        new HtmlWebpackPlugin({
          minify: false,
          template: 'src/index.html'
        })
      ]
    };
"""

# Columns of the $devtool and $rules placeholders above
_DEVTOOL_INDENT = " " * 6
_RULES_INDENT = " " * 10


def js_string(value: str) -> str:
    """A single-quoted JavaScript string literal."""
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def js_array(values: list) -> str:
    return "[" + ", ".join(js_string(str(v)) for v in values) + "]"


def render_rule(rule: LoaderRule) -> str:
    """One ``module.rules`` entry, as a multi-line object literal."""
    lines = ["{", f"  test: /{rule.test}/,"]
    if rule.use:
        lines.append(f"  use: {js_array(rule.use)}")
    else:
        lines.append(f"  loader: {js_string(rule.loader)}")
    lines.append("}")
    return "\n".join(lines)


def typescript_rule(ts_loaders: list[str]) -> LoaderRule:
    if len(ts_loaders) == 1:
        return LoaderRule(test=TS_TEST, loader=ts_loaders[0])
    return LoaderRule(test=TS_TEST, use=list(ts_loaders))


def generate(ctx: GeneratorContext) -> list[WriteRequest]:
    preset = ctx.preset
    rules = [typescript_rule(preset.ts_loaders), *preset.rules]
    rules_block = ",\n".join(render_rule(rule) for rule in rules)

    devtool = ""
    if preset.devtool:
        devtool = "\n" + _DEVTOOL_INDENT + f"devtool: {js_string(preset.devtool)},"

    config = Template.from_string(
        _WEBPACK_CONFIG,
        extensions=preset.extensions,
        devtool=devtool,
        rules=indent_tail(rules_block, _RULES_INDENT),
    )
    return [ctx.source("webpack.config.js", config.render({list: js_array}))]
