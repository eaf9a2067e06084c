"""
Editor generator — .editorconfig and VS Code workspace settings.

Both follow the Prettier style so that editors and the formatter agree.
"""

from __future__ import annotations

from tswpinit.core.models.template import Template, WriteRequest
from tswpinit.core.services.generators import GeneratorContext
from tswpinit.core.services.writer import json_request

_EDITORCONFIG = """
    root = true

    [*]
    indent_style = $style
    indent_size = $size
    end_of_line = lf
    charset = utf-8
    trim_trailing_whitespace = true
    insert_final_newline = true

    [*.md]
    trim_trailing_whitespace = false
"""


def generate(ctx: GeneratorContext) -> list[WriteRequest]:
    prettier = ctx.prettier
    editorconfig = Template.from_string(
        _EDITORCONFIG,
        style="tab" if prettier.use_tabs else "space",
        size=prettier.tab_width,
    )
    settings = {
        "editor.tabSize": prettier.tab_width,
        "editor.insertSpaces": not prettier.use_tabs,
        "editor.rulers": [prettier.print_width],
        "editor.formatOnSave": True,
        "editor.defaultFormatter": "esbenp.prettier-vscode",
        "files.eol": "\n",
        "typescript.tsdk": "node_modules/typescript/lib",
    }
    return [
        WriteRequest(path=".editorconfig", content=editorconfig.render()),
        json_request(".vscode/settings.json", settings),
    ]
