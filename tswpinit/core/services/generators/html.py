"""
src/index.html generator — the page HtmlWebpackPlugin injects the bundle into.
"""

from __future__ import annotations

import html

from tswpinit.core.models.template import Template, WriteRequest
from tswpinit.core.services.generators import GeneratorContext

_INDEX_HTML = """
    <!doctype html>
    <html>
      <head>
        <title>$title</title>
        <meta charset="utf-8" />
      </head>
      <body>
        <div id="app"></div>
      </body>
    </html>
"""


def generate(ctx: GeneratorContext) -> list[WriteRequest]:
    page = Template.from_string(_INDEX_HTML, title=ctx.project_name)
    return [ctx.source("src/index.html", page.render({str: html.escape}))]
