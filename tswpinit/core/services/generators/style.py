"""
Style generator — .prettierrc, plus .babelrc for presets that use Babel.
"""

from __future__ import annotations

from tswpinit.core.models.template import WriteRequest
from tswpinit.core.services.generators import GeneratorContext
from tswpinit.core.services.writer import json_request


def generate(ctx: GeneratorContext) -> list[WriteRequest]:
    files = [json_request(".prettierrc", ctx.prettier.to_rc())]
    if ctx.preset.babelrc is not None:
        files.append(json_request(".babelrc", ctx.preset.babelrc))
    return files
