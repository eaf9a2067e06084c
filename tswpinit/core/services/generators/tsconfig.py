"""
tsconfig.json generator — compiler options come straight from the preset.
"""

from __future__ import annotations

from tswpinit.core.models.template import WriteRequest
from tswpinit.core.services.generators import GeneratorContext
from tswpinit.core.services.writer import json_request


def generate(ctx: GeneratorContext) -> list[WriteRequest]:
    return [json_request("tsconfig.json", {"compilerOptions": dict(ctx.preset.compiler_options)})]
