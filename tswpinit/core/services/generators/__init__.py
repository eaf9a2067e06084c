"""
Generators — produce the files of a scaffolded project.

Each generator module exposes a ``generate(ctx)`` function that returns
a list of ``WriteRequest`` instances. Generators never touch the disk;
the scaffold pipeline writes what they return, in order.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tswpinit.core.models.preset import Preset
from tswpinit.core.models.template import WriteRequest
from tswpinit.core.services.formatter import DEFAULT_OPTIONS, PrettierOptions


@dataclass
class GeneratorContext:
    """What every generator may look at."""

    project_name: str
    preset: Preset
    format_sources: bool = False
    prettier: PrettierOptions = field(default_factory=lambda: DEFAULT_OPTIONS)

    def source(self, path: str, content: str) -> WriteRequest:
        """A source-file request, formatted when the run asks for it."""
        return WriteRequest(path=path, content=content, format=self.format_sources)
