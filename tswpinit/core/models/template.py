"""
Template and write-request models — the input of the file writer.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, Field, model_validator

Renderer = Callable[[Any], str]

_PLACEHOLDER = re.compile(
    r"\$(?:(?P<escaped>\$)|(?P<named>[_a-z][_a-z0-9]*)|\{(?P<braced>[_a-z][_a-z0-9]*)\})?",
    re.IGNORECASE,
)


class Template(BaseModel):
    """Literal fragments interleaved with substitution values.

    Renders as ``fragments[0] + values[0] + fragments[1] + ... + fragments[n]``.
    There is always exactly one more fragment than there are values.
    """

    fragments: list[str]
    values: list[Any] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_arity(self) -> Template:
        if len(self.fragments) != len(self.values) + 1:
            raise ValueError(
                f"Template needs len(values) + 1 fragments, "
                f"got {len(self.fragments)} fragments for {len(self.values)} values"
            )
        return self

    @classmethod
    def from_string(cls, text: str, **values: Any) -> Template:
        """Split ``$name`` / ``${name}`` placeholders out of ``text``.

        ``$$`` stands for a literal dollar sign; a ``$`` not followed by a
        name is kept as is.

        Raises:
            ValueError: A placeholder has no matching keyword argument.
        """
        fragments: list[str] = []
        found: list[Any] = []
        buf: list[str] = []
        pos = 0
        for match in _PLACEHOLDER.finditer(text):
            buf.append(text[pos:match.start()])
            pos = match.end()
            name = match.group("named") or match.group("braced")
            if match.group("escaped"):
                buf.append("$")
            elif name is None:
                buf.append(match.group())
            else:
                if name not in values:
                    raise ValueError(f"No value for template placeholder '{name}'")
                fragments.append("".join(buf))
                found.append(values[name])
                buf = []
        buf.append(text[pos:])
        fragments.append("".join(buf))
        return cls(fragments=fragments, values=found)

    def render(self, renderers: Mapping[type, Renderer] | None = None) -> str:
        """Interpolate the values into the fragments.

        Each value goes through the renderer registered for its type (the
        first match along the type's MRO); anything else falls back to ``str``.
        """
        out = [self.fragments[0]]
        for value, fragment in zip(self.values, self.fragments[1:]):
            out.append(render_value(value, renderers))
            out.append(fragment)
        return "".join(out)


def render_value(value: Any, renderers: Mapping[type, Renderer] | None = None) -> str:
    """Render a single substitution value to text."""
    if renderers:
        for klass in type(value).__mro__:
            renderer = renderers.get(klass)
            if renderer is not None:
                return renderer(value)
    return str(value)


class WriteRequest(BaseModel):
    """One file to materialize on disk.

    Attributes:
        path:     Target path, relative to the writer's base directory
                  or absolute.
        content:  Text, or bytes written verbatim.
        encoding: Text encoding for ``str`` content.
        format:   Run the external formatter. Wins over ``deindent``.
        deindent: Strip the template's common indentation (text only).
    """

    path: str
    content: str | bytes
    encoding: str = "utf-8"
    format: bool = False
    deindent: bool = True

    @property
    def is_binary(self) -> bool:
        return isinstance(self.content, bytes)
