"""Template helpers — interpolation and indentation normalizing."""

from tswpinit.core.models.template import Template, render_value
from tswpinit.core.templating.deindent import deindent, get_indent, indent_tail

__all__ = [
    "Template",
    "deindent",
    "get_indent",
    "indent_tail",
    "render_value",
]
