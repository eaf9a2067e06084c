"""
Indentation normalizer — left-align multi-line templates.

Templates are written inline, indented to match the surrounding Python
code::

    content = deindent('''
        <div>
          <span>x</span>
        </div>
    ''')

The indentation of the first content line is taken as the reference and
one copy of it is stripped from the start of every line, so relative
indentation survives. Text whose first content line sits on the very
first line has no reference indentation and is returned unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from tswpinit.core.models.template import Renderer, Template

_NON_WS = re.compile(r"\S")


def get_indent(text: str) -> str | None:
    """Return the indentation of the first content line, if it has one.

    ``None`` means there is no reference indentation: the text is blank,
    or its first content sits on the first line.
    """
    match = _NON_WS.search(text)
    if match is None:
        return None
    first_non_ws = match.start()

    last_nl = text.rfind("\n", 0, first_non_ws + 1)
    if last_nl == -1:
        return None

    # Skip the run of line breaks ahead of the indentation
    for i in range(last_nl, len(text)):
        if text[i] not in "\r\n":
            return text[i:first_non_ws]
    return None


def deindent(
    text: str | Template,
    renderers: Mapping[type, Renderer] | None = None,
) -> str:
    """Strip one copy of the reference indentation from every line.

    Args:
        text: Plain text, or a Template rendered first with ``renderers``.
        renderers: Per-type rendering functions for Template values.
    """
    if isinstance(text, Template):
        text = text.render(renderers)

    indent = get_indent(text)
    if not indent:
        return text
    return re.sub(f"^{re.escape(indent)}", "", text, flags=re.MULTILINE)


def indent_tail(text: str, prefix: str) -> str:
    """Prefix every line but the first.

    Lets a multi-line value be interpolated at a placeholder that is
    itself indented: the first line inherits the placeholder's column.
    """
    head, sep, tail = text.partition("\n")
    if not sep:
        return text
    return head + "\n" + "\n".join(prefix + line if line else line for line in tail.split("\n"))
