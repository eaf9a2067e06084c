"""
Console sink — the two-column progress log shown during a run.

    Init        /tmp/proj
    Executing   yarn init --yes
    Writing     tsconfig.json

The label is right-padded to a fixed column, the message word-wrapped
so continuation lines stay in the second column. Colours are cosmetic.
"""

from __future__ import annotations

import logging
import textwrap

import click

logger = logging.getLogger(__name__)

LABEL_WIDTH = 12
LINE_WIDTH = 80

_quiet = False


def set_quiet(quiet: bool) -> None:
    """Silence (or re-enable) console progress output."""
    global _quiet
    _quiet = quiet


def format_line(label: str, message: str) -> tuple[str, str]:
    """Return the padded label and the wrapped message."""
    lines = textwrap.wrap(
        message,
        width=LINE_WIDTH - LABEL_WIDTH,
        break_long_words=False,
        break_on_hyphens=False,
    )
    return label.ljust(LABEL_WIDTH), ("\n" + " " * LABEL_WIDTH).join(lines)


def log(
    label: str,
    message: str,
    fg: str | None = "cyan",
    label_fg: str | None = "green",
) -> None:
    """Print one progress line, and mirror it to the debug log."""
    logger.debug("%s %s", label, message)
    if _quiet:
        return
    padded, wrapped = format_line(label, message)
    click.secho(padded, fg=label_fg, nl=False)
    click.secho(wrapped, fg=fg)


def dump(text: str, fg: str = "white") -> None:
    """Echo captured tool output, dimmed."""
    if _quiet or not text.strip():
        return
    click.secho(text.rstrip(), fg=fg, dim=True)
