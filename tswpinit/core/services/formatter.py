"""
Formatter bridge — pipe generated source through Prettier.

Prettier picks its parser from the file extension given with
``--stdin-filepath``; the file itself is never read. The style is fixed
and mirrors the ``.prettierrc`` written into the scaffolded project.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from pydantic import BaseModel

from tswpinit.core.errors import FormatError

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = ("npx", "prettier")


class PrettierOptions(BaseModel):
    """The Prettier style used for generated sources."""

    tab_width: int = 2
    bracket_spacing: bool = True
    print_width: int = 80
    semi: bool = True
    single_quote: bool = True
    trailing_comma: str = "all"
    arrow_parens: str = "avoid"
    use_tabs: bool = False

    def to_cli_args(self) -> list[str]:
        """Render the options as Prettier command-line flags."""
        args = [
            f"--tab-width={self.tab_width}",
            f"--print-width={self.print_width}",
            f"--trailing-comma={self.trailing_comma}",
            f"--arrow-parens={self.arrow_parens}",
        ]
        if not self.bracket_spacing:
            args.append("--no-bracket-spacing")
        if not self.semi:
            args.append("--no-semi")
        if self.single_quote:
            args.append("--single-quote")
        if self.use_tabs:
            args.append("--use-tabs")
        return args

    def to_rc(self) -> dict:
        """The options as a .prettierrc mapping."""
        return {
            "tabWidth": self.tab_width,
            "bracketSpacing": self.bracket_spacing,
            "printWidth": self.print_width,
            "semi": self.semi,
            "singleQuote": self.single_quote,
            "trailingComma": self.trailing_comma,
            "arrowParens": self.arrow_parens,
            "useTabs": self.use_tabs,
        }


DEFAULT_OPTIONS = PrettierOptions()


def format_source(
    source: str,
    filepath: str,
    options: PrettierOptions = DEFAULT_OPTIONS,
    command: Sequence[str] = DEFAULT_COMMAND,
    cwd: str | None = None,
) -> str:
    """Return ``source`` reformatted for the language of ``filepath``.

    Raises:
        FormatError: Prettier is missing or rejected the source.
    """
    argv = [*command, f"--stdin-filepath={filepath}", *options.to_cli_args()]
    logger.debug("Formatting %s: %s", filepath, " ".join(argv))

    try:
        result = subprocess.run(
            argv,
            input=source,
            capture_output=True,
            text=True,
            cwd=cwd,
        )
    except FileNotFoundError as e:
        raise FormatError(filepath, f"formatter not found: {command[0]}") from e

    if result.returncode != 0:
        raise FormatError(
            filepath,
            result.stderr.strip() or f"formatter exited with code {result.returncode}",
        )
    return result.stdout
