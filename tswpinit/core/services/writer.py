"""
File writer — materialize WriteRequests on disk.

Text goes through the formatter or the indentation normalizer (never
both), is stripped, and always ends in exactly one newline. Bytes are
written untouched. Failures propagate: an ``OSError`` from the filesystem
or a ``FormatError`` from the formatter aborts the run.

Paths are resolved against an explicit ``base_dir``; the process working
directory is never changed.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from tswpinit.core.models.template import WriteRequest
from tswpinit.core.observability import console
from tswpinit.core.services.formatter import DEFAULT_OPTIONS, format_source
from tswpinit.core.templating.deindent import deindent

logger = logging.getLogger(__name__)

Formatter = Callable[[str, str], str]


def resolve_path(path: str, base_dir: Path | None = None) -> Path:
    """Resolve a request path against the base directory."""
    target = Path(path)
    if base_dir is not None and not target.is_absolute():
        target = Path(base_dir) / target
    return target


def prepare_text(request: WriteRequest, formatter: Formatter | None = None) -> str:
    """Apply formatting or de-indenting and newline normalization."""
    content = request.content
    assert isinstance(content, str)

    if request.format:
        content = (formatter or format_source)(content, request.path)
    elif request.deindent:
        # A leading newline makes first-line indentation the reference
        content = deindent("\n" + content)

    return content.strip() + "\n"


def write_file(
    request: WriteRequest,
    base_dir: Path | None = None,
    formatter: Formatter | None = None,
) -> Path:
    """Write one file and return its resolved path.

    Args:
        request: What to write and how.
        base_dir: Directory relative paths are resolved against.
        formatter: ``(source, path) -> source`` used when ``request.format``
            is set. Defaults to Prettier.

    Raises:
        OSError: The file could not be written.
        FormatError: The formatter rejected the content.
    """
    console.log("Writing", request.path)
    target = resolve_path(request.path, base_dir)

    if request.is_binary:
        target.write_bytes(request.content)
        logger.debug("Wrote %d bytes to %s", len(request.content), target)
        return target

    text = prepare_text(request, formatter)
    target.write_text(text, encoding=request.encoding)
    logger.debug("Wrote %d chars to %s (%s)", len(text), target, request.encoding)
    return target


def json_request(path: str, value: Any) -> WriteRequest:
    """Build the WriteRequest for ``value`` serialized as indented JSON.

    JSON output is already canonical, so neither formatting nor
    de-indenting is applied.
    """
    content = json.dumps(value, indent=DEFAULT_OPTIONS.tab_width, ensure_ascii=False)
    return WriteRequest(path=path, content=content, format=False, deindent=False)


def write_json(path: str, value: Any, base_dir: Path | None = None) -> Path:
    """Serialize ``value`` as indented JSON and write it."""
    return write_file(json_request(path, value), base_dir=base_dir)
