"""
Filesystem adapter — the directory and read operations of a run.

File writes go through ``core.services.writer``; this adapter covers
the rest: existence checks, listings, directory creation and reads.
"""

from __future__ import annotations

import logging
from pathlib import Path

from tswpinit.adapters.base import Adapter, ExecutionContext
from tswpinit.core.models.action import Receipt

logger = logging.getLogger(__name__)

OPERATIONS = {"exists", "read", "mkdir", "list"}


class FilesystemAdapter(Adapter):
    """File and directory operations with receipts.

    Action params:
        operation (str): One of 'exists', 'read', 'mkdir', 'list'.
        path (str): Target path (relative to project_root or absolute).
        encoding (str): Text encoding for 'read' (default: utf-8).
    """

    @property
    def name(self) -> str:
        return "filesystem"

    def is_available(self) -> bool:
        return True

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        operation = context.params.get("operation", "")
        if not operation:
            return False, "Missing required param: 'operation'"
        if operation not in OPERATIONS:
            return False, f"Unknown operation '{operation}'. Valid: {', '.join(sorted(OPERATIONS))}"
        if not context.params.get("path", ""):
            return False, "Missing required param: 'path'"
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        operation = context.params["operation"]
        target = Path(context.params["path"])
        if not target.is_absolute():
            target = Path(context.project_root) / target

        handler = getattr(self, f"_{operation}")
        try:
            return handler(context, target)
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Filesystem error: {e}",
                metadata={"operation": operation, "path": str(target)},
            )

    def _exists(self, ctx: ExecutionContext, target: Path) -> Receipt:
        exists = target.exists()
        return Receipt.success(
            adapter=self.name,
            action_id=ctx.action.id,
            output=str(exists),
            metadata={"exists": exists, "is_dir": target.is_dir(), "path": str(target)},
        )

    def _read(self, ctx: ExecutionContext, target: Path) -> Receipt:
        if not target.is_file():
            return Receipt.failure(
                adapter=self.name,
                action_id=ctx.action.id,
                error=f"File not found: {target}",
            )
        content = target.read_text(encoding=ctx.params.get("encoding", "utf-8"))
        return Receipt.success(
            adapter=self.name,
            action_id=ctx.action.id,
            output=content,
            metadata={"path": str(target), "size": len(content)},
        )

    def _mkdir(self, ctx: ExecutionContext, target: Path) -> Receipt:
        target.mkdir(parents=True, exist_ok=True)
        return Receipt.success(
            adapter=self.name,
            action_id=ctx.action.id,
            output=f"Directory created: {target}",
            metadata={"path": str(target)},
        )

    def _list(self, ctx: ExecutionContext, target: Path) -> Receipt:
        if not target.is_dir():
            return Receipt.failure(
                adapter=self.name,
                action_id=ctx.action.id,
                error=f"Not a directory: {target}",
            )
        entries = sorted(p.name for p in target.iterdir())
        return Receipt.success(
            adapter=self.name,
            action_id=ctx.action.id,
            output="\n".join(entries),
            metadata={"path": str(target), "count": len(entries), "entries": entries},
        )
