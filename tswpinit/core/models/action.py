"""
Action and Receipt models — one step of a scaffold run and its outcome.

The pipeline describes each external side effect (a package-manager
command, a directory listing, a manifest read) as an Action and hands it
to the adapter registry. The adapter answers with a Receipt; it does not
raise. Deciding that a failed Receipt aborts the run is the pipeline's job.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class Action(BaseModel):
    """A step for an adapter to carry out."""

    id: str                         # e.g. "command-0", "target-list"
    adapter: str                    # "shell" or "filesystem"
    params: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def shell(cls, action_id: str, command: str, timeout: float | None = None) -> Action:
        """A command for the shell adapter, run in the scaffold target."""
        return cls(id=action_id, adapter="shell", params={"command": command, "timeout": timeout})

    @classmethod
    def filesystem(cls, action_id: str, operation: str, path: str, **params: Any) -> Action:
        """An ``exists``/``read``/``mkdir``/``list`` for the filesystem adapter."""
        return cls(
            id=action_id,
            adapter="filesystem",
            params={"operation": operation, "path": path, **params},
        )


class Receipt(BaseModel):
    """What happened when an adapter ran an Action.

    ``output`` holds the useful result (command stdout, file contents);
    ``metadata`` holds the adapter-specific details the pipeline inspects,
    such as ``exists`` or ``count`` for filesystem steps and ``command``,
    ``stdout``, ``stderr`` for shell steps.
    """

    adapter: str
    action_id: str
    status: Literal["ok", "failed"] = "ok"
    duration_ms: int = 0

    output: str = ""
    error: str | None = None

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    @classmethod
    def success(cls, adapter: str, action_id: str, output: str = "", **kwargs: Any) -> Receipt:
        return cls(adapter=adapter, action_id=action_id, output=output, **kwargs)

    @classmethod
    def failure(cls, adapter: str, action_id: str, error: str, **kwargs: Any) -> Receipt:
        return cls(adapter=adapter, action_id=action_id, status="failed", error=error, **kwargs)
