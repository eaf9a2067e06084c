"""
Adapter base — the protocol contract between the pipeline and tools.

The scaffold pipeline only talks to external tools (package managers,
the filesystem) through this protocol.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel

from tswpinit.core.models.action import Action, Receipt


class ExecutionContext(BaseModel):
    """Everything an adapter needs to execute an action.

    ``project_root`` is the scaffold target. Relative paths and command
    working directories resolve against it; the process cwd is never used.
    """

    action: Action
    project_root: str = "."

    @property
    def params(self) -> dict:
        return self.action.params

    @property
    def working_dir(self) -> str:
        """Resolved working directory for the action."""
        return self.params.get("cwd") or self.project_root


class Adapter(ABC):
    """Abstract base class for all adapters.

    Adapters perform external side effects and return receipts.
    They NEVER raise exceptions — failures are captured in the Receipt.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'shell', 'filesystem')."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this adapter's underlying tool is available."""

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Validate that the action can be executed.

        Returns:
            (is_valid, error_message). error_message is empty if valid.
        """

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Execute the action and return a receipt."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
