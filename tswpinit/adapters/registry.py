"""
Adapter registry — central dispatch for all adapter operations.

The pipeline never talks to adapters directly, always through the
registry, so tests can swap the shell adapter for a mock by name.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from tswpinit.adapters.base import Adapter, ExecutionContext
from tswpinit.core.models.action import Action, Receipt

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """Registry and dispatcher for adapters."""

    def __init__(self) -> None:
        self._adapters: dict[str, Adapter] = {}

    def register(self, adapter: Adapter) -> None:
        """Register an adapter, replacing any with the same name."""
        name = adapter.name
        if name in self._adapters:
            logger.debug("Overwriting existing adapter: %s", name)
        self._adapters[name] = adapter
        logger.debug("Registered adapter: %s", name)

    def unregister(self, name: str) -> None:
        """Remove an adapter from the registry."""
        self._adapters.pop(name, None)

    def get(self, name: str) -> Adapter | None:
        """Look up an adapter by name."""
        return self._adapters.get(name)

    def list_adapters(self) -> list[str]:
        """List all registered adapter names."""
        return list(self._adapters.keys())

    def adapter_status(self) -> dict[str, dict[str, Any]]:
        """Get availability status of all registered adapters."""
        status = {}
        for name, adapter in self._adapters.items():
            try:
                available = adapter.is_available()
            except Exception:
                available = False
            status[name] = {
                "name": name,
                "available": available,
                "type": adapter.__class__.__name__,
            }
        return status

    def execute_action(self, action: Action, project_root: str = ".") -> Receipt:
        """Execute an action through the appropriate adapter.

        Resolves the adapter, validates, executes and times the action.
        Returns a Receipt; never raises.
        """
        start_time = time.monotonic()
        context = ExecutionContext(action=action, project_root=project_root)

        adapter = self._adapters.get(action.adapter)
        if adapter is None:
            return Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"No adapter registered for '{action.adapter}'",
            )

        try:
            is_valid, error_msg = adapter.validate(context)
        except Exception as e:
            return Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"Validation error: {e}",
            )
        if not is_valid:
            return Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"Validation failed: {error_msg}",
            )

        try:
            receipt = adapter.execute(context)
        except Exception as e:
            logger.error("Adapter %s raised during execution: %s", action.adapter, e)
            receipt = Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"Unexpected error: {e}",
            )

        receipt.duration_ms = int((time.monotonic() - start_time) * 1000)
        return receipt


def default_registry() -> AdapterRegistry:
    """A registry with the real shell and filesystem adapters."""
    from tswpinit.adapters.shell.command import ShellCommandAdapter
    from tswpinit.adapters.shell.filesystem import FilesystemAdapter

    registry = AdapterRegistry()
    registry.register(ShellCommandAdapter())
    registry.register(FilesystemAdapter())
    return registry
