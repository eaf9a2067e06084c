"""
Mock adapter — stands in for the shell adapter in tests.

Every call is recorded and succeeds unless a failure was configured for
its action ID. Nothing is spawned, so anything the real package manager
would leave on disk (the package.json written by ``yarn init``) has to
come from the ``side_effect`` hook.
"""

from __future__ import annotations

from collections.abc import Callable

from tswpinit.adapters.base import Adapter, ExecutionContext
from tswpinit.core.models.action import Receipt

SideEffect = Callable[[ExecutionContext], None]


class MockAdapter(Adapter):
    """Recording adapter with per-action canned results.

    Args:
        adapter_name: Name to register under, usually ``"shell"``.
        available: What ``is_available`` reports.
        default_output: Output (and stdout) of successful calls.
        side_effect: Called with the context of each successful call.
    """

    def __init__(
        self,
        adapter_name: str = "mock",
        available: bool = True,
        default_output: str = "[mock] executed",
        side_effect: SideEffect | None = None,
    ):
        self._name = adapter_name
        self._available = available
        self._default_output = default_output
        self._side_effect = side_effect
        self._responses: dict[str, Receipt] = {}
        self._failures: dict[str, str] = {}
        self._call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[ExecutionContext]:
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    @property
    def commands(self) -> list[str]:
        """The ``command`` param of every call, in order."""
        return [ctx.params.get("command", "") for ctx in self._call_log]

    def is_available(self) -> bool:
        return self._available

    def set_response(self, action_id: str, receipt: Receipt) -> None:
        """Answer ``action_id`` with a ready-made receipt."""
        self._responses[action_id] = receipt

    def set_failure(self, action_id: str, error: str = "Mock failure") -> None:
        """Make ``action_id`` fail the way a non-zero exit would."""
        self._failures[action_id] = error

    def reset(self) -> None:
        self._responses.clear()
        self._failures.clear()
        self._call_log.clear()

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        self._call_log.append(context)
        action_id = context.action.id
        metadata = {"mock": True, "command": context.params.get("command", "")}

        if action_id in self._responses:
            return self._responses[action_id]
        if action_id in self._failures:
            error = self._failures[action_id]
            return Receipt.failure(
                adapter=self._name,
                action_id=action_id,
                error=error,
                metadata={**metadata, "return_code": 1, "stdout": "", "stderr": error},
            )

        if self._side_effect is not None:
            self._side_effect(context)
        return Receipt.success(
            adapter=self._name,
            action_id=action_id,
            output=self._default_output,
            metadata={**metadata, "return_code": 0, "stdout": self._default_output, "stderr": ""},
        )
