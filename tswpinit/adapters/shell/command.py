"""
Shell command adapter — run package-manager commands.

Runs a command string through the shell in the scaffold target and
captures both output streams. There is no timeout unless the action
asks for one: a hung package manager blocks the run.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import time
from pathlib import Path

from tswpinit.adapters.base import Adapter, ExecutionContext
from tswpinit.core.models.action import Receipt

logger = logging.getLogger(__name__)


class ShellCommandAdapter(Adapter):
    """Execute shell commands and capture output.

    Action params:
        command (str): The command to execute.
        timeout (int | None): Timeout in seconds (default: none).
        cwd (str): Override working directory (default: context.project_root).
    """

    @property
    def name(self) -> str:
        return "shell"

    def is_available(self) -> bool:
        return shutil.which("sh") is not None

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        if not context.params.get("command", ""):
            return False, "Missing required param: 'command'"

        cwd = context.working_dir
        if not Path(cwd).is_dir():
            return False, f"Working directory does not exist: {cwd}"

        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        command = context.params["command"]
        timeout = context.params.get("timeout")
        cwd = context.working_dir

        logger.debug("Executing: %s (cwd=%s)", command, cwd)
        start = time.monotonic()

        try:
            result = subprocess.run(
                command,
                shell=True,
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Command timed out after {timeout}s",
                metadata={"command": command, "timeout": timeout},
            )
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Command execution error: {e}",
                metadata={"command": command},
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        metadata = {
            "command": command,
            "return_code": result.returncode,
            "stdout": result.stdout,
            "stderr": result.stderr,
        }

        if result.returncode == 0:
            return Receipt.success(
                adapter=self.name,
                action_id=context.action.id,
                output=result.stdout.strip(),
                duration_ms=elapsed_ms,
                metadata=metadata,
            )
        return Receipt.failure(
            adapter=self.name,
            action_id=context.action.id,
            error=result.stderr.strip() or f"Command exited with code {result.returncode}",
            duration_ms=elapsed_ms,
            metadata=metadata,
        )
