"""Production CommandExecutor implementation using subprocess."""

import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path

from gitops_repo.core.executor.abc import CommandExecutor
from gitops_repo.core.executor.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)


class RealCommandExecutor(CommandExecutor):
    """Production implementation that spawns the program and waits for it.

    Output is captured so failures can report stdout/stderr. Extra environment
    variables are layered over the current process environment at call time.

    Example:
        executor = RealCommandExecutor(
            env={"GIT_SSH_COMMAND": "ssh -i ~/.ssh/deploy -o IdentitiesOnly=yes"},
            timeout=120,
        )
        executor.execute("git", Path("/tmp"), ["clone", "-b", "main", url, dest])
    """

    def __init__(
        self,
        *,
        env: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> None:
        """Create an executor.

        Args:
            env: Extra environment variables for every command
            timeout: Per-command timeout in seconds, or None to wait indefinitely
        """
        self._env = dict(env) if env else {}
        self._timeout = timeout

    def execute(self, program: str, cwd: Path, args: Sequence[str]) -> None:
        cmd = [program, *args]
        operation = " ".join(cmd[:2])
        logger.debug("Running %s in %s", " ".join(cmd), cwd)

        env = None
        if self._env:
            env = {**os.environ, **self._env}

        run_subprocess_with_context(
            cmd,
            operation_context=f"run '{operation}'",
            cwd=cwd,
            env=env,
            timeout=self._timeout,
        )
