"""Fake CommandExecutor implementation for testing.

FakeCommandExecutor is an in-memory implementation that records every
invocation without spawning a process, enabling fast, deterministic tests of
code that issues git commands.
"""

from collections.abc import Mapping, Sequence
from pathlib import Path

from gitops_repo.core.executor.abc import CommandExecutor, CommandFailedError, CommandInvocation


class FakeCommandExecutor(CommandExecutor):
    """In-memory fake that records invocations and returns programmed exit codes.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.

    Exit codes are keyed by argument prefix; the longest matching prefix wins
    and unmatched invocations succeed.

    Examples:
        # diff-check reports staged changes, everything else succeeds
        >>> executor = FakeCommandExecutor(exit_codes={("diff",): 1})

        # the second config call fails, the first succeeds
        >>> executor = FakeCommandExecutor(
        ...     exit_codes={("diff",): 1, ("config", "user.name"): 128}
        ... )
    """

    def __init__(
        self,
        *,
        exit_codes: Mapping[tuple[str, ...], int] | None = None,
        stderr: str = "",
    ) -> None:
        """Create FakeCommandExecutor with programmed results.

        Args:
            exit_codes: Mapping of argument prefix to exit code
            stderr: Diagnostic output attached to every simulated failure
        """
        self._exit_codes = dict(exit_codes) if exit_codes else {}
        self._stderr = stderr
        self._calls: list[CommandInvocation] = []

    @property
    def calls(self) -> list[CommandInvocation]:
        """Get the list of execute() calls that were made, in order.

        This property is for test assertions only.
        """
        return self._calls.copy()

    @property
    def last_call(self) -> CommandInvocation | None:
        """Get the most recent execute() call, or None if nothing ran.

        This property is for test assertions only.
        """
        if not self._calls:
            return None
        return self._calls[-1]

    def execute(self, program: str, cwd: Path, args: Sequence[str]) -> None:
        """Record the invocation and raise if its programmed exit code is non-zero."""
        invocation = CommandInvocation(program=program, cwd=Path(cwd), args=tuple(args))
        self._calls.append(invocation)

        exit_code = self._exit_code_for(invocation.args)
        if exit_code != 0:
            operation = " ".join(invocation.argv[:2])
            raise CommandFailedError(
                f"run '{operation}'",
                invocation.argv,
                exit_code=exit_code,
                stderr=self._stderr,
            )

    def _exit_code_for(self, args: tuple[str, ...]) -> int:
        best_len = -1
        exit_code = 0
        for prefix, code in self._exit_codes.items():
            if args[: len(prefix)] == prefix and len(prefix) > best_len:
                best_len = len(prefix)
                exit_code = code
        return exit_code
