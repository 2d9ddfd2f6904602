"""Command execution interface.

This module defines the single seam through which the git client issues
external commands. Real implementations spawn a process; fake implementations
record the invocation for test assertions.

Architecture:
- CommandExecutor: Abstract base class defining the interface
- RealCommandExecutor: Production implementation using subprocess
- FakeCommandExecutor: In-memory recording implementation for tests
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CommandInvocation:
    """One external command dispatch: program, working directory and arguments."""

    program: str
    cwd: Path
    args: tuple[str, ...]

    @property
    def argv(self) -> list[str]:
        """Full command line with the program first."""
        return [self.program, *self.args]


def _format_failure(
    operation_context: str,
    cmd: Sequence[str],
    exit_code: int | None,
    stdout: str,
    stderr: str,
) -> str:
    cmd_str = " ".join(str(arg) for arg in cmd)
    if exit_code is None:
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {cmd_str}"
        return error_msg

    error_msg = f"Failed to {operation_context}"
    error_msg += f"\nCommand: {cmd_str}"
    error_msg += f"\nExit code: {exit_code}"

    stdout_stripped = stdout.strip()
    if stdout_stripped:
        error_msg += f"\nstdout: {stdout_stripped}"

    stderr_stripped = stderr.strip()
    if stderr_stripped:
        error_msg += f"\nstderr: {stderr_stripped}"

    return error_msg


class CommandFailedError(RuntimeError):
    """Raised when an external command exits abnormally.

    Carries the command line and its outcome so callers can branch on the
    exit code (for example, ``git diff --quiet`` uses exit code 1 to report
    a difference). ``exit_code`` is None when the program could not be started
    or did not run to completion.
    """

    def __init__(
        self,
        operation_context: str,
        cmd: Sequence[str],
        exit_code: int | None,
        stdout: str = "",
        stderr: str = "",
        message: str | None = None,
    ):
        self.operation_context = operation_context
        self.cmd = tuple(str(arg) for arg in cmd)
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
        if message is None:
            message = _format_failure(operation_context, self.cmd, exit_code, stdout, stderr)
        super().__init__(message)


class CommandTimeoutError(CommandFailedError):
    """Raised when an external command does not finish within its timeout."""

    def __init__(self, operation_context: str, cmd: Sequence[str], timeout: float):
        self.timeout = timeout
        cmd_str = " ".join(str(arg) for arg in cmd)
        error_msg = f"Timed out after {timeout}s while trying to {operation_context}"
        error_msg += f"\nCommand: {cmd_str}"
        super().__init__(operation_context, cmd, exit_code=None, message=error_msg)


class CommandExecutor(ABC):
    """Abstract interface for issuing one external command.

    All implementations (real and fake) must implement this interface.
    Exactly one attempt is made per call; retry policy belongs to callers.
    """

    @abstractmethod
    def execute(self, program: str, cwd: Path, args: Sequence[str]) -> None:
        """Run ``program`` with ``args`` in ``cwd`` and wait for it to finish.

        Args:
            program: Executable name, resolved on PATH
            cwd: Working directory for the command
            args: Argument vector, not including the program itself

        Raises:
            CommandFailedError: If the command exits non-zero or cannot be started
        """
        ...
