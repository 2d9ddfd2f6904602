"""Subprocess execution with rich error context.

Wraps subprocess.run() so that every failure surfaces as a CommandFailedError
carrying the operation, command line, exit code and captured output.
"""

import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from gitops_repo.core.executor.abc import CommandFailedError, CommandTimeoutError


def _decode(stream: str | bytes | None) -> str:
    if stream is None:
        return ""
    if isinstance(stream, bytes):
        return stream.decode("utf-8", errors="replace")
    return stream


def _start_failure_message(
    error: OSError,
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None,
) -> str:
    """Describe why the process could not be started."""
    cmd_str = " ".join(str(arg) for arg in cmd)
    if isinstance(error, FileNotFoundError) and cwd is not None and not Path(cwd).is_dir():
        error_msg = f"Working directory not found while trying to {operation_context}: {cwd}"
    elif isinstance(error, FileNotFoundError):
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
    else:
        reason = error.strerror or str(error)
        error_msg = f"Could not start {cmd[0]} while trying to {operation_context}: {reason}"
    error_msg += f"\nFull command: {cmd_str}"
    return error_msg


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    timeout: float | None = None,
    capture_output: bool = True,
    text: bool = True,
    encoding: str = "utf-8",
    errors: str = "replace",
    check: bool = True,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Execute subprocess with enriched error reporting.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        cwd: Working directory for command execution
        env: Full environment for the child process (None inherits ours)
        timeout: Seconds to wait before killing the process (None waits forever)
        capture_output: Whether to capture stdout/stderr (default: True)
        text: Whether to decode output as text (default: True)
        encoding: Text encoding to use (default: "utf-8")
        errors: Decoding error handler (default: "replace", so undecodable bytes never raise)
        check: Whether to raise on non-zero exit (default: True)
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        CommandFailedError: If command fails or cannot be started
        CommandTimeoutError: If the timeout expires
    """
    optional: dict[str, Any] = {}
    if env is not None:
        optional["env"] = dict(env)
    if timeout is not None:
        optional["timeout"] = timeout

    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=capture_output,
            text=text,
            encoding=encoding,
            errors=errors,
            check=check,
            **optional,
            **kwargs,
        )

    except subprocess.CalledProcessError as e:
        raise CommandFailedError(
            operation_context,
            cmd,
            exit_code=e.returncode,
            stdout=_decode(e.stdout),
            stderr=_decode(e.stderr),
        ) from e

    except subprocess.TimeoutExpired as e:
        raise CommandTimeoutError(operation_context, cmd, timeout=e.timeout) from e

    except OSError as e:
        raise CommandFailedError(
            operation_context,
            cmd,
            exit_code=None,
            message=_start_failure_message(e, cmd, operation_context, cwd),
        ) from e
