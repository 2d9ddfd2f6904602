"""Errors raised by the git client and locator parsing."""

from pathlib import Path


class NoWorkingCopyError(RuntimeError):
    """Raised when an operation needs a cloned working copy and none is active."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot {operation}: no working copy has been cloned")


class WorkingCopyActiveError(RuntimeError):
    """Raised when cloning into a client that already owns a working copy."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(
            f"A working copy is already active at {path}; delete it before cloning again"
        )


class UnsafeDeletionError(RuntimeError):
    """Raised when a working copy path falls outside the temp root."""

    def __init__(self, path: Path, temp_root: Path):
        self.path = path
        self.temp_root = temp_root
        super().__init__(f"Refusing to delete {path}: it is not inside temp root {temp_root}")


class InvalidRepoLocatorError(ValueError):
    """Raised when no repository name can be extracted from a locator."""

    def __init__(self, locator: str):
        self.locator = locator
        super().__init__(f"Cannot determine repository name from '{locator}'")


class InvalidGitOptionsError(ValueError):
    """Raised when git options fail validation."""
