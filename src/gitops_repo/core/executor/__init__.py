"""Command execution subpackage.

Provides the injectable seam for issuing external commands, with a real
subprocess implementation and a recording fake for tests.
"""

from gitops_repo.core.executor.abc import (
    CommandExecutor,
    CommandFailedError,
    CommandInvocation,
    CommandTimeoutError,
)
from gitops_repo.core.executor.fake import FakeCommandExecutor
from gitops_repo.core.executor.real import RealCommandExecutor

__all__ = [
    "CommandExecutor",
    "CommandFailedError",
    "CommandInvocation",
    "CommandTimeoutError",
    "FakeCommandExecutor",
    "RealCommandExecutor",
]
