"""Repository mutation client for GitOps workflows."""

from gitops_repo.core.executor import (
    CommandExecutor,
    CommandFailedError,
    CommandInvocation,
    FakeCommandExecutor,
    RealCommandExecutor,
)
from gitops_repo.core.git import GitClient, GitOptions, is_git_url, repo_name

__version__ = "0.1.0"

__all__ = [
    "CommandExecutor",
    "CommandFailedError",
    "CommandInvocation",
    "FakeCommandExecutor",
    "GitClient",
    "GitOptions",
    "RealCommandExecutor",
    "is_git_url",
    "repo_name",
]
