"""Git client subpackage.

Provides the working-copy client, locator parsing and the option types used by
callers that mutate a repository.
"""

from gitops_repo.core.git.client import GitClient
from gitops_repo.core.git.errors import (
    InvalidGitOptionsError,
    InvalidRepoLocatorError,
    NoWorkingCopyError,
    UnsafeDeletionError,
    WorkingCopyActiveError,
)
from gitops_repo.core.git.locator import is_git_url, repo_name
from gitops_repo.core.git.options import GitOptions
from gitops_repo.core.git.types import NoWorkingCopy, StagedChanges, WorkingCopy

__all__ = [
    "GitClient",
    "GitOptions",
    "InvalidGitOptionsError",
    "InvalidRepoLocatorError",
    "NoWorkingCopy",
    "NoWorkingCopyError",
    "StagedChanges",
    "UnsafeDeletionError",
    "WorkingCopy",
    "WorkingCopyActiveError",
    "is_git_url",
    "repo_name",
]
