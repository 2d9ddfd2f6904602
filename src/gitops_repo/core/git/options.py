"""Caller-facing options describing which repository to mutate and as whom."""

from dataclasses import dataclass
from pathlib import Path

from gitops_repo.core.git.errors import InvalidGitOptionsError
from gitops_repo.core.git.locator import is_git_url, repo_name

DEFAULT_BRANCH = "master"


@dataclass(frozen=True)
class GitOptions:
    """Repository locator, branch and commit identity for a GitOps run."""

    url: str
    email: str
    branch: str = DEFAULT_BRANCH
    user: str = "Flux"
    private_ssh_key_path: Path | None = None

    @property
    def repo_name(self) -> str:
        return repo_name(self.url)

    def validate_url(self) -> None:
        if not self.url:
            raise InvalidGitOptionsError("empty Git URL")
        if not is_git_url(self.url):
            raise InvalidGitOptionsError(f"invalid Git URL: {self.url}")

    def validate_email(self) -> None:
        if not self.email:
            raise InvalidGitOptionsError("empty Git email")

    def validate(self) -> None:
        """Check the options are usable before any clone is attempted.

        Raises:
            InvalidGitOptionsError: On the first invalid field
        """
        self.validate_url()
        if not self.branch:
            raise InvalidGitOptionsError("empty Git branch")
        self.validate_email()
        if self.private_ssh_key_path is not None and not self.private_ssh_key_path.exists():
            raise InvalidGitOptionsError(
                f"private SSH key not found: {self.private_ssh_key_path}"
            )
