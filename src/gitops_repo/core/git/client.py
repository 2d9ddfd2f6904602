"""Git client that mutates a repository through an ephemeral working copy.

The client sequences git commands against at most one working copy at a time:

    NoWorkingCopy --clone_repo--> WorkingCopy --delete_local_repo--> NoWorkingCopy

add/commit/push require a WorkingCopy and loop back to it. All commands go
through an injected CommandExecutor, so tests can record invocations instead
of running git.
"""

import logging
import shutil
import tempfile
from pathlib import Path

from gitops_repo.core.executor.abc import CommandExecutor, CommandFailedError
from gitops_repo.core.git.errors import (
    NoWorkingCopyError,
    UnsafeDeletionError,
    WorkingCopyActiveError,
)
from gitops_repo.core.git.types import NoWorkingCopy, StagedChanges, WorkingCopy

logger = logging.getLogger(__name__)

# `git diff --quiet` exits 1 when there are differences
_DIFF_EXIT_CODE = 1


def is_within(path: Path, root: Path) -> bool:
    """Check whether ``path`` lies strictly inside ``root`` after resolving both.

    Comparison is by path component, so /tmp-other is not inside /tmp, and
    ``..`` segments and symlinks are resolved before comparing.
    """
    resolved_path = path.resolve()
    resolved_root = root.resolve()
    if resolved_path == resolved_root:
        return False
    return resolved_path.is_relative_to(resolved_root)


class GitClient:
    """Clone, stage, commit and push against a single working copy.

    Instances are not thread-safe; callers serialize operations on one client.
    Separate clients may run concurrently under the same temp root.

    Example:
        client = GitClient(RealCommandExecutor(), temp_root=Path("/tmp"))
        path = client.clone_repo("gitops-", "main", "git@github.com:org/repo.git")
        (path / "manifest.yaml").write_text(content, encoding="utf-8")
        client.add("manifest.yaml")
        client.commit("Add manifest", "bot", "bot@example.com")
        client.push()
        client.delete_local_repo()
    """

    def __init__(
        self,
        executor: CommandExecutor,
        temp_root: Path,
        git_program: str = "git",
    ) -> None:
        """Create a client with no working copy.

        Args:
            executor: Seam used to issue every git command
            temp_root: Parent directory for working copies; deletion is confined to it.
                Relative roots are resolved against the current directory.
            git_program: Name or path of the git executable
        """
        self._executor = executor
        self._temp_root = Path(temp_root).expanduser().resolve()
        self._git_program = git_program
        self._state: WorkingCopy | NoWorkingCopy = NoWorkingCopy()

    @property
    def temp_root(self) -> Path:
        return self._temp_root

    @property
    def working_copy(self) -> WorkingCopy | NoWorkingCopy:
        """Current state: the active WorkingCopy, or the NoWorkingCopy sentinel."""
        return self._state

    def clone_repo(self, name_prefix: str, branch: str, locator: str) -> Path:
        """Clone ``branch`` of ``locator`` into a fresh directory under the temp root.

        The directory is created before git runs and removed again if the clone
        fails, so a failed clone leaves nothing behind.

        Args:
            name_prefix: Prefix for the generated directory name
            branch: Branch to check out
            locator: Repository to clone

        Returns:
            Path of the new working copy

        Raises:
            WorkingCopyActiveError: If this client already owns a working copy
            CommandFailedError: If git clone fails
            Exception: Anything else the executor raises, after the directory is removed
        """
        if isinstance(self._state, WorkingCopy):
            raise WorkingCopyActiveError(self._state.path)

        self._temp_root.mkdir(parents=True, exist_ok=True)
        path = Path(tempfile.mkdtemp(prefix=name_prefix, dir=self._temp_root))
        logger.debug("Cloning %s (branch %s) into %s", locator, branch, path)

        try:
            self._run(self._temp_root, "clone", "-b", branch, locator, str(path))
        except BaseException:
            logger.debug("Clone failed, removing %s", path)
            shutil.rmtree(path, ignore_errors=True)
            raise

        self._state = WorkingCopy(path=path, locator=locator, branch=branch)
        return path

    def delete_local_repo(self) -> None:
        """Remove the active working copy from disk.

        Succeeds silently when no working copy is bound or its directory is
        already gone.

        Raises:
            UnsafeDeletionError: If the working copy is not inside the temp root
        """
        if isinstance(self._state, NoWorkingCopy):
            return

        path = self._state.path
        if not is_within(path, self._temp_root):
            raise UnsafeDeletionError(path, self._temp_root)

        if path.exists():
            logger.debug("Deleting working copy %s", path)
            shutil.rmtree(path)
        self._state = NoWorkingCopy()

    def add(self, *paths: str) -> None:
        """Stage ``paths`` (relative to the working copy root)."""
        working_copy = self._require_working_copy("add files")
        self._run(working_copy.path, "add", "--", *paths)

    def staged_changes(self) -> StagedChanges:
        """Report whether the index differs from HEAD.

        Raises:
            NoWorkingCopyError: If nothing has been cloned
            CommandFailedError: If git fails for any reason other than a difference
        """
        working_copy = self._require_working_copy("check for staged changes")
        try:
            self._run(working_copy.path, "diff", "--cached", "--quiet")
        except CommandFailedError as e:
            if e.exit_code == _DIFF_EXIT_CODE:
                return StagedChanges.PRESENT
            raise
        return StagedChanges.NONE

    def commit(self, message: str, author_name: str, author_email: str) -> None:
        """Commit staged changes with an explicit identity.

        Does nothing when there are no staged changes. The identity is written
        to the working copy's config before committing so the result does not
        depend on the host's global git configuration.
        """
        working_copy = self._require_working_copy("commit")
        if self.staged_changes() is StagedChanges.NONE:
            logger.debug("Nothing to commit in %s", working_copy.path)
            return

        self._run(working_copy.path, "config", "user.email", author_email)
        self._run(working_copy.path, "config", "user.name", author_name)
        self._run(
            working_copy.path,
            "commit",
            "-m",
            message,
            f"--author={author_name} <{author_email}>",
        )

    def push(self) -> None:
        """Push the working copy's branch to its upstream."""
        working_copy = self._require_working_copy("push")
        self._run(working_copy.path, "push")

    def _require_working_copy(self, operation: str) -> WorkingCopy:
        if isinstance(self._state, NoWorkingCopy):
            raise NoWorkingCopyError(operation)
        return self._state

    def _run(self, cwd: Path, *args: str) -> None:
        self._executor.execute(self._git_program, cwd, list(args))
