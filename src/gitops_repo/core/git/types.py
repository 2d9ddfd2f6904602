"""Value types for the git client state machine."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class WorkingCopy:
    """A checkout of one branch of one repository, owned by a single GitClient."""

    path: Path
    locator: str
    branch: str


@dataclass(frozen=True)
class NoWorkingCopy:
    """Sentinel value indicating the client has no active working copy.

    Covers both a fresh client and one whose working copy was deleted.
    Operations that need a checkout check for this sentinel and fail fast.
    """

    message: str = "No working copy has been cloned"


class StagedChanges(Enum):
    """Outcome of `git diff --cached --quiet`.

    The third outcome, a genuine command failure, is raised as an exception.
    """

    NONE = "none"
    PRESENT = "present"
