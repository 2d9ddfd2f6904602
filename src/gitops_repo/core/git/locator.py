"""Parsing and classification of repository locators.

Two locator families are recognised:

- scp-like:          git@github.com:weaveworks/eksctl.git
- scheme-qualified:  https://user@github.com:443/weaveworks/eksctl.git

Neither function issues commands; both are safe to call before any clone.
"""

import re

from gitops_repo.core.git.errors import InvalidRepoLocatorError

# user@host:path where host has at least two dot-separated labels
_SCP_PATTERN = re.compile(
    r"^(?P<user>[^@\s/:]+)@(?P<host>[A-Za-z0-9_-]+(?:\.[A-Za-z0-9_-]+)+):(?P<path>\S+)$"
)

# scheme://authority/path; the authority is validated separately because it
# may carry userinfo and embedded colons (user@secret:host.example.com:8080)
_SCHEME_PATTERN = re.compile(
    r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.-]*)://(?P<authority>[^/\s]+)/(?P<path>\S*)$"
)

_PORT_SUFFIX = re.compile(r":\d+$")

_GIT_SUFFIX = ".git"


def _authority_host(authority: str) -> str:
    """Strip userinfo and a trailing port from an authority component."""
    host = authority.rpartition("@")[2]
    return _PORT_SUFFIX.sub("", host)


def is_git_url(candidate: str) -> bool:
    """Return True if ``candidate`` looks like a remote git repository locator.

    Examples:
        >>> is_git_url("git@github.com:weaveworks/eksctl.git")
        True
        >>> is_git_url("https://username@secr3t:my-repo.example.com:8080/weaveworks/eksctl.git")
        True
        >>> is_git_url("git@github")
        False
        >>> is_git_url("https://")
        False
    """
    scp = _SCP_PATTERN.match(candidate)
    if scp is not None:
        return bool(scp.group("path").strip("/"))

    scheme = _SCHEME_PATTERN.match(candidate)
    if scheme is None:
        return False
    if not _authority_host(scheme.group("authority")):
        return False
    return bool(scheme.group("path").strip("/"))


def _locator_path(locator: str) -> str:
    """Return the portion of the locator that names the repository path."""
    if "://" in locator:
        remainder = locator.split("://", 1)[1]
        remainder = re.split(r"[?#]", remainder, maxsplit=1)[0]
        _authority, _sep, path = remainder.partition("/")
        return path

    # scp-like: everything after the host separator
    if ":" in locator:
        return locator.split(":", 1)[1]

    if "/" in locator:
        return locator

    return ""


def repo_name(locator: str) -> str:
    """Extract the repository name from a locator.

    Only the final path segment is significant, however deeply the repository
    is nested in organisations or groups. A trailing ``.git`` is removed.

    Args:
        locator: scp-like or scheme-qualified repository locator

    Returns:
        Repository name, e.g. "eksctl"

    Raises:
        InvalidRepoLocatorError: If the locator has no terminal path segment

    Examples:
        >>> repo_name("git@github.com:weaveworks/eksctl.git")
        'eksctl'
        >>> repo_name("https://example.com/department1/team1/some-repo-name.git")
        'some-repo-name'
    """
    path = _locator_path(locator).rstrip("/")
    if not path:
        raise InvalidRepoLocatorError(locator)

    name = path.rsplit("/", 1)[-1]
    if name.endswith(_GIT_SUFFIX):
        name = name[: -len(_GIT_SUFFIX)]
    if not name:
        raise InvalidRepoLocatorError(locator)
    return name
