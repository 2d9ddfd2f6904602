"""Tests for repository locator parsing and classification."""

import pytest

from gitops_repo.core.git import InvalidRepoLocatorError, is_git_url, repo_name


@pytest.mark.parametrize(
    ("locator", "expected"),
    [
        ("git@github.com:weaveworks/eksctl.git", "eksctl"),
        ("git@github.com:weaveworks/sock-shop.git", "sock-shop"),
        ("https://example.com/department1/team1/some-repo-name.git", "some-repo-name"),
        ("https://github.com/department1/team2/another-repo-name", "another-repo-name"),
        ("ssh://git@gitlab.example.com:2222/a/b/c/d/deep-repo.git", "deep-repo"),
        ("https://github.com/weaveworks/eksctl/", "eksctl"),
        ("https://github.com/weaveworks/eksctl.git?ref=main", "eksctl"),
        ("git@github.com:eksctl.git", "eksctl"),
        ("/srv/git/local-repo.git", "local-repo"),
    ],
)
def test_repo_name(locator: str, expected: str) -> None:
    assert repo_name(locator) == expected


@pytest.mark.parametrize(
    "locator",
    ["app-dev", "", "https://", "https://github.com/", "git@github.com:", "git@github.com:/.git"],
)
def test_repo_name_rejects_locators_without_path_segment(locator: str) -> None:
    with pytest.raises(InvalidRepoLocatorError) as exc_info:
        repo_name(locator)

    assert exc_info.value.locator == locator


def test_invalid_locator_error_is_value_error() -> None:
    with pytest.raises(ValueError, match="Cannot determine repository name"):
        repo_name("app-dev")


@pytest.mark.parametrize(
    "candidate",
    [
        "git@github.com:weaveworks/eksctl.git",
        "https://github.com/weaveworks/eksctl.git",
        "https://username@secr3t:my-repo.example.com:8080/weaveworks/eksctl.git",
        "ssh://git@github.com/weaveworks/eksctl.git",
        "http://gitlab.internal:8080/group/subgroup/project",
        "deploy@git.example.co.uk:infra/clusters.git",
    ],
)
def test_is_git_url_accepts(candidate: str) -> None:
    assert is_git_url(candidate) is True


@pytest.mark.parametrize(
    "candidate",
    [
        "git@github",
        "https://",
        "app-dev",
        "",
        "git@github.com:",
        "github.com:weaveworks/eksctl.git",
        "https://github.com",
        "https://github.com/",
        "git@github:weaveworks/eksctl.git",
        "not a url at all",
    ],
)
def test_is_git_url_rejects(candidate: str) -> None:
    assert is_git_url(candidate) is False
