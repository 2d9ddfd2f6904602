"""Commands that inspect repository locators without touching the network."""

import click

from gitops_repo.cli.output import error_exit, machine_output
from gitops_repo.core.git.errors import InvalidRepoLocatorError
from gitops_repo.core.git.locator import is_git_url, repo_name


@click.command("repo-name")
@click.argument("locator", metavar="LOCATOR")
def repo_name_cmd(locator: str) -> None:
    """Print the repository name of LOCATOR (last path segment without .git)."""
    try:
        name = repo_name(locator)
    except InvalidRepoLocatorError as e:
        error_exit(str(e))
    machine_output(name)


@click.command("is-git-url")
@click.argument("candidate", metavar="CANDIDATE")
def is_git_url_cmd(candidate: str) -> None:
    """Print whether CANDIDATE is a git URL; exit status 1 when it is not."""
    result = is_git_url(candidate)
    machine_output(str(result).lower())
    if not result:
        raise SystemExit(1)
