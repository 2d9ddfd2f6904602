import logging
import os
from pathlib import Path

import click

from gitops_repo.cli.commands.config import config_group
from gitops_repo.cli.commands.locator import is_git_url_cmd, repo_name_cmd
from gitops_repo.core.config import CONFIG_DIR_ENV_VAR
from gitops_repo.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

DEBUG_ENV_VAR = "GITOPS_REPO_DEBUG"


def _configure_logging(debug: bool) -> None:
    if debug or os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gitops-repo")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=CONFIG_DIR_ENV_VAR,
    default=None,
    help="Directory containing config.toml (default: ~/.gitops-repo).",
)
@click.option("--debug", is_flag=True, help="Log every git command that is issued.")
@click.pass_context
def cli(ctx: click.Context, config_dir: Path | None, debug: bool) -> None:
    """Clone, commit and push repository changes for GitOps workflows."""
    _configure_logging(debug)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(config_dir)


cli.add_command(config_group)
cli.add_command(is_git_url_cmd)
cli.add_command(repo_name_cmd)


def main() -> None:
    """CLI entry point used by the `gitops-repo` console script."""
    cli()
