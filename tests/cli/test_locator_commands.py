"""Tests for the repo-name and is-git-url commands."""

from pathlib import Path

from click.testing import CliRunner

from gitops_repo.cli.cli import cli
from gitops_repo.core.config import GitClientConfig
from gitops_repo.core.context import GitOpsContext


def _ctx(tmp_path: Path) -> GitOpsContext:
    return GitOpsContext(config=GitClientConfig(temp_root=tmp_path), config_dir=tmp_path)


def test_repo_name_prints_name(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["repo-name", "git@github.com:weaveworks/eksctl.git"], obj=_ctx(tmp_path)
    )

    assert result.exit_code == 0, result.output
    assert result.output == "eksctl\n"


def test_repo_name_invalid_locator_fails(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["repo-name", "app-dev"], obj=_ctx(tmp_path))

    assert result.exit_code == 1
    assert "Error: " in result.output
    assert "Cannot determine repository name from 'app-dev'" in result.output


def test_is_git_url_true(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["is-git-url", "https://github.com/weaveworks/eksctl.git"], obj=_ctx(tmp_path)
    )

    assert result.exit_code == 0
    assert result.output == "true\n"


def test_is_git_url_false(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["is-git-url", "git@github"], obj=_ctx(tmp_path))

    assert result.exit_code == 1
    assert result.output == "false\n"


def test_context_is_created_from_config_dir(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["--config-dir", str(tmp_path), "repo-name", "https://host/org/repo.git"]
    )

    assert result.exit_code == 0, result.output
    assert result.output == "repo\n"


def test_short_help_flag(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["-h"], obj=_ctx(tmp_path))

    assert result.exit_code == 0, result.output
    assert "repo-name" in result.output
    assert "is-git-url" in result.output
