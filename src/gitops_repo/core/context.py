"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from gitops_repo.core.config import GitClientConfig, default_config_dir, load_config
from gitops_repo.core.executor.abc import CommandExecutor
from gitops_repo.core.executor.real import RealCommandExecutor
from gitops_repo.core.git.client import GitClient


def ssh_command_env(private_ssh_key_path: Path | None) -> dict[str, str]:
    """Environment that makes git authenticate over SSH with the given key."""
    if private_ssh_key_path is None:
        return {}
    return {"GIT_SSH_COMMAND": f"ssh -i {private_ssh_key_path} -o IdentitiesOnly=yes"}


def create_executor(config: GitClientConfig) -> CommandExecutor:
    return RealCommandExecutor(
        env=ssh_command_env(config.private_ssh_key_path),
        timeout=config.timeout_seconds,
    )


def create_git_client(
    config: GitClientConfig,
    executor: CommandExecutor | None = None,
) -> GitClient:
    """Build a GitClient from configuration.

    Args:
        config: Loaded configuration
        executor: Executor to use instead of a RealCommandExecutor (tests)
    """
    if executor is None:
        executor = create_executor(config)
    return GitClient(executor, temp_root=config.temp_root, git_program=config.git_program)


@dataclass(frozen=True)
class GitOpsContext:
    """Immutable context holding configuration for CLI commands.

    Created at CLI entry point and threaded through commands via click.
    """

    config: GitClientConfig
    config_dir: Path

    def git_client(self, executor: CommandExecutor | None = None) -> GitClient:
        return create_git_client(self.config, executor)


def create_context(config_dir: Path | None = None) -> GitOpsContext:
    if config_dir is None:
        config_dir = default_config_dir()
    return GitOpsContext(config=load_config(config_dir), config_dir=config_dir)
