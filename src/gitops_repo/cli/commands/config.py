from dataclasses import replace
from pathlib import Path

import click

from gitops_repo.cli.output import error_exit, machine_output
from gitops_repo.core.config import GitClientConfig, config_path, save_config
from gitops_repo.core.context import GitOpsContext

CONFIG_KEYS = ("git_program", "temp_root", "timeout_seconds", "private_ssh_key_path")


def _format_value(config: GitClientConfig, key: str) -> str:
    match key:
        case "git_program":
            return config.git_program
        case "temp_root":
            return str(config.temp_root)
        case "timeout_seconds":
            return "" if config.timeout_seconds is None else str(config.timeout_seconds)
        case "private_ssh_key_path":
            if config.private_ssh_key_path is None:
                return ""
            return str(config.private_ssh_key_path)
        case _:
            error_exit(f"Invalid config key: {key}")


def _parse_timeout(value: str) -> float | None:
    """Parse a timeout; an empty string clears it.

    Raises:
        SystemExit: If the value is not a positive number
    """
    if value == "":
        return None
    try:
        timeout = float(value)
    except ValueError:
        error_exit(f"Invalid number for timeout_seconds: {value}")
    if timeout <= 0:
        error_exit(f"timeout_seconds must be positive: {value}")
    return timeout


def _update_config_field(config: GitClientConfig, key: str, value: str) -> GitClientConfig:
    """Return a new GitClientConfig with a single field updated.

    Raises:
        SystemExit: If the key or value is invalid
    """
    match key:
        case "git_program":
            if not value:
                error_exit("git_program cannot be empty")
            return replace(config, git_program=value)
        case "temp_root":
            if not value:
                error_exit("temp_root cannot be empty")
            return replace(config, temp_root=Path(value).expanduser().resolve())
        case "timeout_seconds":
            return replace(config, timeout_seconds=_parse_timeout(value))
        case "private_ssh_key_path":
            key_path = Path(value).expanduser() if value else None
            return replace(config, private_ssh_key_path=key_path)
        case _:
            error_exit(f"Invalid config key: {key}")


@click.group("config")
def config_group() -> None:
    """Manage gitops-repo configuration."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: GitOpsContext) -> None:
    """Print a list of configuration keys and values."""
    click.echo(click.style("Configuration:", bold=True) + f" {config_path(ctx.config_dir)}")
    for key in CONFIG_KEYS:
        click.echo(f"  {key}={_format_value(ctx.config, key)}")


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
def config_get(ctx: GitOpsContext, key: str) -> None:
    """Print the value of a given configuration key."""
    machine_output(_format_value(ctx.config, key))


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
@click.pass_obj
def config_set(ctx: GitOpsContext, key: str, value: str) -> None:
    """Set a configuration key and write config.toml."""
    new_config = _update_config_field(ctx.config, key, value)
    save_config(ctx.config_dir, new_config)
    click.echo(f"Set {key}={_format_value(new_config, key)}")
