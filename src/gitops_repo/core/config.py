"""Configuration loading and saving.

Provides immutable configuration data loaded from `<config_dir>/config.toml`.

Example config:
  [git]
  program = "git"
  temp_root = "/var/tmp/gitops"
  timeout_seconds = 120
  private_ssh_key_path = "~/.ssh/deploy_key"
"""

import os
import tempfile
import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomlkit

CONFIG_FILENAME = "config.toml"
CONFIG_DIR_ENV_VAR = "GITOPS_REPO_CONFIG_DIR"
DEFAULT_GIT_PROGRAM = "git"


@dataclass(frozen=True)
class GitClientConfig:
    """Immutable configuration for building a GitClient.

    Loaded once at CLI entry point. All fields are read-only after construction.
    """

    temp_root: Path
    git_program: str = DEFAULT_GIT_PROGRAM
    timeout_seconds: float | None = None
    private_ssh_key_path: Path | None = None


def default_config() -> GitClientConfig:
    return GitClientConfig(temp_root=Path(tempfile.gettempdir()))


def default_config_dir() -> Path:
    """Directory holding config.toml, overridable via GITOPS_REPO_CONFIG_DIR."""
    env_dir = os.environ.get(CONFIG_DIR_ENV_VAR)
    if env_dir:
        return Path(env_dir).expanduser()
    return Path.home() / ".gitops-repo"


def config_path(config_dir: Path) -> Path:
    return config_dir / CONFIG_FILENAME


def load_config(config_dir: Path) -> GitClientConfig:
    """Load config.toml from the given directory if present; otherwise return defaults.

    Raises:
        ValueError: If a value has the wrong type
    """
    cfg_path = config_path(config_dir)
    if not cfg_path.exists():
        return default_config()

    data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    git = data.get("git", {})

    temp_root = git.get("temp_root")
    program = git.get("program", DEFAULT_GIT_PROGRAM)
    timeout = git.get("timeout_seconds")
    key_path = git.get("private_ssh_key_path")

    if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float))):
        raise ValueError(f"git.timeout_seconds must be a number in {cfg_path}, got {timeout!r}")
    if timeout is not None and timeout <= 0:
        raise ValueError(f"git.timeout_seconds must be positive in {cfg_path}, got {timeout}")

    if not temp_root:
        temp_root = tempfile.gettempdir()

    return GitClientConfig(
        temp_root=Path(str(temp_root)).expanduser(),
        git_program=str(program),
        timeout_seconds=float(timeout) if timeout is not None else None,
        private_ssh_key_path=Path(str(key_path)).expanduser() if key_path else None,
    )


def save_config(config_dir: Path, config: GitClientConfig) -> None:
    """Save GitClientConfig to config.toml.

    Creates the config directory if it doesn't exist. Optional fields that are
    unset are omitted.
    """
    config_dir.mkdir(parents=True, exist_ok=True)

    git = tomlkit.table()
    git["program"] = config.git_program
    git["temp_root"] = str(config.temp_root)
    if config.timeout_seconds is not None:
        git["timeout_seconds"] = config.timeout_seconds
    if config.private_ssh_key_path is not None:
        git["private_ssh_key_path"] = str(config.private_ssh_key_path)

    doc = tomlkit.document()
    doc["git"] = git

    config_path(config_dir).write_text(tomlkit.dumps(doc), encoding="utf-8")
