"""Tests for config.toml loading and saving."""

import tempfile
from pathlib import Path

import pytest

from gitops_repo.core.config import GitClientConfig, load_config, save_config


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == GitClientConfig(temp_root=Path(tempfile.gettempdir()))
    assert config.git_program == "git"
    assert config.timeout_seconds is None
    assert config.private_ssh_key_path is None


def test_loads_all_fields(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text(
        "[git]\n"
        'program = "/opt/git/bin/git"\n'
        f'temp_root = "{tmp_path / "work"}"\n'
        "timeout_seconds = 90\n"
        f'private_ssh_key_path = "{tmp_path / "id_rsa"}"\n',
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config == GitClientConfig(
        temp_root=tmp_path / "work",
        git_program="/opt/git/bin/git",
        timeout_seconds=90.0,
        private_ssh_key_path=tmp_path / "id_rsa",
    )


def test_partial_file_falls_back_to_defaults(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text('[git]\nprogram = "git2"\n', encoding="utf-8")

    config = load_config(tmp_path)

    assert config.git_program == "git2"
    assert config.temp_root == Path(tempfile.gettempdir())


def test_tilde_is_expanded(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text(
        '[git]\nprivate_ssh_key_path = "~/.ssh/deploy"\n', encoding="utf-8"
    )

    config = load_config(tmp_path)

    assert config.private_ssh_key_path == Path.home() / ".ssh" / "deploy"


@pytest.mark.parametrize("value", ['"soon"', "true", "0", "-5"])
def test_invalid_timeout_is_rejected(tmp_path: Path, value: str) -> None:
    (tmp_path / "config.toml").write_text(f"[git]\ntimeout_seconds = {value}\n", encoding="utf-8")

    with pytest.raises(ValueError, match="timeout_seconds"):
        load_config(tmp_path)


def test_save_then_load_preserves_values(tmp_path: Path) -> None:
    config_dir = tmp_path / "nested" / "config"
    config = GitClientConfig(
        temp_root=tmp_path / "work",
        git_program="git",
        timeout_seconds=30.0,
        private_ssh_key_path=tmp_path / "key",
    )

    save_config(config_dir, config)

    assert load_config(config_dir) == config


def test_save_omits_unset_optional_fields(tmp_path: Path) -> None:
    save_config(tmp_path, GitClientConfig(temp_root=tmp_path))

    content = (tmp_path / "config.toml").read_text(encoding="utf-8")
    assert "timeout_seconds" not in content
    assert "private_ssh_key_path" not in content
    assert "[git]" in content
