"""Tests for FakeCommandExecutor.

These tests verify the fake implementation itself works correctly.
They ensure the test infrastructure is reliable for higher-layer tests.
"""

from pathlib import Path

import pytest

from gitops_repo.core.executor import CommandFailedError, CommandInvocation, FakeCommandExecutor


def test_records_invocations_in_order(tmp_path: Path) -> None:
    executor = FakeCommandExecutor()

    executor.execute("git", tmp_path, ["add", "--", "a.yaml"])
    executor.execute("git", tmp_path, ["push"])

    assert executor.calls == [
        CommandInvocation(program="git", cwd=tmp_path, args=("add", "--", "a.yaml")),
        CommandInvocation(program="git", cwd=tmp_path, args=("push",)),
    ]
    assert executor.last_call == CommandInvocation(program="git", cwd=tmp_path, args=("push",))


def test_last_call_is_none_before_any_execution() -> None:
    assert FakeCommandExecutor().last_call is None


def test_calls_returns_copy(tmp_path: Path) -> None:
    executor = FakeCommandExecutor()
    executor.execute("git", tmp_path, ["push"])

    executor.calls.clear()

    assert len(executor.calls) == 1


def test_programmed_exit_code_raises_and_still_records(tmp_path: Path) -> None:
    executor = FakeCommandExecutor(exit_codes={("push",): 1}, stderr="rejected")

    with pytest.raises(CommandFailedError) as exc_info:
        executor.execute("git", tmp_path, ["push"])

    assert exc_info.value.exit_code == 1
    assert exc_info.value.cmd == ("git", "push")
    assert exc_info.value.stderr == "rejected"
    assert len(executor.calls) == 1


def test_longest_prefix_wins(tmp_path: Path) -> None:
    executor = FakeCommandExecutor(exit_codes={("config",): 0, ("config", "user.name"): 128})

    executor.execute("git", tmp_path, ["config", "user.email", "bot@example.com"])
    with pytest.raises(CommandFailedError) as exc_info:
        executor.execute("git", tmp_path, ["config", "user.name", "bot"])

    assert exc_info.value.exit_code == 128


def test_unmatched_invocations_succeed(tmp_path: Path) -> None:
    executor = FakeCommandExecutor(exit_codes={("diff",): 1})

    executor.execute("git", tmp_path, ["commit", "-m", "msg"])

    assert executor.last_call is not None
    assert executor.last_call.argv == ["git", "commit", "-m", "msg"]
