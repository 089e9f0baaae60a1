"""Tests for runner data models."""

from __future__ import annotations

import dataclasses

import pytest

from yake.runners import CommandResult


def _result(**overrides: object) -> CommandResult:
    fields: dict[str, object] = {
        "command": "echo hi",
        "returncode": 0,
        "stdout": "hi\n",
        "stderr": "",
        "duration_ms": 5,
    }
    fields.update(overrides)
    return CommandResult(**fields)  # type: ignore[arg-type]


class TestCommandResult:
    """Tests for CommandResult."""

    def test_success(self) -> None:
        assert _result().success is True
        assert _result(returncode=1).success is False

    def test_lines_split_without_terminators(self) -> None:
        result = _result(stdout="a\nb\r\nc", stderr="")

        assert result.stdout_lines == ["a", "b", "c"]
        assert result.stderr_lines == []

    def test_carriage_return_stays_in_line(self) -> None:
        result = _result(stdout="10%\r50%\r100%\ndone\n", stderr="warn\x0bing\n")

        assert result.stdout_lines == ["10%\r50%\r100%", "done"]
        assert result.stderr_lines == ["warn\x0bing"]

    def test_blank_lines_are_kept(self) -> None:
        assert _result(stdout="a\n\nb\n").stdout_lines == ["a", "", "b"]

    def test_empty_output(self) -> None:
        assert _result(stdout="").stdout_lines == []

    def test_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            _result().returncode = 2  # type: ignore[misc]
