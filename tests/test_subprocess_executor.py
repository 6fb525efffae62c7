"""Tests for the subprocess executor (infra/subprocess_executor.py).

All tests mock :func:`subprocess.run`; no process is spawned.
"""

from __future__ import annotations

import os
import subprocess
from unittest.mock import MagicMock, patch

import pytest

from adc.exceptions import ChildLaunchError
from adc.infra.subprocess_executor import SubprocessExecutor

RUN = "adc.infra.subprocess_executor.subprocess.run"


def _completed(code: int) -> subprocess.CompletedProcess[bytes]:
    return subprocess.CompletedProcess(args=[], returncode=code)


class TestRun:
    @patch(RUN)
    def test_invokes_program_with_args(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(0)
        code = SubprocessExecutor().run("git", ("clone", "u", "d"))

        assert code == 0
        assert mock_run.call_args.args[0] == ["git", "clone", "u", "d"]
        assert mock_run.call_args.kwargs["check"] is False

    @patch(RUN)
    def test_overlay_is_applied_to_child_env_only(
        self, mock_run: MagicMock, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("ADC_TEST_MARKER", "kept")
        monkeypatch.delenv("GIT_SSH_COMMAND", raising=False)
        mock_run.return_value = _completed(0)

        SubprocessExecutor().run("git", ("clone", "u"), env={"GIT_SSH_COMMAND": "ssh -i k"})

        child_env = mock_run.call_args.kwargs["env"]
        assert child_env["GIT_SSH_COMMAND"] == "ssh -i k"
        assert child_env["ADC_TEST_MARKER"] == "kept"
        assert "GIT_SSH_COMMAND" not in os.environ

    @patch(RUN)
    def test_overlay_replaces_inherited_value(
        self, mock_run: MagicMock, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("GIT_SSH_COMMAND", "ssh -i other")
        mock_run.return_value = _completed(0)

        SubprocessExecutor().run("git", ("clone", "u"), env={"GIT_SSH_COMMAND": "ssh -i k"})

        assert mock_run.call_args.kwargs["env"]["GIT_SSH_COMMAND"] == "ssh -i k"
        assert os.environ["GIT_SSH_COMMAND"] == "ssh -i other"

    @patch(RUN)
    def test_nonzero_exit_code_is_returned(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(128)
        assert SubprocessExecutor().run("git", ("clone", "u")) == 128

    @patch(RUN)
    def test_signal_termination_returns_none(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(-9)
        assert SubprocessExecutor().run("git", ("clone", "u")) is None

    @patch(RUN, side_effect=FileNotFoundError(2, "No such file or directory", "git"))
    def test_missing_executable_raises_launch_error(self, _mock_run: MagicMock) -> None:
        with pytest.raises(ChildLaunchError, match="No such file") as exc_info:
            SubprocessExecutor().run("git", ("clone", "u"))
        assert exc_info.value.hint is not None
        assert "adc doctor" in exc_info.value.hint

    @patch(RUN, side_effect=PermissionError(13, "Permission denied"))
    def test_permission_denied_raises_launch_error(self, _mock_run: MagicMock) -> None:
        with pytest.raises(ChildLaunchError, match="Permission denied"):
            SubprocessExecutor().run("git", ("clone", "u"))
