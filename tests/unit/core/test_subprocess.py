"""Tests for subprocess wrapper with rich error context."""

import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from vcs_prompt.core.subprocess import run_subprocess_with_context


def test_success_case_returns_completed_process() -> None:
    """Test that successful subprocess execution returns CompletedProcess."""
    with patch("vcs_prompt.core.subprocess.subprocess.run") as mock_run:
        mock_result = Mock(spec=subprocess.CompletedProcess)
        mock_result.stdout = "ok"
        mock_run.return_value = mock_result

        result = run_subprocess_with_context(
            ["jj", "log"],
            operation_context="read working-copy commit",
            cwd=Path("/repo"),
        )

        assert result == mock_result
        mock_run.assert_called_once_with(
            ["jj", "log"],
            cwd=Path("/repo"),
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
        )


def test_failure_with_stderr_includes_stderr_in_error() -> None:
    """Test that subprocess failure with stderr includes stderr in error message."""
    with patch("vcs_prompt.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.CalledProcessError(
            returncode=1,
            cmd=["jj", "log"],
            stderr="Error: There is no jj repo in \".\"\n",
        )

        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(["jj", "log"], operation_context="read ancestor commits")

        error_message = str(exc_info.value)
        assert "Failed to read ancestor commits" in error_message
        assert "Command: jj log" in error_message
        assert "Exit code: 1" in error_message
        assert 'stderr: Error: There is no jj repo in "."' in error_message


def test_failure_without_stderr_omits_stderr_line() -> None:
    """Test that blank stderr is left out of the error message."""
    with patch("vcs_prompt.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.CalledProcessError(
            returncode=128, cmd=["git", "status"], stderr="   "
        )

        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(["git", "status"], operation_context="read git status")

        assert "Exit code: 128" in str(exc_info.value)
        assert "stderr" not in str(exc_info.value)


def test_missing_binary_raises_runtime_error() -> None:
    """Test that a missing jj or git binary is reported like any other failure."""
    with patch("vcs_prompt.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = FileNotFoundError("jj")

        with pytest.raises(RuntimeError, match="Command not found while trying to list tags: jj"):
            run_subprocess_with_context(["jj", "tag", "list"], operation_context="list tags")
