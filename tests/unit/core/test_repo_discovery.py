"""Tests for repository discovery."""

from pathlib import Path

from vcs_prompt.core.repo_discovery import DetectResult, RepoType, detect_repo, in_repo
from tests.test_utils.repo_setup import make_git_repo, make_jj_repo


def test_detects_jj_repo_from_subdirectory(tmp_path: Path) -> None:
    """Test that the jj root is found from a nested directory."""
    # Arrange
    root = make_jj_repo(tmp_path / "repo")
    nested = root / "src" / "pkg"
    nested.mkdir(parents=True)

    # Act
    result = detect_repo(nested)

    # Assert
    assert result == DetectResult(repo_type=RepoType.JJ, repo_root=root.resolve())


def test_colocated_repo_is_treated_as_jj(tmp_path: Path) -> None:
    """Test that .jj next to .git is reported as colocated jj."""
    root = make_jj_repo(tmp_path / "repo", colocated=True)

    result = detect_repo(root)

    assert result.repo_type is RepoType.JJ_COLOCATED
    assert result.repo_type.is_jj


def test_detects_git_repo(tmp_path: Path) -> None:
    """Test that a .git directory is reported as git."""
    root = make_git_repo(tmp_path / "repo")

    result = detect_repo(root)

    assert result == DetectResult(repo_type=RepoType.GIT, repo_root=root.resolve())
    assert not result.repo_type.is_jj


def test_git_worktree_file_counts_as_git(tmp_path: Path) -> None:
    """Linked worktrees have a .git file instead of a directory."""
    root = tmp_path / "worktree"
    root.mkdir()
    (root / ".git").write_text("gitdir: /elsewhere/.git/worktrees/wt\n", encoding="utf-8")

    assert detect_repo(root).repo_type is RepoType.GIT


def test_nearest_repo_wins(tmp_path: Path) -> None:
    """Test that a git repo nested inside a jj repo is reported as git."""
    make_jj_repo(tmp_path / "outer")
    inner = make_git_repo(tmp_path / "outer" / "vendor" / "lib")

    result = detect_repo(inner)

    assert result.repo_type is RepoType.GIT
    assert result.repo_root == inner.resolve()


def test_plain_directory_is_not_a_repo(tmp_path: Path) -> None:
    """Test that a directory outside any repo is NONE."""
    plain = tmp_path / "plain"
    plain.mkdir()

    # tmp_path itself is never inside a repository
    assert detect_repo(plain) == DetectResult(repo_type=RepoType.NONE, repo_root=None)
    assert in_repo(plain) is False


def test_missing_directory_is_not_a_repo(tmp_path: Path) -> None:
    """Test that a nonexistent start path is NONE."""
    assert detect_repo(tmp_path / "does-not-exist").repo_type is RepoType.NONE


def test_in_repo(tmp_path: Path) -> None:
    """Test that in_repo() is true inside a repo."""
    assert in_repo(make_jj_repo(tmp_path / "repo")) is True
