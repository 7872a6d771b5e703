"""Tests for the version command."""

from pathlib import Path

from click.testing import CliRunner

from vcs_prompt.cli.cli import cli
from vcs_prompt.core.config_store import RealConfigStore
from vcs_prompt.core.context import PromptContext


def test_version_lists_backends() -> None:
    """Test that version prints the package version and the backends."""
    runner = CliRunner()

    result = runner.invoke(cli, ["version"], obj=PromptContext.for_test())

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0].startswith("vcs-prompt ")
    assert lines[1] == "backends: jj, git"


def test_version_ignores_invalid_config_file(tmp_path: Path) -> None:
    """Test that version still succeeds when the config file is invalid."""
    config_file = tmp_path / "config.toml"
    config_file.write_text("truncate_name = -4\n", encoding="utf-8")
    store = RealConfigStore(env={"VCS_PROMPT_CONFIG": str(config_file)})
    runner = CliRunner()

    result = runner.invoke(cli, ["version"], obj=PromptContext.for_test(config_store=store))

    assert result.exit_code == 0
    assert result.output.startswith("vcs-prompt ")
