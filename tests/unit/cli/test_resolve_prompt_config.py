"""Tests for merging CLI options with config file settings."""

from vcs_prompt.cli.config import CliOptions, resolve_prompt_config
from vcs_prompt.core.config_store import DisplaySettings, FileConfig
from vcs_prompt.core.prompt_config import DisplayFlags, PromptConfig


def test_defaults_without_flags_or_file() -> None:
    """Test that built-in defaults apply when nothing is configured."""
    config = resolve_prompt_config(CliOptions(), FileConfig(), no_color_env=False)

    assert config == PromptConfig()


def test_flag_beats_file_beats_default() -> None:
    """Test that each value comes from the highest-precedence source that sets it."""
    # Arrange
    options = CliOptions(truncate_name=8)
    file_config = FileConfig(truncate_name=20, id_length=4)

    # Act
    config = resolve_prompt_config(options, file_config, no_color_env=False)

    # Assert
    assert config.truncate_name == 8
    assert config.id_length == 4
    assert config.ancestor_bookmark_depth == PromptConfig().ancestor_bookmark_depth


def test_zero_flag_overrides_file_value() -> None:
    """An explicit 0 is a value, not a missing flag."""
    options = CliOptions(ancestor_bookmark_depth=0)
    file_config = FileConfig(ancestor_bookmark_depth=7)

    config = resolve_prompt_config(options, file_config, no_color_env=False)

    assert config.ancestor_bookmark_depth == 0


def test_cli_strip_prefixes_replace_file_prefixes() -> None:
    """Test that CLI prefixes replace, rather than extend, the file's list."""
    options = CliOptions(strip_bookmark_prefix=("cli/",))
    file_config = FileConfig(strip_bookmark_prefix=("file/",))

    config = resolve_prompt_config(options, file_config, no_color_env=False)

    assert config.strip_bookmark_prefix == ("cli/",)


def test_file_strip_prefixes_used_without_flag() -> None:
    """Test that file prefixes apply when no flag is given."""
    file_config = FileConfig(strip_bookmark_prefix=("file/",))

    config = resolve_prompt_config(CliOptions(), file_config, no_color_env=False)

    assert config.strip_bookmark_prefix == ("file/",)


def test_no_symbol_blanks_both_symbols() -> None:
    """Test that --no-symbol wins over an explicit symbol."""
    options = CliOptions(no_symbol=True, jj_symbol="J ")

    config = resolve_prompt_config(options, FileConfig(), no_color_env=False)

    assert (config.jj_symbol, config.git_symbol) == ("", "")


def test_custom_symbols() -> None:
    """Test that symbols come from flag and file independently."""
    options = CliOptions(jj_symbol="jj ")
    file_config = FileConfig(git_symbol="git ")

    config = resolve_prompt_config(options, file_config, no_color_env=False)

    assert (config.jj_symbol, config.git_symbol) == ("jj ", "git ")


def test_no_color_env_disables_color_for_both_models() -> None:
    """Test that NO_COLOR turns off color for jj and git."""
    config = resolve_prompt_config(CliOptions(), FileConfig(), no_color_env=True)

    assert config.jj_display.show_color is False
    assert config.git_display.show_color is False


def test_hide_switches_combine_flag_and_file() -> None:
    """Test that a segment is hidden when either source hides it."""
    # Arrange
    options = CliOptions(no_jj_id=True, no_git_status=True)
    file_config = FileConfig(
        jj=DisplaySettings(status=False, name=True),
        git=DisplaySettings(prefix=False),
    )

    # Act
    config = resolve_prompt_config(options, file_config, no_color_env=False)

    # Assert
    assert config.jj_display == DisplayFlags(show_id=False, show_status=False)
    assert config.git_display == DisplayFlags(show_prefix=False, show_status=False)


def test_file_cannot_unhide_flagged_segment() -> None:
    """Test that a file setting of true does not re-enable a hidden segment."""
    options = CliOptions(no_jj_name=True)
    file_config = FileConfig(jj=DisplaySettings(name=True))

    config = resolve_prompt_config(options, file_config, no_color_env=False)

    assert config.jj_display.show_name is False


def test_no_prefix_color_only_affects_jj() -> None:
    """Test that --no-prefix-color leaves git display flags untouched."""
    options = CliOptions(no_prefix_color=True)

    config = resolve_prompt_config(options, FileConfig(), no_color_env=False)

    assert config.jj_display.show_prefix_color is False
    assert config.git_display.show_prefix_color is True
