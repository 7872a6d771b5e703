"""Output utilities for CLI commands with clear intent.

machine_output writes the text a shell consumes. Diagnostics never go to
stdout; they go through logging, which is off unless VCS_PROMPT_DEBUG is set.
"""

import click


def machine_output(message: str, *, nl: bool = True) -> None:
    """Write a result to stdout for the calling shell.

    ANSI codes are kept even though stdout is a pipe under command
    substitution; color is already decided by the resolved PromptConfig.
    """
    click.echo(message, nl=nl, color=True)
