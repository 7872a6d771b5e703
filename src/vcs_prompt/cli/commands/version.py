"""Version command implementation."""

from importlib.metadata import PackageNotFoundError, version

import click

from vcs_prompt.cli.output import machine_output

PACKAGE_NAME = "vcs-prompt"
BACKENDS = ("jj", "git")


def package_version() -> str:
    try:
        return version(PACKAGE_NAME)
    except PackageNotFoundError:
        return "unknown"


@click.command("version")
def version_cmd() -> None:
    """Print version and supported backends."""
    machine_output(f"{PACKAGE_NAME} {package_version()}")
    machine_output(f"backends: {', '.join(BACKENDS)}")
