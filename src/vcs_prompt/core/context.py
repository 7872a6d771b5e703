"""Application context with dependency injection."""

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from vcs_prompt.core.config_store import ConfigStore, RealConfigStore
from vcs_prompt.core.git.abc import Git
from vcs_prompt.core.git.real import RealGit
from vcs_prompt.core.jj.abc import Jj
from vcs_prompt.core.jj.real import RealJj
from vcs_prompt.core.prompt_config import PromptConfig

# Opens a jj repository at a root, given the ancestor search depth to prefetch
JjOpener = Callable[[Path, int], Jj]


def open_real_jj(repo_root: Path, ancestor_depth: int) -> Jj:
    return RealJj(repo_root, prefetch_depth=ancestor_depth)


@dataclass(frozen=True)
class PromptContext:
    """Immutable context holding all dependencies for a prompt invocation.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime; the CLI group
    replaces it once with the resolved PromptConfig.
    """

    git: Git
    open_jj: JjOpener
    config_store: ConfigStore
    cwd: Path  # Current working directory at CLI invocation
    env: Mapping[str, str]
    config: PromptConfig = field(default_factory=PromptConfig)

    @staticmethod
    def for_test(
        jj: Jj | None = None,
        git: Git | None = None,
        config_store: ConfigStore | None = None,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> "PromptContext":
        """Create test context with optional pre-configured integration classes.

        Args:
            jj: Optional Jj implementation returned for any repo root.
                If None, creates an empty FakeJj.
            git: Optional Git implementation. If None, creates empty FakeGit.
            config_store: Optional ConfigStore. If None, uses an in-memory store
                with no config file.
            cwd: Optional current working directory. If None, uses Path("/test/default/cwd").
            env: Optional environment mapping. If None, uses an empty mapping.

        Returns:
            PromptContext configured with provided values and test defaults

        Example:
            >>> jj = FakeJj(working_copy=...)
            >>> ctx = PromptContext.for_test(jj=jj, cwd=repo_root)
            >>> result = runner.invoke(cli, ["prompt"], obj=ctx)
        """
        from vcs_prompt.core.config_store import InMemoryConfigStore
        from vcs_prompt.core.git.fake import FakeGit
        from vcs_prompt.core.jj.fake import FakeJj

        resolved_jj = jj if jj is not None else FakeJj()

        return PromptContext(
            git=git if git is not None else FakeGit(),
            open_jj=lambda _root, _depth: resolved_jj,
            config_store=config_store if config_store is not None else InMemoryConfigStore(),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
            env=env if env is not None else {},
        )


def safe_cwd() -> Path | None:
    """Get current working directory, or None if it no longer exists."""
    try:
        return Path.cwd()
    except (FileNotFoundError, OSError):
        return None


def create_context() -> PromptContext | None:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Returns:
        PromptContext with real implementations, or None if the current
        directory has been deleted
    """
    cwd = safe_cwd()
    if cwd is None:
        return None

    return PromptContext(
        git=RealGit(),
        open_jj=open_real_jj,
        config_store=RealConfigStore(),
        cwd=cwd,
        env=os.environ,
    )
