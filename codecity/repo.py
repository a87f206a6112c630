"""Thin helpers for opening a repo and producing the log the parser reads."""

from __future__ import annotations

import logging
from pathlib import Path

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

logger = logging.getLogger(__name__)

# All branches, per-file numstat, short dates, "--<hash>--<date>--<author>"
# headers and no rename detection: a renamed file is two separate entities.
GIT_LOG_ARGS: tuple[str, ...] = (
    "--all",
    "--numstat",
    "--date=short",
    "--pretty=format:--%h--%ad--%aN",
    "--no-renames",
)


def open_repo(path: str | Path = ".") -> Repo:
    """Open a git repository at *path* (or any of its parents)."""
    try:
        repo = Repo(str(path), search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        raise ValueError(f"No git repository found at or above: {path}")
    return repo


def git_log_command() -> str:
    """Return the git command line whose output :mod:`codecity.parser` understands."""
    return " ".join(["git", "log", *GIT_LOG_ARGS])


def get_log_text(repo: Repo) -> str:
    """Run ``git log`` with :data:`GIT_LOG_ARGS` in *repo* and return its output.

    A failing git invocation raises :class:`git.GitCommandError`; there is
    no retry.
    """
    logger.debug("Running %s in %s", git_log_command(), repo.working_dir)
    return repo.git.log(*GIT_LOG_ARGS)
