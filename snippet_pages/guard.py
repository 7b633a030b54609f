"""Detect builds triggered by the generator's own output commits.

CI pushes the regenerated page back to the repository with a commit message
such as ``Travis build: 1234``. That push triggers CI again; the guard spots
it and lets the build exit successfully before touching any file.

Examples
--------
>>> from snippet_pages.config import GuardConfig
>>> from snippet_pages.guard import should_skip_build
>>> env = {"CI": "true", "TRAVIS": "true", "TRAVIS_COMMIT_MESSAGE": "Travis build: 42"}
>>> should_skip_build(env, GuardConfig())
True
>>> should_skip_build({"TRAVIS_COMMIT_MESSAGE": "Travis build: 42"}, GuardConfig())
False
"""

from __future__ import annotations

import re
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import GuardConfig


def is_ci_environment(
    env: cabc.Mapping[str, str], ci_env_vars: cabc.Iterable[str]
) -> bool:
    """Return ``True`` when every variable in ``ci_env_vars`` is set."""
    names = list(ci_env_vars)
    return bool(names) and all(name in env for name in names)


def is_build_commit(message: str | None, pattern: str) -> bool:
    """Return ``True`` when ``message`` starts like an automated build commit."""
    if not message:
        return False
    return re.match(pattern, message) is not None


def should_skip_build(env: cabc.Mapping[str, str], guard: GuardConfig) -> bool:
    """Decide whether the current run was triggered by a build commit.

    Parameters
    ----------
    env : Mapping[str, str]
        Environment variables of the running process.
    guard : GuardConfig
        CI variable names, commit-message variable, and build commit pattern.

    Returns
    -------
    bool
        ``True`` when running under CI and the commit message matches.
    """
    if not is_ci_environment(env, guard.ci_env_vars):
        return False
    return is_build_commit(env.get(guard.message_env_var), guard.build_commit_pattern)


__all__ = ["is_build_commit", "is_ci_environment", "should_skip_build"]
