"""Locate an executable through the PATH environment variable."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence

from pipex.printf import printf
from pipex.text import split


def search_paths(env: Mapping[str, str]) -> list[str] | None:
    """Directories listed in PATH, empty entries dropped.

    Returns None when PATH is not set at all.
    """
    value = env.get("PATH")
    if value is None:
        return None
    return split(value, ":")


def find_path(cmdv: Sequence[str], env: Mapping[str, str]) -> str | None:
    """Return the first ``dir/cmdv[0]`` that is executable, or None.

    When PATH is not set a notice is written to standard output.
    """
    if not cmdv:
        raise ValueError("command vector is empty")
    paths = search_paths(env)
    if paths is None:
        printf("Error\nPATH env variable does not exist")
        return None
    for directory in paths:
        candidate = f"{directory}/{cmdv[0]}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None