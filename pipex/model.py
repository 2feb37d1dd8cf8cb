"""Command-line validation, the run model and file opening."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import BinaryIO

from pipex.text import split

EXPECTED_ARGC = 5
_OUTFILE_MODE = 0o644


class PipexError(Exception):
    """A failure that ends the program with ``status`` as its exit code."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


@dataclass(frozen=True)
class Model:
    """Everything needed to run ``infile < cmd1 | cmd2 > outfile``."""

    infile: str
    outfile: str
    commands: tuple[str, ...]
    argvs: tuple[tuple[str, ...], ...]
    env: Mapping[str, str]


def validate(argv: Sequence[str]) -> None:
    """Check the command line; ``argv[0]`` is the program name.

    Raises PipexError when the argument count is wrong, a file name is
    empty, or a command is empty or starts with a space.
    """
    if len(argv) != EXPECTED_ARGC:
        raise PipexError("program should take 4 args", status=1)
    infile, cmd1, cmd2, outfile = argv[1:]
    bad_command = any(not cmd or cmd.startswith(" ") for cmd in (cmd1, cmd2))
    if bad_command or not infile or not outfile:
        raise PipexError("cmd is empty or has whitespace", status=1)


def build_model(argv: Sequence[str], env: Mapping[str, str]) -> Model:
    """Build the run model from a command line and an environment."""
    commands = tuple(argv[2:-1])
    return Model(
        infile=argv[1],
        outfile=argv[-1],
        commands=commands,
        argvs=tuple(tuple(split(cmd, " ")) for cmd in commands),
        env=env,
    )


def _create_opener(path: str, flags: int) -> int:
    return os.open(path, flags, _OUTFILE_MODE)


def open_file(name: str, for_reading: bool) -> BinaryIO:
    """Open ``name`` for reading, or create/truncate it for writing.

    A file created for writing gets mode 0644 (subject to the umask).
    Raises PipexError with status 1 when the file cannot be opened.
    """
    try:
        if for_reading:
            return open(name, "rb")
        return open(name, "wb", opener=_create_opener)
    except OSError:
        raise PipexError(f"{name}: No such file or directory", status=1) from None