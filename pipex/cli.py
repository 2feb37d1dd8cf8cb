"""Run ``infile < cmd1 | cmd2 > outfile`` as two connected processes."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import IO, Any

from pipex.model import Model, PipexError, build_model, open_file, validate
from pipex.pathfind import find_path
from pipex.printf import printf

COMMAND_NOT_FOUND = 127
EXEC_FAILED = 1


def _report(message: str) -> None:
    sys.stderr.write(f"pipex: {message}\n")
    sys.stderr.flush()


def _spawn(
    cmdv: Sequence[str],
    env: Mapping[str, str],
    stdin: IO[Any] | int,
    stdout: IO[Any] | int,
) -> tuple[subprocess.Popen[bytes] | None, int]:
    """Start ``cmdv`` found through PATH; return the process or a failure status."""
    name = cmdv[0] if cmdv else ""
    path = find_path(cmdv, env) if cmdv else None
    if path is None:
        _report(f"{name}: command not found")
        return None, COMMAND_NOT_FOUND
    try:
        process = subprocess.Popen(
            list(cmdv),
            executable=path,
            stdin=stdin,
            stdout=stdout,
            env=dict(env),
        )
    except OSError as exc:
        sys.stderr.write(f"execv failed: {exc.strerror}\n")
        sys.stderr.flush()
        return None, EXEC_FAILED
    return process, 0


def _exit_status(returncode: int) -> int:
    # A signal-terminated process reports the signal number, as a raw wait status would.
    return -returncode if returncode < 0 else returncode


def _finish(process: subprocess.Popen[bytes] | None) -> None:
    if process is None:
        return
    if process.stdout is not None:
        process.stdout.close()
    process.wait()


def run(model: Model) -> int:
    """Run the two commands of ``model``; return the exit status of the second."""
    first_argv, second_argv = model.argvs[0], model.argvs[1]

    first: subprocess.Popen[bytes] | None = None
    try:
        infile = open_file(model.infile, for_reading=True)
    except PipexError as exc:
        _report(exc.message)
    else:
        with infile:
            first, _ = _spawn(first_argv, model.env, infile, subprocess.PIPE)

    try:
        outfile = open_file(model.outfile, for_reading=False)
    except PipexError as exc:
        _report(exc.message)
        _finish(first)
        return exc.status

    with outfile:
        upstream: IO[Any] | int
        if first is not None and first.stdout is not None:
            upstream = first.stdout
        else:
            upstream = subprocess.DEVNULL
        second, status = _spawn(second_argv, model.env, upstream, outfile)

    _finish(first)
    if second is not None:
        status = _exit_status(second.wait())
    return status


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; ``argv`` includes the program name as its first item."""
    args = list(sys.argv if argv is None else argv)
    try:
        validate(args)
    except PipexError as exc:
        printf("pipex: %s\n", exc.message)
        return exc.status
    model = build_model(args, dict(os.environ))
    return run(model)


if __name__ == "__main__":
    raise SystemExit(main())