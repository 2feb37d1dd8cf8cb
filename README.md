# pipex

`pipex` runs two commands connected by a pipe. The first command reads from
an input file. The second command writes to an output file. It behaves like
this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

The same entry point can also be started with `python -m pipex.cli`.

For example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

This writes to `count.txt` the number of lines in `input.txt` that contain
`error`.

`pipex` takes exactly four arguments. Each command is split on spaces, and
empty fields are dropped. No shell quoting is applied. The program is looked
up in the directories listed in `PATH`, and the first executable match is
used. The output file is created with mode `0644`, subject to the umask. If it
already exists, it is truncated.

### Exit status and errors

- **Bad arguments.** `pipex` exits with status 1 when:
  - the argument count is not four;
  - a file name is empty;
  - a command is empty or starts with a space.

  Before exiting it prints `pipex: program should take 4 args` or
  `pipex: cmd is empty or has whitespace` to standard output.
- **Input file cannot be opened.** `pipex: <infile>: No such file or directory`
  goes to standard error. The first command does not run. The second command
  still runs, with empty input.
- **Output file cannot be opened.** The same kind of message goes to standard
  error. The second command does not run, and the exit status is 1.
- **Command not found.** If a command is not found on `PATH`,
  `pipex: <cmd>: command not found` goes to standard error. If `PATH` is not
  set at all, `Error` followed by `PATH env variable does not exist` is written
  to standard output. When this happens to the second command, the exit status
  is 127.
- **Command cannot be started.** If a command is found but cannot be started,
  `execv failed: <reason>` goes to standard error. When this happens to the
  second command, the exit status is 1.
- **Otherwise.** The exit status is that of the second command. If the second
  command is killed by a signal, the exit status is the signal number.

## Library use

The pieces can also be used from Python:

```python
from pipex.model import build_model, validate
from pipex.cli import run

argv = ["pipex", "in.txt", "cat", "wc -l", "out.txt"]
validate(argv)  # raises pipex.model.PipexError on bad input
model = build_model(argv, {"PATH": "/usr/bin:/bin"})
status = run(model)
```

- `pipex.model`: `validate`, `build_model`, the `Model` dataclass, `open_file`,
  and `PipexError`. `PipexError` carries `message` and `status`.
- `pipex.pathfind`: `search_paths(env)` lists the `PATH` directories.
  `find_path(cmdv, env)` returns the first executable `dir/cmdv[0]`, or `None`.
- `pipex.printf`: `render(fmt, *args)` and `printf(fmt, *args, stream=None)`.
  Both handle the `%c %s %p %d %i %u %x %X %%` conversions, with 32-bit
  integer wrapping.
- `pipex.text`: string helpers with C-string semantics. A NUL character ends
  the string. The helpers are `split`, `atoi`, `itoa`, `trim`, `substr`,
  `strncmp`, `strnstr`, `find_char`, `rfind_char` and `map_indexed`.
- `pipex.chars`: ASCII classification and case conversion. The functions are
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and
  `to_lower`.

## What it does not do

`pipex` runs exactly two commands. It does not chain more commands, read a
here-document, append to the output file, or interpret shell quoting,
globbing or variables in command strings.

## Running the tests

```sh
pip install -e ".[test]"
pytest
```