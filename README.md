# sbsh

sbsh is a small command shell. It has an interactive mode and a batch mode.
It can run several commands at the same time and send a command's output to a
file with `>`. It finds programs on a search path that you set yourself.

## Installing

```
pip install .
```

## Running

To start an interactive session:

```
sbsh
```

A cyan `sbsh::$ ` prompt appears. Type a command and press Enter. To leave,
press Ctrl-D or type `exit`.

To run the commands in a file one line at a time, with no prompt:

```
sbsh commands.txt
```

The file is read as UTF-8. sbsh accepts at most one argument. It prints an
error and exits with status 1 in these cases:

- it gets more than one argument (`only accepts 0 or 1 arguments`)
- the file cannot be opened (`fopen failed`)
- reading the input fails (`read_line failed`)

At the end of the input, or after `exit`, it exits with status 0.

## Command syntax

- Words are separated by whitespace. Trailing `\n` and `\r` are removed from
  each line.
- `>` sends a command's standard output to a file, for example
  `ls -l > listing.txt`.
  - The file is created, or truncated if it exists, with mode `0644`.
  - `>` is always a token of its own, so `ls>out.txt` works too.
  - A command can have only one `>`, and exactly one file name must follow it.
- `&` separates commands that run at the same time, for example
  `sleep 1 & ls & echo done`. Empty segments are ignored. sbsh waits for all
  the programs it started before it reads the next line.

## Built-in commands

| Command          | Effect                                                              |
|------------------|---------------------------------------------------------------------|
| `exit`           | Leaves the shell. It takes no arguments.                            |
| `cd DIR`         | Changes the working directory. It takes exactly one argument.       |
| `path [DIR ...]` | Sets the search path to the given directories. With no arguments the path is emptied, and then only built-ins work. |

The search path starts as `/bin`. sbsh runs a program from the first directory
in the path that holds an executable file with that name. A path entry that
contains colons is split at them.

## Errors

Each error is reported on standard error as one line, and the shell goes on to
the next command:

| Message                      | Cause                                              |
|------------------------------|----------------------------------------------------|
| `bad exit command`           | `exit` was given arguments                         |
| `specify a directory for cd` | `cd` was not given exactly one argument            |
| `directory does not exist`   | `cd` could not change to the directory             |
| `redirection failed`         | the command has more than one `>`                  |
| `bad redirection`            | `>` is not followed by exactly one file name       |
| `bad path`                   | the search path is empty                           |
| `command does not exist`     | no executable was found on the path                |
| `failed to open file`        | the redirection target could not be opened         |
| `execv failed`               | the program could not be started                   |

## Using it from Python

The package has four modules:

- `sbsh.parser`
  - `tokenize_command(cmd_str)` splits one command into a list of tokens.
  - `tokenize_input(line)` splits a line at `&` into a list of `Command`
    objects. Each `Command` has a `tokens` tuple and can be iterated and
    measured with `len()`.
- `sbsh.executor`
  - `Shell(path)` holds the search path. The path can be a string or an
    iterable of strings, and defaults to `("/bin",)`.
  - `Shell.find_executable(name)` returns the first executable `dir/name` on
    the path, or `None`.
  - `Shell.execute(command)` runs one command. A built-in returns `None`. For a
    program, it starts the program and returns the `subprocess.Popen` without
    waiting for it. On an error it raises `ShellError`, and the `exit`
    built-in raises `ExitShell`.
  - `Shell.run_line(line)` runs every command on a line, waits for them, and
    returns their exit codes. It prints `ShellError` messages to standard
    error.
- `sbsh.colors`
  - `colorize(text, TextColor.CYAN)` wraps text in an ANSI colour sequence
    followed by the reset sequence.
  - `TextColor` lists the available colours, each in a normal and a bold form.
- `sbsh.cli`
  - `main(argv=None)` is the command-line entry point. It returns the exit
    status.
  - `read_lines(stream, interactive)` yields the input lines.
  - `prompt(stream)` writes the prompt.

```python
from sbsh.parser import tokenize_input
from sbsh.executor import Shell, ExitShell

commands = tokenize_input("ls -l > out.txt & echo hi")
print([command.tokens for command in commands])
# [('ls', '-l', '>', 'out.txt'), ('echo', 'hi')]

shell = Shell("/bin:/usr/bin")
try:
    codes = shell.run_line("echo hello > greeting.txt")
except ExitShell:
    pass
```

## What it does not do

sbsh is deliberately minimal. It has none of the following:

- pipes (`|`)
- input redirection (`<`)
- appending (`>>`)
- quoting or escaping
- variables or environment expansion
- globbing
- job control
- command history or line editing

Programs are looked up only on the shell's own search path, not on `PATH`.

## Running the tests

```
pip install ".[test]"
pytest
```