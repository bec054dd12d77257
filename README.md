# minishell

This Python library holds the core pieces of a small POSIX-style shell.

## Modules

- `minishell.environment.Environment` keeps an ordered list of environment
  entries. Each entry is either `NAME=value` or a bare `NAME`.
  - `get(name)` returns the value. It returns `None` for a variable that is
    unset or that was declared without a value.
  - `index(name)` returns the entry's position, or `None` if there is none.
  - `update(name, value)` rewrites an existing entry when `name` ends in `=`.
  - `add(name, value)` updates the entry or appends a new one.
  - `append(name, suffix)` extends the current value, as `+=` does.
  - `delete(name)` removes the entry. An unknown name is ignored.
  - `visible()` lists only the entries that carry a value, which is what
    `env` prints.
- `minishell.quotes.clean_up_quotes(text)` prepares a raw command line for
  parsing:
  - it copies quoted sections unchanged;
  - it wraps `$NAME` and `$?…` references outside quotes in double quotes;
  - it drops `$*`;
  - it leaves a `$` followed by a space as it is.

  It raises `UnclosedQuoteError`, a subclass of `ValueError`, when a quote is
  never closed.
- `minishell.builtins` provides the builtin commands:
  - `echo(args, out)` supports a leading `-n`.
  - `env(shell, args, out)` returns 127 for an argument without `=`.
  - `cd(shell, args, err, print_errors=True)` handles no argument, `~`,
    `~user`, `-` and a path, and updates `OLDPWD` and `PWD`.
  - `run_builtin(shell, name, args, out=None, err=None)` dispatches to one of
    these by name.

  The module also has a `Shell` dataclass, which holds an `Environment` and an
  `exit_status`. It also has `is_builtin`, `last_index_of` and `sort_strings`.
- `minishell.textutil` provides string helpers: `compare`, `compare_upper`,
  `split`, `slice_between_char`, `slice_between_index`, `before_char`,
  `after_char` and `substr`.
- `minishell.charclass` provides character helpers: `is_alpha`, `is_digit`,
  `is_alnum`, `to_upper`, `parse_long`, `is_signed_digits` and `format_int`.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Example

```python
import sys
from minishell.environment import Environment
from minishell.quotes import clean_up_quotes
from minishell.builtins import Shell, echo, run_builtin

env = Environment(["HOME=/home/user", "PATH=/usr/bin"])
env.add("EDITOR=", "vi")
env.append("PATH=", ":/opt/bin")
print(env.get("PATH"))          # /usr/bin:/opt/bin

print(clean_up_quotes("echo $HOME 'a b'"))
# echo "$HOME" 'a b'

echo(["-n", "hello", "world"], sys.stdout)

shell = Shell(env)
status = run_builtin(shell, "env", [], sys.stdout, sys.stderr)
```

Builtins return an exit status as an integer:

- `0` means success.
- `1` means a failed `cd`.
- `127` means a bad `env` argument.

## What this package does not do

This is a library, not a shell you can run. It has:

- no command-line entry point;
- no interactive prompt;
- no command-line parser, no pipes and no redirections;
- no way to start external programs.

`is_builtin` recognises `echo`, `pwd`, `env`, `export`, `unset`, `cd` and
`exit`. However, `run_builtin` only runs `echo`, `env` and `cd`. For any other
name it raises `ValueError`.

## Running the tests

```
pytest
```