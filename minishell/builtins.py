"""Built-in commands: echo, env and cd, and the dispatch between them."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import TextIO

from .environment import Environment

BUILTIN_NAMES = frozenset({"echo", "pwd", "env", "export", "unset", "cd", "exit"})


@dataclass
class Shell:
    """State shared by the built-ins: the environment and the last exit status."""

    env: Environment = field(default_factory=Environment)
    exit_status: int = 0


def is_builtin(name: str) -> bool:
    """Return True if ``name`` is one of the shell's built-in commands."""
    return name in BUILTIN_NAMES


def last_index_of(text: str, char: str) -> int:
    """Return the index of the last ``char`` in ``text``, or -1 if absent."""
    return text.rfind(char)


def sort_strings(items: Iterable[str]) -> list[str]:
    """Return the strings in ascending code-point order."""
    return sorted(items)


def echo(args: Sequence[str] | None, out: TextIO) -> int:
    """Write the arguments separated by spaces; a leading ``-n`` drops the newline."""
    if not args:
        out.write("\n")
        return 0
    newline = args[0] != "-n"
    words = args if newline else args[1:]
    out.write(" ".join(words))
    if newline:
        out.write("\n")
    return 0


def _display_env(shell: Shell, out: TextIO) -> None:
    for entry in shell.env.visible():
        out.write(entry + "\n")


def env(shell: Shell, args: Sequence[str] | None, out: TextIO) -> int:
    """Print the environment followed by any ``NAME=value`` arguments.

    An argument without ``=`` is reported as a missing file and gives 127.
    """
    if not args:
        _display_env(shell, out)
        return 0
    for arg in args:
        if "=" not in arg:
            out.write(f"env: \u2018{arg}\u2019: No such file or directory\n")
            return 127
    _display_env(shell, out)
    for arg in args:
        out.write(arg + "\n")
    return 0


def _current_dir() -> str | None:
    try:
        return os.getcwd()
    except OSError:
        return None


def _record_move(shell: Shell, previous: str) -> int:
    if shell.env.update("OLDPWD=", previous) is None:
        return 1
    current = _current_dir()
    if current is None:
        return 1
    if shell.env.update("PWD=", current) is None:
        return 1
    return 0


def _report_cd_failure(target: str | None, shown: str | None, err: TextIO) -> None:
    label = shown or ""
    if target is not None and os.path.isfile(target):
        err.write(f"minishell: cd: {label}: Not a directory\n")
    else:
        err.write(f"minishell: cd: {label}: No such file or directory\n")


def _change_dir(
    shell: Shell, target: str | None, shown: str | None, err: TextIO, print_errors: bool
) -> int:
    previous = _current_dir()
    if previous is None:
        return 1
    try:
        if target is None:
            raise FileNotFoundError("no target directory")
        os.chdir(target)
    except OSError:
        if print_errors:
            _report_cd_failure(target, shown, err)
        return 1
    return _record_move(shell, previous)


def cd(
    shell: Shell, args: Sequence[str] | None, err: TextIO, print_errors: bool = True
) -> int:
    """Change the working directory and record ``OLDPWD`` and ``PWD``.

    No argument or ``~`` goes to ``$HOME``, ``~user`` to ``/home/user`` and
    ``-`` to ``$OLDPWD``. Returns 0 on success and 1 on failure.
    """
    if args and len(args) > 1:
        if print_errors:
            err.write("minishell: cd: too many arguments\n")
        return 1
    if not args or args[0] == "~":
        return _change_dir(shell, shell.env.get("HOME"), None, err, print_errors)
    arg = args[0]
    if arg.startswith("~"):
        target: str | None = "/home/" + arg[1:]
    elif arg == "-":
        target = shell.env.get("OLDPWD")
    else:
        target = arg
    return _change_dir(shell, target, arg, err, print_errors)


def run_builtin(
    shell: Shell,
    name: str,
    args: Sequence[str] | None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Run the built-in ``name`` with ``args`` and return its exit status.

    Raises ValueError for a name that has no runner in this module.
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    runners: dict[str, Callable[[], int]] = {
        "echo": lambda: echo(args, out),
        "env": lambda: env(shell, args, out),
        "cd": lambda: cd(shell, args, err, True),
    }
    try:
        runner = runners[name]
    except KeyError:
        raise ValueError(f"no runner for built-in {name!r}") from None
    return runner()