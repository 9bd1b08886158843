"""Commands the shell runs itself: echo, cd, pwd, env, export, unset and exit."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TextIO

from minishell.environment import Environment
from minishell.textutil import atoi, is_number


@dataclass
class ShellState:
    """State shared by the shell loop and the built-in commands."""

    env: Environment = field(default_factory=Environment)
    secret_env: Environment = field(default_factory=Environment)
    should_exit: bool = False
    ret: int = 0


def _stream(stream: TextIO | None, default: TextIO) -> TextIO:
    return default if stream is None else stream


def echo(args: Sequence[str], out: TextIO | None = None) -> int:
    """Print the arguments after ``args[0]``; leading ``-n`` options drop the newline."""
    out = _stream(out, sys.stdout)
    words = list(args[1:])
    newline = True
    while words and words[0] == "-n":
        newline = False
        words.pop(0)
    for index, word in enumerate(words):
        out.write(word)
        if index + 1 < len(words) and word:
            out.write(" ")
    if newline:
        out.write("\n")
    return 0


def _remember_cwd(env: Environment) -> None:
    try:
        cwd = os.getcwd()
    except OSError:
        return
    oldpwd = env.get("OLDPWD")
    if oldpwd is None:
        env.add("OLDPWD", cwd)
    else:
        oldpwd.value = cwd


def _change_dir(path: str) -> int:
    try:
        os.chdir(path)
    except OSError:
        return 1
    return 0


def cd(args: Sequence[str], env: Environment, err: TextIO | None = None) -> int:
    """Change directory; with no argument go to ``HOME``, with ``-`` to ``OLDPWD``."""
    err = _stream(err, sys.stderr)
    if len(args) < 2:
        _remember_cwd(env)
        home = env.get("HOME")
        if home is None:
            err.write("minishell : cd: HOME not set\n")
            return 1
        return _change_dir(home.value)
    if args[1] == "-":
        oldpwd = env.get("OLDPWD")
        if oldpwd is None:
            err.write("minishell : cd: OLDPWD not set\n")
            return 1
        target = oldpwd.value
        _remember_cwd(env)
        return _change_dir(target)
    _remember_cwd(env)
    try:
        os.chdir(args[1])
    except OSError as exc:
        if len(args) > 2:
            err.write("cd: string not in pwd: ")
        else:
            err.write(f"cd: {exc.strerror}: ")
        err.write(f"{args[1]}\n")
        return 1
    return 0


def pwd(out: TextIO | None = None) -> int:
    """Print the current working directory."""
    out = _stream(out, sys.stdout)
    try:
        cwd = os.getcwd()
    except OSError:
        return 1
    out.write(cwd + "\n")
    return 0


def env_builtin(env: Environment, out: TextIO | None = None) -> int:
    """Print every variable as ``KEY=VALUE``, in order."""
    out = _stream(out, sys.stdout)
    for line in env.joined():
        out.write(line + "\n")
    return 0


def export(env: Environment, out: TextIO | None = None) -> int:
    """Print every variable, sorted, as ``declare -x KEY=VALUE``."""
    out = _stream(out, sys.stdout)
    for line in env.sorted_joined():
        out.write("declare -x " + line + "\n")
    return 0


def unset(key: str | None, env: Environment) -> int:
    """Remove the variable named ``key``."""
    env.remove(key)
    return 0


def exit_builtin(state: ShellState, args: Sequence[str], err: TextIO | None = None) -> int:
    """Ask the shell to stop and set its return value from ``args[1]``."""
    err = _stream(err, sys.stderr)
    state.should_exit = True
    err.write("exit ")
    err.write("❤️\n" if len(args) > 1 else "💚\n")
    if len(args) > 2:
        state.ret = 1
        err.write("minishell: exit: too many arguments\n")
    elif len(args) > 1 and not is_number(args[1]):
        state.ret = 255
        err.write(f"minishell: exit: {args[1]}: numeric argument required\n")
    elif len(args) > 1:
        state.ret = atoi(args[1])
    else:
        state.ret = 0
    return state.ret