"""Turning a token list into commands and running them as a pipeline."""

from __future__ import annotations

import os
import subprocess
import sys
import tempfile
import threading
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TextIO

from minishell.builtins import cd, echo, env_builtin, pwd
from minishell.environment import Environment, EnvVar

MAX_ARGS = 50
"""Size of a command's argument table; one slot is kept for the terminator."""


class TokenType(IntEnum):
    """Kind of a token produced by the parser."""

    SIMPLE_REDIR_LEFT = 0
    SIMPLE_REDIR_RIGHT = 1
    DOUBLE_REDIR_LEFT = 2
    DOUBLE_REDIR_RIGHT = 3
    PIPELINE = 4
    NEW_VARIABLE = 5
    VARIABLE = 6
    CMD = 7
    ARG = 8
    HEREDOC_DELIMITER = 9
    SIMPLE_QUOTE = 10


@dataclass
class Token:
    """One word of a command line together with its kind."""

    text: str
    type: TokenType
    heredoc_eof: str | None = None


@dataclass(frozen=True)
class Redirection:
    """A redirection operator and the word that follows it."""

    kind: TokenType
    target: str


@dataclass
class Command:
    """A program with its arguments, an optional redirection and its pipe flag."""

    args: list[str] = field(default_factory=list)
    redirection: Redirection | None = None
    pipe_to_next: bool = False


_REDIRECTIONS = frozenset(
    {
        TokenType.SIMPLE_REDIR_LEFT,
        TokenType.SIMPLE_REDIR_RIGHT,
        TokenType.DOUBLE_REDIR_LEFT,
        TokenType.DOUBLE_REDIR_RIGHT,
    }
)
_ARG_STOPS = _REDIRECTIONS | {TokenType.PIPELINE}
_INPUT_KINDS = frozenset({TokenType.SIMPLE_REDIR_LEFT, TokenType.DOUBLE_REDIR_LEFT})
_OUTPUT_FLAGS = {
    TokenType.SIMPLE_REDIR_RIGHT: os.O_WRONLY | os.O_TRUNC | os.O_CREAT,
    TokenType.DOUBLE_REDIR_RIGHT: os.O_WRONLY | os.O_APPEND | os.O_CREAT,
}
_FILE_MODE = 0o660


def build_commands(tokens: Iterable[Token]) -> list[Command]:
    """Group tokens into commands.

    Each command token collects the following words up to a pipe or a
    redirection, at most ``MAX_ARGS - 1`` words in all. Only the first
    redirection after the words is attached. Tokens that do not belong to a
    command are ignored. Raises ``ValueError`` when a redirection has no word
    after it.
    """
    queue = deque(tokens)
    commands: list[Command] = []
    while queue:
        token = queue.popleft()
        if token.type != TokenType.CMD:
            continue
        args = [token.text]
        while queue and queue[0].type not in _ARG_STOPS and len(args) < MAX_ARGS - 1:
            args.append(queue.popleft().text)
        redirection = None
        if queue and queue[0].type in _REDIRECTIONS:
            kind = queue.popleft().type
            if not queue:
                raise ValueError("syntax error: missing word after redirection")
            redirection = Redirection(kind, queue.popleft().text)
        pipe_to_next = bool(queue) and queue[0].type == TokenType.PIPELINE
        commands.append(Command(args, redirection, pipe_to_next))
    return commands


def heredoc_body(text: str) -> str:
    """Return the input a here-document feeds to its command.

    ``text`` holds the delimiter on its first non-empty line followed by the
    lines typed; lines are kept up to the first one equal to the delimiter.
    Empty lines are dropped.
    """
    lines = [line for line in text.split("\n") if line]
    if not lines:
        return ""
    end_word, *rest = lines
    body: list[str] = []
    for line in rest:
        if line == end_word:
            break
        body.append(line + "\n")
    return "".join(body)


def _heredoc_fd(text: str) -> int:
    with tempfile.TemporaryFile() as handle:
        handle.write(heredoc_body(text).encode())
        handle.flush()
        handle.seek(0)
        return os.dup(handle.fileno())


def _open_redirection(redirection: Redirection) -> tuple[int | None, int | None]:
    """Open the file of a redirection; returns ``(input_fd, output_fd)``."""
    try:
        if redirection.kind in _OUTPUT_FLAGS:
            flags = _OUTPUT_FLAGS[redirection.kind]
            return None, os.open(redirection.target, flags, _FILE_MODE)
        if redirection.kind == TokenType.SIMPLE_REDIR_LEFT:
            return os.open(redirection.target, os.O_RDONLY), None
        return _heredoc_fd(redirection.target), None
    except OSError as exc:
        sys.stderr.write(f"minishell: {redirection.target}: {exc.strerror}\n")
        sys.stderr.flush()
        return None, None


@dataclass
class _Running:
    thread: threading.Thread | None = None
    process: subprocess.Popen | None = None
    code: int = 0

    def wait(self) -> int:
        if self.thread is not None:
            self.thread.join()
        if self.process is not None:
            return self.process.wait()
        return self.code


def _run_in_thread(job: Callable[[TextIO], object], out_fd: int | None) -> threading.Thread:
    """Run ``job`` on a text stream over a private copy of ``out_fd`` (stdout by default)."""
    fd = os.dup(1 if out_fd is None else out_fd)

    def target() -> None:
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as stream:
                job(stream)
        except BrokenPipeError:
            pass

    thread = threading.Thread(target=target, daemon=True)
    thread.start()
    return thread


_STREAM_BUILTINS: dict[str, Callable[[list[str], Environment, TextIO], object]] = {
    "echo": lambda args, env, out: echo(args, out),
    "pwd": lambda args, env, out: pwd(out),
    "env": lambda args, env, out: env_builtin(env, out),
}


def _run_cd(args: list[str], env: Environment) -> _Running:
    """Run ``cd`` without letting it change the shell's own directory or variables."""
    saved = os.getcwd()
    scratch = Environment(EnvVar(var.key, var.value) for var in env)
    try:
        cd(args, scratch, sys.stderr)
    finally:
        os.chdir(saved)
    return _Running(code=0)


def _launch(
    command: Command, env: Environment, stdin_fd: int | None, stdout_fd: int | None
) -> _Running:
    name = command.args[0]
    builtin = _STREAM_BUILTINS.get(name)
    if builtin is not None:
        args = list(command.args)
        return _Running(thread=_run_in_thread(lambda out: builtin(args, env, out), stdout_fd))
    if name == "cd":
        return _run_cd(list(command.args), env)
    path = name if "/" in name else os.path.join(".", name)
    try:
        process = subprocess.Popen(
            command.args, executable=path, env={}, stdin=stdin_fd, stdout=stdout_fd
        )
    except OSError as exc:
        sys.stderr.write(f"execve: {exc.strerror}\n")
        sys.stderr.flush()
        message = f"Commande non trouvée [{name}]\n"
        return _Running(thread=_run_in_thread(lambda out: out.write(message), stdout_fd), code=1)
    return _Running(process=process)


def execute(tokens: Iterable[Token], env: Environment) -> list[int]:
    """Run the commands described by ``tokens`` and wait for all of them.

    Commands joined by a pipe run concurrently. External programs get an
    empty environment and are not looked up in ``PATH``. Returns the exit
    status of every command, in order; built-in commands always report 0.
    """
    sys.stdout.flush()
    sys.stderr.flush()
    running: list[_Running] = []
    prev_read: int | None = None
    for command in build_commands(tokens):
        stdin_fd = prev_read
        redirect_out = None
        if command.redirection is not None:
            in_fd, redirect_out = _open_redirection(command.redirection)
            if command.redirection.kind in _INPUT_KINDS:
                if prev_read is not None:
                    os.close(prev_read)
                stdin_fd = in_fd
        read_end, write_end = os.pipe()
        stdout_fd = write_end if command.pipe_to_next else redirect_out
        try:
            running.append(_launch(command, env, stdin_fd, stdout_fd))
        finally:
            os.close(write_end)
            for fd in (stdin_fd, redirect_out):
                if fd is not None:
                    os.close(fd)
        prev_read = read_end
    if prev_read is not None:
        os.close(prev_read)
    return [job.wait() for job in running]