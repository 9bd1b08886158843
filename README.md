# minishell

The building blocks of a small Unix-style shell, as a Python library.

## What is inside

- `minishell.textutil` holds the string helpers.
  - `atoi` parses a leading integer in the C way.
  - `is_number` accepts an optional `-` followed by digits.
  - `split` splits on one character and drops empty pieces.
  - `trim` strips a set of characters from both ends.
  - `skip_space` and `skip_space_newline` return the next non-blank position.
- `minishell.linereader` provides `LineReader`.
  - It reads a text stream one line at a time through a fixed-size buffer. The default buffer size is 32.
  - `read_line` returns a line without its newline, or `None` at end of input.
  - The reader can also be iterated.
- `minishell.printf_convert` and `minishell.printf_format` do printf-style formatting.
  - Conversions: `%c %s %p %d %i %u %x %X %o` and `%%`.
  - Flags: `-`, `0`, width, `.precision` and `*`.
  - `FormatFlags` holds the flags of one conversion.
  - The `pad_*` functions format a single value.
  - `parse_flags` and `convert` handle one specification.
  - `format_string` returns the formatted text.
  - `printf` writes the text to a stream and returns the number of characters written.
- `minishell.environment` holds the shell environment.
  - `EnvVar` is one variable, and `Environment` is an ordered collection of them.
  - `Environment.from_strings` builds one from `KEY=value` strings and raises `ValueError` when given none.
  - Its methods are `get`, `add`, `remove`, `increment_shell_level` (for `SHLVL`), `joined` and `sorted_joined`.
  - The helpers are `parse_env_key`, `parse_env_value` and `is_valid_env`.
- `minishell.builtins` holds the builtins and `ShellState`, the state they act on.
  - The builtins are `echo`, `cd`, `pwd`, `env_builtin`, `export`, `unset` and `exit_builtin`.
  - Each builtin writes to the stream it is given, or to standard output or standard error.
- `minishell.executor` turns a token list into commands and runs them.
  - Its names are `TokenType`, `Token`, `Redirection`, `Command`, `build_commands`, `heredoc_body` and `execute`.
  - Commands joined by a pipe run concurrently.
  - `>`, `>>`, `<` and `<<` are handled. Only the first redirection after a command's words applies.
  - `echo`, `pwd` and `env` run inside the process, in a thread.
  - `cd` runs without changing the caller's directory or variables.
  - Other programs run with an empty environment. A name with no `/` is run from the current directory and is not looked up in `PATH`.
  - `execute` returns the exit status of every command. Builtins report 0.

## Examples

Formatting:

```python
from minishell.printf_format import format_string

format_string("%5d|%-4s|%x", 42, "ab", 255)   # "   42|ab  |ff"
```

Environment handling:

```python
from minishell.environment import Environment

env = Environment.from_strings(["PATH=/usr/bin:/bin", "SHLVL=1"])
env.increment_shell_level()
env.get("SHLVL").value      # "2"
env.add("EDITOR", "vi")
env.sorted_joined()         # ["EDITOR=vi", "PATH=/usr/bin:/bin", "SHLVL=2"]
```

Reading lines:

```python
import io
from minishell.linereader import LineReader

for line in LineReader(io.StringIO("one\ntwo\n"), 32):
    print(line)
```

Builtins write to the stream you pass them:

```python
import sys
from minishell.builtins import echo

echo(["echo", "-n", "hello", "world"], sys.stdout)   # prints "hello world", no newline
```

Running a pipeline from tokens:

```python
from minishell.environment import Environment
from minishell.executor import Token, TokenType, execute

env = Environment.from_strings(["HOME=/tmp"])
execute(
    [
        Token("echo", TokenType.CMD),
        Token("hi", TokenType.ARG),
        Token(">", TokenType.SIMPLE_REDIR_RIGHT),
        Token("out.txt", TokenType.ARG),
    ],
    env,
)
```

## What it does not do

This package has no interactive prompt and installs no command. It has no parser that turns a typed command line into `Token` objects; callers build the token list themselves. `export`, `unset` and `exit_builtin` are not run by `execute`; call them directly.

## Requirements

Python 3.10 or later. There are no third-party dependencies. The tests use pytest, which the `test` extra installs.