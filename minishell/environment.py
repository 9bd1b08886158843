"""Shell environment: an ordered list of KEY=VALUE variables."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from minishell.textutil import atoi

ENV_INVALID_START = 0
"""Name starts with a digit."""
ENV_INVALID_CHAR = -1
"""Name contains a character that is not a letter or a digit."""
ENV_VALID = 1
"""Well-formed ``NAME=value`` entry."""
ENV_NO_VALUE = 2
"""Well-formed name with no ``=`` after it."""


def parse_env_key(entry: str) -> str:
    """Return the part of ``entry`` before the first ``=`` (all of it if there is none)."""
    return entry.partition("=")[0]


def parse_env_value(entry: str) -> str:
    """Return the part of ``entry`` after the first ``=`` (empty if there is none)."""
    return entry.partition("=")[2]


def is_valid_env(name: str) -> int:
    """Classify an assignment such as ``NAME=value``.

    Returns one of ``ENV_INVALID_START``, ``ENV_INVALID_CHAR``, ``ENV_VALID``
    or ``ENV_NO_VALUE``.
    """
    if name[:1].isdigit() and name[:1].isascii():
        return ENV_INVALID_START
    key, sep, _ = name.partition("=")
    if any(not (ch.isascii() and ch.isalnum()) for ch in key):
        return ENV_INVALID_CHAR
    return ENV_VALID if sep else ENV_NO_VALUE


@dataclass
class EnvVar:
    """One environment variable."""

    key: str
    value: str

    def joined(self) -> str:
        """Return the variable as ``KEY=VALUE``."""
        return f"{self.key}={self.value}"


class Environment:
    """Ordered collection of environment variables, in insertion order."""

    def __init__(self, variables: Iterable[EnvVar] = ()) -> None:
        self._vars: list[EnvVar] = list(variables)

    @classmethod
    def from_strings(cls, entries: Iterable[str]) -> Environment:
        """Build an environment from ``KEY=VALUE`` strings.

        Raises ``ValueError`` when there is no entry at all.
        """
        variables = [EnvVar(parse_env_key(e), parse_env_value(e)) for e in entries]
        if not variables:
            raise ValueError("Better to have ENV to start a shell, right ?")
        return cls(variables)

    def get(self, key: str) -> EnvVar | None:
        """Return the first variable named ``key``, or ``None``."""
        return next((var for var in self._vars if var.key == key), None)

    def add(self, key: str, value: str) -> EnvVar:
        """Append a new variable at the end and return it."""
        var = EnvVar(key, value)
        self._vars.append(var)
        return var

    def remove(self, key: str | None) -> None:
        """Remove the first variable named ``key``; nothing happens if it is absent."""
        if key is None:
            return
        for index, var in enumerate(self._vars):
            if var.key == key:
                del self._vars[index]
                return

    def increment_shell_level(self) -> None:
        """Add one to ``SHLVL``; raises ``KeyError`` when it is not set."""
        shlvl = self.get("SHLVL")
        if shlvl is None:
            raise KeyError("SHLVL")
        shlvl.value = str(atoi(shlvl.value) + 1)

    def joined(self) -> list[str]:
        """Return every variable as ``KEY=VALUE``, in order."""
        return [var.joined() for var in self._vars]

    def sorted_joined(self) -> list[str]:
        """Return every variable as ``KEY=VALUE``, sorted by character code."""
        return sorted(self.joined())

    def __iter__(self) -> Iterator[EnvVar]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def __contains__(self, key: object) -> bool:
        return any(var.key == key for var in self._vars)