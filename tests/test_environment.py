import pytest

from minishell.environment import (
    ENV_INVALID_CHAR,
    ENV_INVALID_START,
    ENV_NO_VALUE,
    ENV_VALID,
    Environment,
    EnvVar,
    is_valid_env,
    parse_env_key,
    parse_env_value,
)


def test_parse_key_and_value():
    assert parse_env_key("PATH=/bin:/usr/bin") == "PATH"
    assert parse_env_value("PATH=/bin:/usr/bin") == "/bin:/usr/bin"


def test_parse_value_keeps_later_equals():
    assert parse_env_value("A=b=c") == "b=c"
    assert parse_env_key("A=b=c") == "A"


def test_parse_without_equals():
    assert parse_env_key("NAME") == "NAME"
    assert parse_env_value("NAME") == ""


@pytest.mark.parametrize(
    "entry, expected",
    [
        ("1ABC=x", ENV_INVALID_START),
        ("AB-C=x", ENV_INVALID_CHAR),
        ("ABC=x", ENV_VALID),
        ("ABC", ENV_NO_VALUE),
    ],
)
def test_is_valid_env(entry, expected):
    assert is_valid_env(entry) == expected


def test_envvar_joined_round_trip():
    var = EnvVar("HOME", "/home/user")
    joined = var.joined()
    assert parse_env_key(joined) == var.key
    assert parse_env_value(joined) == var.value


def test_from_strings_keeps_order():
    entries = ["B=2", "A=1", "C=3"]
    env = Environment.from_strings(entries)
    assert env.joined() == entries
    assert len(env) == 3


def test_from_strings_empty_raises():
    with pytest.raises(ValueError):
        Environment.from_strings([])


def test_get_and_contains():
    env = Environment.from_strings(["USER=alice", "HOME=/home/alice"])
    assert env.get("HOME").value == "/home/alice"
    assert env.get("MISSING") is None
    assert "USER" in env
    assert "MISSING" not in env


def test_add_appends_at_end():
    env = Environment.from_strings(["A=1"])
    env.add("Z", "26")
    assert env.joined() == ["A=1", "Z=26"]


def test_remove():
    env = Environment.from_strings(["A=1", "B=2", "C=3"])
    env.remove("B")
    assert env.joined() == ["A=1", "C=3"]
    env.remove("A")
    assert env.joined() == ["C=3"]
    env.remove("C")
    assert len(env) == 0


def test_remove_missing_or_none_is_harmless():
    env = Environment.from_strings(["A=1"])
    env.remove("NOPE")
    env.remove(None)
    assert env.joined() == ["A=1"]


def test_increment_shell_level():
    env = Environment.from_strings(["SHLVL=1"])
    env.increment_shell_level()
    assert env.get("SHLVL").value == "2"


def test_increment_shell_level_missing():
    env = Environment.from_strings(["A=1"])
    with pytest.raises(KeyError):
        env.increment_shell_level()


def test_sorted_joined():
    env = Environment.from_strings(["B=2", "A=1", "C=3"])
    assert env.sorted_joined() == ["A=1", "B=2", "C=3"]
    assert env.joined() == ["B=2", "A=1", "C=3"]


def test_iteration_yields_variables():
    env = Environment.from_strings(["X=1", "Y=2"])
    assert [var.key for var in env] == ["X", "Y"]