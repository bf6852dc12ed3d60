import pytest

from minish.environment import DECLARE_PREFIX, Environment, bump_shlvl


@pytest.fixture
def env():
    return Environment(["HOME=/home/user", "USER=alice", "EMPTY=", "BARE"])


def test_lookup_finds_value(env):
    assert env.lookup("HOME") == "/home/user"
    assert env.lookup("USER") == "alice"


def test_lookup_missing_is_none(env):
    assert env.lookup("NOPE") is None


def test_lookup_empty_value(env):
    assert env.lookup("EMPTY") == ""


def test_from_mapping_round_trip():
    mapping = {"A": "1", "PATH": "/bin:/usr/bin"}
    env = Environment.from_mapping(mapping)
    assert {name: env.lookup(name) for name in mapping} == mapping
    assert len(env) == 2


def test_find_index(env):
    assert env.find_index("USER=") == 1
    assert env.find_index("MISSING=") is None


def test_replace_keeps_position(env):
    env.replace_or_add("USER=bob")
    assert env.as_list()[1] == "USER=bob"
    assert len(env) == 4


def test_add_appends(env):
    env.replace_or_add("NEW=value")
    assert env.as_list()[-1] == "NEW=value"
    assert len(env) == 5


def test_bare_name_does_not_replace_assignment():
    env = Environment(["A=1"])
    env.replace_or_add("A")
    assert env.as_list() == ["A=1", "A"]


def test_assignment_replaces_bare_name():
    env = Environment(["FOO"])
    env.replace_or_add("FOO=1")
    assert env.as_list() == ["FOO=1"]


def test_remove(env):
    env.remove("USER")
    assert env.lookup("USER") is None
    assert len(env) == 3


def test_remove_bare_entry(env):
    env.remove("BARE")
    assert "BARE" not in env.as_list()


def test_remove_missing_is_noop(env):
    before = env.as_list()
    env.remove("NOPE")
    assert env.as_list() == before


def test_remove_does_not_match_prefix():
    env = Environment(["HOMEDIR=/x", "HOME=/y"])
    env.remove("HOME")
    assert env.as_list() == ["HOMEDIR=/x"]


def test_sorted_declarations(env):
    lines = env.sorted_declarations()
    assert all(line.startswith(DECLARE_PREFIX) for line in lines)
    stripped = [line[len(DECLARE_PREFIX):] for line in lines]
    assert stripped == sorted(env.as_list())
    assert len(lines) == len(env)


def test_printable_skips_bare_names(env):
    assert env.printable() == ["HOME=/home/user", "USER=alice", "EMPTY="]


def test_as_list_is_a_copy(env):
    copy = env.as_list()
    copy.append("X=1")
    assert env.lookup("X") is None


def test_bump_shlvl():
    assert bump_shlvl(["A=1", "SHLVL=1"]) == ["A=1", "SHLVL=2"]


def test_bump_shlvl_non_numeric():
    assert bump_shlvl(["SHLVL=abc"]) == ["SHLVL=1"]


def test_bump_shlvl_absent_unchanged():
    entries = ["A=1", "B=2"]
    assert bump_shlvl(entries) == entries


def test_bump_shlvl_does_not_mutate_input():
    entries = ["SHLVL=3"]
    bump_shlvl(entries)
    assert entries == ["SHLVL=3"]