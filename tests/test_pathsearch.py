import os

import pytest

from minish.environment import Environment
from minish.pathsearch import CommandError, find_in_path, resolve_command


@pytest.fixture
def layout(tmp_path, monkeypatch):
    bin_dir = tmp_path / "bin"
    work = tmp_path / "work"
    bin_dir.mkdir()
    work.mkdir()
    tool = bin_dir / "tool"
    tool.write_text("#!/bin/sh\n")
    os.chmod(tool, 0o755)
    plain = bin_dir / "plain"
    plain.write_text("text")
    os.chmod(plain, 0o644)
    monkeypatch.chdir(work)
    return bin_dir


def test_find_in_path(layout):
    env = Environment([f"PATH=/nonexistent:{layout}"])
    assert find_in_path("tool", env) == f"{layout}/tool"


def test_find_without_path(layout):
    assert find_in_path("tool", Environment(["HOME=/"])) is None


def test_find_missing(layout):
    env = Environment([f"PATH={layout}"])
    assert find_in_path("absent", env) is None


def test_find_existing_name_returned_as_is(layout):
    with open("local", "w") as handle:
        handle.write("x")
    env = Environment([f"PATH={layout}"])
    assert find_in_path("local", env) == "local"


def test_resolve_from_path(layout):
    env = Environment([f"PATH={layout}"])
    assert resolve_command("tool", env) == f"{layout}/tool"


def test_resolve_direct_path(layout):
    path = str(layout / "tool")
    assert resolve_command(path, Environment([])) == path


def test_resolve_directory(layout):
    with pytest.raises(CommandError) as info:
        resolve_command(str(layout), Environment([]))
    assert info.value.exit_code == 126
    assert info.value.message == "Is a directory"


def test_resolve_missing_direct(layout):
    with pytest.raises(CommandError) as info:
        resolve_command("./nope", Environment([]))
    assert info.value.exit_code == 127
    assert info.value.command == "./nope"


def test_resolve_not_executable_direct(layout):
    with pytest.raises(CommandError) as info:
        resolve_command(str(layout / "plain"), Environment([]))
    assert info.value.exit_code == 126


def test_resolve_unknown_command(layout):
    env = Environment([f"PATH={layout}"])
    with pytest.raises(CommandError) as info:
        resolve_command("absent", env)
    assert info.value.exit_code == 127
    assert str(info.value) == "minishell: absent: command not found"