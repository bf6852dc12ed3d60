import pytest

from minish.syntax import ShellSyntaxError, validate_syntax


def test_trims_surrounding_spaces():
    assert validate_syntax("  ls -l  ") == "ls -l"


@pytest.mark.parametrize(
    "line",
    [
        "cat < in | wc > out",
        "echo 'a | b'",
        "cat << EOF",
        "echo a >> b",
        'echo "x" | grep x',
        "ls",
    ],
)
def test_valid_lines_pass_through(line):
    assert validate_syntax(line) == line


@pytest.mark.parametrize(
    "line",
    [
        "| ls",
        "ls |",
        "ls || wc",
        "ls | | wc",
        "cat <<< x",
        "cat <| x",
        "echo 'unclosed",
        'echo "x',
        "ls >",
        "cat <",
        "a > > > b",
    ],
)
def test_invalid_lines_raise(line):
    with pytest.raises(ShellSyntaxError):
        validate_syntax(line)


def test_error_carries_exit_code():
    with pytest.raises(ShellSyntaxError) as info:
        validate_syntax("ls |")
    assert info.value.exit_code == 258
    assert str(info.value) == "syntax error"


def test_empty_line_is_valid():
    assert validate_syntax("   ") == ""