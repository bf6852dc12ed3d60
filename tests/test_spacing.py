import pytest

from minish.spacing import UnclosedQuoteError, add_space


def test_pipe_gets_spaces():
    assert add_space("ls|wc") == "ls | wc"


def test_redirection_gets_spaces():
    assert add_space("echo hi>out") == "echo hi > out"


def test_double_operator_kept_together():
    assert add_space("cat<<EOF") == "cat << EOF"


def test_already_spaced_line_unchanged():
    line = "cat < in | wc > out"
    assert add_space(line) == line


def test_quoted_operator_untouched():
    line = "echo '|'"
    assert add_space(line) == line


def test_double_quoted_operator_untouched():
    line = 'echo "a>b"'
    assert add_space(line) == line


def test_idempotent():
    once = add_space("a|b>c")
    assert add_space(once) == once


def test_non_space_characters_preserved():
    line = "a|b>>c<d"
    result = add_space(line)
    assert result.replace(" ", "") == line


@pytest.mark.parametrize("line", ["echo 'abc", 'echo "abc'])
def test_unclosed_quote_raises(line):
    with pytest.raises(UnclosedQuoteError):
        add_space(line)