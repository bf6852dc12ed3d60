"""Turning expanded words into typed tokens grouped by command."""

from dataclasses import dataclass
from enum import IntEnum


class TokenType(IntEnum):
    """Kinds of token in a command line."""

    HEREDOC = 42
    INFILE = 43
    OUTFILE = 44
    D_OUTFILE = 45
    LITERAL = 46
    PIPE = 47


_OPERATORS = {
    "<<": TokenType.HEREDOC,
    "<": TokenType.INFILE,
    ">>": TokenType.D_OUTFILE,
    ">": TokenType.OUTFILE,
    "|": TokenType.PIPE,
}


@dataclass(frozen=True)
class Token:
    """A token and the number of the command it belongs to."""

    index: int
    type: TokenType
    value: str


def token_type(word):
    """Return the token type that ``word`` stands for."""
    return _OPERATORS.get(word, TokenType.LITERAL)


def tokenize(words):
    """Turn words into tokens.

    Redirections take the following word as their value.  Each pipe starts a
    new command, so the last token's index is the number of pipes; a pipe
    straight after another pipe is kept as a literal word.
    """
    tokens = []
    index = 0
    pos = 0
    while pos < len(words):
        word = words[pos]
        kind = token_type(word)
        if kind is TokenType.PIPE:
            if pos > 0 and words[pos - 1] == "|":
                kind = TokenType.LITERAL
            else:
                index += 1
        if kind in (TokenType.PIPE, TokenType.LITERAL):
            tokens.append(Token(index, kind, word))
            pos += 1
        else:
            if pos + 1 >= len(words):
                raise ValueError(f"missing file name after {word!r}")
            tokens.append(Token(index, kind, words[pos + 1]))
            pos += 2
    return tokens


def _values(tokens, index, kind):
    return [token.value for token in tokens if token.index == index and token.type is kind]


def command_args(tokens, index):
    """Return the argument words of command number ``index``."""
    return _values(tokens, index, TokenType.LITERAL)


def heredoc_limiters(tokens, index):
    """Return the here-document limiters of command number ``index``."""
    return _values(tokens, index, TokenType.HEREDOC)