"""Turning a raw command line into tokens ready to run."""

from dataclasses import dataclass, field
from typing import List

from .expand import expand_words
from .spacing import add_space
from .splitting import split_words
from .syntax import ShellSyntaxError, validate_syntax
from .textutils import trim_chars
from .tokens import Token, tokenize


@dataclass
class ParsedLine:
    """The words and tokens of one command line."""

    words: List[str] = field(default_factory=list)
    tokens: List[Token] = field(default_factory=list)
    cmds_num: int = 0


def parse(line, shell):
    """Check, split, expand and tokenize ``line`` using ``shell``'s state.

    Sets ``shell.cmds_num`` to the number of pipes and marks
    ``shell.is_empty`` when the second word is an empty quoted string.
    A syntax error sets the exit code to 258 and raises ShellSyntaxError.
    """
    try:
        text = validate_syntax(line)
    except ShellSyntaxError:
        shell.exit_code = ShellSyntaxError.exit_code
        raise
    text = add_space(trim_chars(text, " "))
    words = split_words(text)
    if len(words) > 1 and words[1] == '""':
        shell.is_empty = True
    words = expand_words(words, shell.env, shell.exit_code)
    tokens = tokenize(words)
    cmds_num = tokens[-1].index if tokens else 0
    shell.cmds_num = cmds_num
    return ParsedLine(words=words, tokens=tokens, cmds_num=cmds_num)