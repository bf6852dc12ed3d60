"""Syntax checks done on a raw command line before it is split."""

from .quotes import is_quote, is_special, matching_quote, skip_quotes
from .textutils import trim_chars


class ShellSyntaxError(ValueError):
    """Raised when a command line is not well formed."""

    exit_code = 258

    def __init__(self, message="syntax error"):
        super().__init__(message)


def _char(text, pos):
    return text[pos] if 0 <= pos < len(text) else ""


def _operator_end(text, pos, sign):
    """Check the operator starting at ``pos`` and return the index after it."""
    if sign == "|" and _char(text, pos + 1) == "|":
        raise ShellSyntaxError()
    if sign in "<>":
        tripled = _char(text, pos + 1) == sign and _char(text, pos + 2) == sign
        if tripled or (sign == "<" and _char(text, pos + 1) == "|"):
            raise ShellSyntaxError()
    count = 0
    while pos < len(text) and text[pos] in (sign, " "):
        if text[pos] == sign:
            count += 1
        pos += 1
    if (sign == "|" and count > 1) or count > 2:
        raise ShellSyntaxError()
    return pos


def validate_syntax(line):
    """Return ``line`` with surrounding spaces removed, or raise ShellSyntaxError."""
    text = trim_chars(line, " ")
    pos = 0
    while pos < len(text):
        char = text[pos]
        if is_quote(char):
            if _char(text, pos + 1) and not matching_quote(text, pos + 1, char):
                raise ShellSyntaxError()
            end = skip_quotes(text, pos + 1, char)
            if end is None:
                raise ShellSyntaxError()
            pos = end
        elif is_special(char):
            if text[0] == "|":
                raise ShellSyntaxError()
            pos = _operator_end(text, pos, char)
            if pos >= len(text):
                raise ShellSyntaxError()
        else:
            pos += 1
    return text