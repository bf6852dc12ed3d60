"""Insertion of spaces around pipe and redirection operators."""

from .quotes import is_quote, is_special, is_whitespace, skip_quotes


class UnclosedQuoteError(ValueError):
    """Raised when a quote in the command line is never closed."""


def _check_quotes(line):
    length = len(line)
    pos = 0
    while pos < length:
        while pos < length and is_whitespace(line[pos]):
            pos += 1
        if pos < length and is_quote(line[pos]):
            end = skip_quotes(line, pos + 1, line[pos])
            if end is None:
                raise UnclosedQuoteError(f"unclosed quote in: {line}")
            pos = end
        if pos < length and line[pos] != '"':
            pos += 1


def add_space(line):
    """Return ``line`` with operators separated from their neighbours by spaces.

    Quoted sections are copied unchanged.
    """
    _check_quotes(line)
    length = len(line)
    parts = []
    pos = 0
    while pos < length:
        if is_quote(line[pos]):
            close = line.find(line[pos], pos + 1)
            stop = length if close == -1 else close + 1
            parts.append(line[pos:stop])
            pos = stop
            if pos < length and is_quote(line[pos]):
                continue
        if pos < length and is_special(line[pos]):
            sign = line[pos]
            if pos > 0 and line[pos - 1] != " ":
                parts.append(" ")
            end = pos
            while end < length and line[end] == sign:
                end += 1
            parts.append(line[pos:end])
            pos = end
            if pos >= length or line[pos] != " ":
                parts.append(" ")
        elif pos < length:
            parts.append(line[pos])
            pos += 1
    return "".join(parts)