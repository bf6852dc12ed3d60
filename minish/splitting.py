"""Splitting a spaced command line into words, keeping quotes intact."""

from .quotes import is_quote, is_whitespace, skip_quotes


def split_words(line):
    """Split ``line`` on whitespace, treating quoted sections as part of a word."""
    words = []
    length = len(line)
    pos = 0
    while pos < length:
        if is_whitespace(line[pos]):
            pos += 1
            continue
        start = pos
        while pos < length and not is_whitespace(line[pos]):
            if is_quote(line[pos]):
                end = skip_quotes(line, pos + 1, line[pos])
                pos = length if end is None else end
            else:
                pos += 1
        words.append(line[start:pos])
    return words