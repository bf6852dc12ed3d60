"""Small string helpers shared by the parser and the environment code."""

_ATOI_SPACE = " \t\n\v\f\r"


def atoi(text):
    """Parse a leading integer the way the shell does for numeric arguments.

    Leading whitespace is skipped, then any run of sign characters.  More
    than one sign yields 0; otherwise the digits that follow are read and
    anything after them is ignored.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _ATOI_SPACE:
        pos += 1
    negatives = 0
    signs = 0
    while pos < length and text[pos] in "+-":
        if text[pos] == "-":
            negatives += 1
        signs += 1
        pos += 1
    if signs > 1:
        return 0
    result = 0
    while pos < length and text[pos].isascii() and text[pos].isdigit():
        result = result * 10 + int(text[pos])
        pos += 1
    return -result if negatives == 1 else result


def key_length(entry, sep):
    """Return the position of ``sep`` in ``entry``.

    When ``sep`` is missing the index of the last character is returned,
    and entries of at most one character give 0.
    """
    if len(entry) <= 1:
        return 0
    index = entry.find(sep)
    return index if index != -1 else len(entry) - 1


def split_nonempty(text, sep):
    """Split ``text`` on ``sep`` and drop the empty pieces."""
    return [piece for piece in text.split(sep) if piece]


def trim_chars(text, chars):
    """Strip every character in ``chars`` from both ends of ``text``."""
    return text.strip(chars)