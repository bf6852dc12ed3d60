"""Character classes and quote handling for command lines."""


def is_quote(char):
    """Return True for a single or double quote."""
    return char in ("'", '"')


def is_special(char):
    """Return True for the pipe and redirection characters."""
    return char in ("|", "<", ">")


def is_whitespace(char):
    """Return True for space, tab and newline."""
    return char in (" ", "\t", "\n")


def skip_quotes(text, start, quote):
    """Return the index just past the next ``quote`` at or after ``start``.

    Returns None when the quote is never closed.
    """
    pos = text.find(quote, start)
    if pos == -1:
        return None
    return pos + 1


def matching_quote(text, start, quote):
    """Return True if ``quote`` occurs at or after ``start``."""
    return text.find(quote, start) != -1


def trim_quote(text):
    """Remove quote pairs from ``text`` while keeping what they enclose."""
    parts = []
    pos = 0
    length = len(text)
    while pos < length:
        char = text[pos]
        if is_quote(char):
            close = text.find(char, pos + 1)
            if close == -1:
                parts.append(text[pos + 1:])
                break
            parts.append(text[pos + 1:close])
            pos = close + 1
        else:
            parts.append(char)
            pos += 1
    return "".join(parts)


def after_char(text, char):
    """Return what follows the first ``char`` in ``text``, or None."""
    index = text.find(char)
    if index == -1:
        return None
    return text[index + 1:]


def drop_first(text):
    """Return ``text`` without its first character."""
    return text[1:]