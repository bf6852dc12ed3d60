"""Expansion of ``$NAME`` and ``$?`` in command words."""

from .quotes import after_char, drop_first, trim_quote

_NAME_STOPS = (" ", '"')
_REPLACE_STOPS = (" ", '"', "'")


def _scan(text, start, stops):
    end = start
    while end < len(text) and text[end] not in stops:
        end += 1
    return end


def find_variable(text):
    """Return the name following the first ``$`` in ``text``.

    The name runs up to a space, a double quote or the end of the text.
    Without a ``$`` the result is empty.
    """
    dollar = text.find("$")
    if dollar == -1:
        return ""
    start = dollar + 1
    return text[start:_scan(text, start, _NAME_STOPS)]


def replace_variable(text, replacement):
    """Replace the first ``$word`` in ``text`` with ``replacement``.

    The replaced part runs from the ``$`` up to a space, a quote or the end.
    """
    dollar = text.find("$")
    if dollar == -1:
        dollar = len(text)
    end = _scan(text, dollar, _REPLACE_STOPS)
    return text[:dollar] + replacement + text[end:]


def _lookup_value(env, name):
    index = env.find_index(name + "=")
    if index is None:
        return None
    return after_char(env[index], "=")


def _unknown_variable(text, dollar):
    following = text[dollar + 1:dollar + 2]
    if following in ("", " "):
        return text
    if dollar > 0 and following == '"' and text[dollar - 1] == '"':
        return text
    if following == "'":
        return drop_first(text)
    return replace_variable(text, "")


def expand_once(text, env, exit_code):
    """Expand the first ``$`` reference in ``text``."""
    dollar = text.find("$")
    if dollar == -1:
        return text
    if text[dollar + 1:dollar + 2] == "?":
        return text[:dollar] + str(exit_code) + text[dollar + 2:]
    value = _lookup_value(env, find_variable(text))
    if value is not None:
        return replace_variable(text, value)
    return _unknown_variable(text, dollar)


def expanded_all(text, env):
    """Return True when the first ``$`` in ``text`` names no set variable."""
    if "$" not in text:
        return True
    return env.find_index(find_variable(text) + "=") is None


def expand_line(line, env, exit_code):
    """Expand references in ``line`` until none that can be expanded remain."""
    while "$" in line:
        line = expand_once(line, env, exit_code)
        if expanded_all(line, env):
            break
    return line


def expand_words(words, env, exit_code):
    """Expand each word, leaving single-quoted words alone, then drop quotes."""
    result = []
    for word in words:
        while "$" in word and not word.startswith("'"):
            word = expand_once(word, env, exit_code)
            if expanded_all(word, env):
                break
        result.append(trim_quote(word))
    return result