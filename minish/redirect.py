"""File redirections and here-documents for a single command."""

import os
from dataclasses import dataclass
from typing import Optional

from .expand import expand_line
from .tokens import TokenType, heredoc_limiters

_FILE_MODE = 0o664
_OUTPUT_FLAGS = {
    TokenType.OUTFILE: os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
    TokenType.D_OUTFILE: os.O_WRONLY | os.O_CREAT | os.O_APPEND,
}


class RedirectError(Exception):
    """Raised when a redirection file cannot be opened."""

    exit_code = 1

    def __init__(self, filename, reason):
        super().__init__(f"minishell: {filename}: {reason}")
        self.filename = filename
        self.reason = reason


@dataclass
class Redirections:
    """Where a command reads from and writes to.

    ``infile`` and ``outfile`` are the last files named for the command;
    ``append`` tells whether the output file is opened for appending, and
    ``heredoc`` whether the command reads a here-document.
    """

    infile: Optional[str] = None
    outfile: Optional[str] = None
    append: bool = False
    heredoc: bool = False


def _resolve(directory, name):
    if directory is None:
        return name
    return os.path.join(os.fspath(directory), name)


def _touch(name, path, flags):
    try:
        fd = os.open(path, flags, _FILE_MODE)
    except OSError as exc:
        raise RedirectError(name, exc.strerror or str(exc)) from exc
    os.close(fd)


def resolve_redirections(tokens, index, directory=None):
    """Open every redirection of command ``index`` in order.

    Output files are created (or truncated for ``>``) as they are met, and
    the first file that cannot be opened stops the walk with RedirectError.
    Relative names are taken from ``directory`` when one is given.
    """
    result = Redirections(heredoc=bool(heredoc_limiters(tokens, index)))
    for token in tokens:
        if token.index != index:
            continue
        if token.type is TokenType.INFILE:
            path = _resolve(directory, token.value)
            _touch(token.value, path, os.O_RDONLY)
            result.infile = path
        elif token.type in _OUTPUT_FLAGS:
            path = _resolve(directory, token.value)
            _touch(token.value, path, _OUTPUT_FLAGS[token.type])
            result.outfile = path
            result.append = token.type is TokenType.D_OUTFILE
    return result


def collect_heredoc(lines, limiters, env, exit_code):
    """Read here-document text from ``lines``.

    Every limiter but the last only has to be passed; the text between the
    second-to-last and the last limiter is kept, with ``$`` references
    expanded.  Reading stops at the last limiter or when ``lines`` runs out
    (or yields None).
    """
    if not limiters:
        return ""
    last = len(limiters) - 1
    current = 0
    kept = []
    for line in lines:
        if line is None:
            break
        if line == limiters[current]:
            if current == last:
                break
            current += 1
            continue
        if current == last:
            kept.append(expand_line(line, env, exit_code) + "\n")
    return "".join(kept)