"""Shell state kept between command lines."""

import os
from dataclasses import dataclass, field
from typing import Optional

from .environment import Environment
from .quotes import after_char


def is_blank(line):
    """Return True when ``line`` is empty or holds nothing but spaces."""
    return all(char == " " for char in line)


def home_from(env):
    """Return the value of HOME in ``env``, or None when it is not set."""
    index = env.find_index("HOME=")
    if index is None:
        return None
    return after_char(env[index], "=")


@dataclass
class Shell:
    """Everything the shell remembers between commands."""

    env: Environment = field(default_factory=Environment)
    exit_code: int = 0
    prev_dir: Optional[str] = None
    home: Optional[str] = None
    is_empty: bool = False
    cmds_num: int = 0

    @classmethod
    def from_environ(cls, environ=None):
        """Create a shell whose environment is a copy of ``environ``.

        ``os.environ`` is used when no mapping is given.  The home directory
        is remembered at start-up so that ``cd`` and ``cd ~`` keep working
        after HOME is unset.
        """
        env = Environment.from_mapping(os.environ if environ is None else environ)
        return cls(env=env, home=home_from(env))