"""Commands the shell runs itself instead of starting a program."""

import os
import sys
from enum import Enum

from .textutils import atoi, key_length

NOT_VALID_IDENTIFIER = "not a valid identifier"


class Builtin(Enum):
    """The built-in commands."""

    EXIT = 0
    PWD = 1
    CD = 2
    ECHO = 3
    EXPORT = 4
    UNSET = 5
    ENV = 6


class ShellExit(Exception):
    """Raised by ``exit`` to end the shell with ``code``."""

    def __init__(self, code):
        super().__init__(code)
        self.code = code

    @property
    def status(self):
        """The process exit status the code maps to."""
        return self.code & 0xFF


def _streams(out, err):
    return (sys.stdout if out is None else out, sys.stderr if err is None else err)


def _error(err, message, code):
    err.write(message + "\n")
    return code


def _is_alpha(char):
    return char.isascii() and char.isalpha()


def _is_digit(char):
    return char.isascii() and char.isdigit()


def _getenv(environment, name):
    """Return the value of the first entry whose key matches ``name``."""
    for entry in environment:
        width = key_length(entry, "=")
        if entry[:width] == name[:width]:
            return entry[width + 1:]
    return None


def _current_dir():
    try:
        return os.getcwd()
    except OSError:
        return None


def _update_pwd(environment):
    environment.replace_or_add("PWD=" + (_current_dir() or ""))


def builtin_kind(command):
    """Return the Builtin that ``command`` names, or None."""
    if command == "exit":
        return Builtin.EXIT
    if command == "pwd":
        return Builtin.PWD
    if command == "cd" or command.startswith("cd "):
        return Builtin.CD
    if command == "echo" or command.startswith("echo -n"):
        return Builtin.ECHO
    if command == "export" or command.startswith("export "):
        return Builtin.EXPORT
    if command == "unset":
        return Builtin.UNSET
    if command == "env":
        return Builtin.ENV
    return None


def check_export(entry):
    """Raise ValueError if ``entry`` does not start with a valid variable name.

    The name, up to the first ``=``, must begin with a letter or underscore
    and hold only letters, digits and underscores; a name with digits must
    also hold a letter.
    """
    if not entry:
        return
    first = entry[0]
    if not (_is_alpha(first) or first == "_"):
        raise ValueError(NOT_VALID_IDENTIFIER)
    name = entry.split("=", 1)[0]
    for char in name:
        if not (_is_alpha(char) or _is_digit(char) or char == "_"):
            raise ValueError(NOT_VALID_IDENTIFIER)
    if any(_is_digit(char) for char in name) and not any(_is_alpha(char) for char in name):
        raise ValueError(NOT_VALID_IDENTIFIER)


def echo(args, out=None):
    """Write the arguments separated by spaces; ``-n`` drops the newline."""
    out = sys.stdout if out is None else out
    words = args[1:]
    if words and words[0].startswith("-n"):
        words = words[1:]
    out.write(" ".join(words))
    if len(args) < 2 or args[1] != "-n":
        out.write("\n")
    return 0


def export(shell, args, out=None, err=None):
    """Set variables, or list them all when no name is given."""
    out, err = _streams(out, err)
    if len(args) < 2 or (len(args) == 2 and args[1] == ""):
        out.write("".join(line + "\n" for line in shell.env.sorted_declarations()))
        shell.exit_code = 0
        return 0
    code = 0
    for entry in args[1:]:
        try:
            check_export(entry)
        except ValueError as exc:
            code = _error(err, f" {exc}", 1)
            break
        shell.env.replace_or_add(entry)
    shell.exit_code = code
    return code


def unset(shell, args):
    """Remove each named variable from the environment."""
    for name in args[1:]:
        shell.env.remove(name)
    return 0


def env(shell, args, out=None, err=None):
    """Print the variables that have a value."""
    out, err = _streams(out, err)
    if len(args) > 1:
        return _error(err, " No such file or directory", 127)
    out.write("".join(entry + "\n" for entry in shell.env.printable()))
    return 0


def pwd(out=None):
    """Print the current directory; raises OSError when it cannot be found."""
    out = sys.stdout if out is None else out
    out.write(os.getcwd() + "\n")
    return 0


def _cd_back(shell, out, err):
    target = _getenv(shell.env, "OLDPWD")
    if target is None:
        return _error(err, "cd: OLDPWD not set", 1)
    current = _current_dir() or ""
    try:
        os.chdir(target)
    except (OSError, ValueError):
        return _error(err, "cd: OLDPWD not set", 1)
    out.write(target + "\n")
    shell.env.replace_or_add("OLDPWD=" + current)
    _update_pwd(shell.env)
    return 0


def cd(shell, path, out=None, err=None):
    """Change directory and keep PWD and OLDPWD up to date.

    No path or ``~`` goes to the home directory saved at start-up, an empty
    path goes to HOME and ``-`` goes back to OLDPWD.
    """
    out, err = _streams(out, err)
    if path == "-":
        return _cd_back(shell, out, err)
    shell.prev_dir = _current_dir()
    if path is None or path == "~":
        path = shell.home
    elif path == "":
        path = _getenv(shell.env, "HOME")
        if path is None:
            return _error(err, "cd: HOME not set", 1)
        if path == "":
            return 0
    if path is None:
        return _error(err, " No such file or directory", 1)
    try:
        os.chdir(path)
    except (OSError, ValueError):
        return _error(err, " No such file or directory", 1)
    if shell.prev_dir is not None:
        shell.env.replace_or_add("OLDPWD=" + shell.prev_dir)
    _update_pwd(shell.env)
    return 0


def exit_shell(shell, args, out=None, err=None):
    """Leave the shell by raising ShellExit.

    With too many arguments nothing is left and 1 is returned.
    """
    out, err = _streams(out, err)
    if len(args) > 2:
        err.write(" too many arguments\n")
        shell.exit_code = 1
        out.write("exit\n")
        return 1
    if len(args) == 2:
        code = atoi(args[1])
        if code == 0 and args[1] != "0":
            err.write(" numeric argument required\n")
            code = 2
        shell.exit_code = code
    out.write("exit\n")
    raise ShellExit(shell.exit_code)


def run_builtin(shell, args, out=None, err=None):
    """Run ``args`` as a built-in command.

    Returns the exit code, or None when ``args`` does not name a built-in.
    """
    kind = builtin_kind(args[0]) if args else None
    if kind is None:
        return None
    out, err = _streams(out, err)
    if kind is Builtin.EXIT:
        code = exit_shell(shell, args, out, err)
    elif kind is Builtin.PWD:
        try:
            code = pwd(out)
        except OSError:
            code = _error(err, "pwd: getcwd failed", 1)
    elif kind is Builtin.CD:
        if len(args) < 2:
            code = cd(shell, None, out, err)
        elif len(args) > 2:
            code = _error(err, " too many arguments", 1)
        elif not shell.is_empty:
            code = cd(shell, args[1], out, err)
        else:
            code = shell.exit_code
    elif kind is Builtin.ECHO:
        code = echo(args, out)
    elif kind is Builtin.EXPORT:
        code = export(shell, args, out, err)
    elif kind is Builtin.UNSET:
        code = unset(shell, args)
    else:
        code = env(shell, args, out, err)
    shell.is_empty = False
    shell.exit_code = code
    return code