"""Finding the program a command names."""

import os

_PATH_KEY = "PATH="


class CommandError(Exception):
    """Raised when a command cannot be run."""

    def __init__(self, command, message, exit_code):
        super().__init__(f"minishell: {command}: {message}")
        self.command = command
        self.message = message
        self.exit_code = exit_code


def find_in_path(command, env):
    """Return the file that ``command`` names, or None.

    A name that exists as given is returned unchanged; otherwise each
    directory of PATH is tried in order.
    """
    if os.path.exists(command):
        return command
    index = env.find_index(_PATH_KEY)
    if index is None:
        return None
    for directory in env[index][len(_PATH_KEY):].split(":"):
        if not directory:
            continue
        candidate = directory + "/" + command
        if os.path.exists(candidate):
            return candidate
    return None


def resolve_command(command, env):
    """Return the path to run for ``command`` or raise CommandError.

    Names holding a slash are used directly: a directory gives 126, a
    missing file 127 and a file that cannot be run 126.  Other names are
    looked up with find_in_path; a name not found, or found but not
    runnable, gives 127.
    """
    if "/" in command:
        if os.path.isdir(command):
            raise CommandError(command, "Is a directory", 126)
        if not os.path.exists(command):
            raise CommandError(command, "No such file or directory", 127)
        if not os.access(command, os.X_OK):
            raise CommandError(command, "Permission denied", 126)
        return command
    path = find_in_path(command, env)
    if path is None or os.path.isdir(path) or not os.access(path, os.X_OK):
        raise CommandError(command, "command not found", 127)
    return path