"""The shell's own copy of the environment, kept as ``NAME=value`` entries."""

from .textutils import atoi, key_length

DECLARE_PREFIX = "declare -x "
_SHLVL = "SHLVL="


def _same_key(existing, entry):
    """Return True if ``entry`` names the same variable as ``existing``."""
    width = key_length(existing, "=") + 1
    return existing[:width] == entry[:width]


class Environment:
    """An ordered list of environment entries.

    Entries normally look like ``NAME=value``; an exported name without a
    value is kept as a bare ``NAME``.
    """

    def __init__(self, entries=()):
        self._entries = list(entries)

    @classmethod
    def from_mapping(cls, mapping):
        """Build an environment from a mapping such as ``os.environ``."""
        return cls(f"{name}={value}" for name, value in mapping.items())

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __getitem__(self, index):
        return self._entries[index]

    def lookup(self, name):
        """Return the value of variable ``name``, or None if it is not set."""
        for entry in self._entries:
            key, _, value = entry.partition("=")
            if key == name:
                return value
        return None

    def find_index(self, key):
        """Return the index of the first entry starting with ``key``, or None."""
        for index, entry in enumerate(self._entries):
            if entry.startswith(key):
                return index
        return None

    def replace_or_add(self, entry):
        """Replace the entry for the same variable, or append ``entry``."""
        for index, existing in enumerate(self._entries):
            if _same_key(existing, entry):
                self._entries[index] = entry
                return
        self._entries.append(entry)

    def remove(self, name):
        """Remove the first entry for variable ``name``; missing names are ignored."""
        for index, entry in enumerate(self._entries):
            width = key_length(entry, "=")
            if entry == name or (width == len(name) and entry[:width] == name):
                del self._entries[index]
                return

    def sorted_declarations(self):
        """Return every entry as a ``declare -x`` line, in byte order."""
        return [DECLARE_PREFIX + entry for entry in sorted(self._entries)]

    def printable(self):
        """Return the entries that carry a value, as ``env`` shows them."""
        return [entry for entry in self._entries if "=" in entry]

    def as_list(self):
        """Return a copy of the entries."""
        return list(self._entries)


def bump_shlvl(entries):
    """Return ``entries`` with the SHLVL value raised by one.

    Entries without a SHLVL variable are returned unchanged.
    """
    result = list(entries)
    levels = [atoi(entry[len(_SHLVL):]) + 1 for entry in result if entry.startswith(_SHLVL)]
    if not levels:
        return result
    replacement = f"{_SHLVL}{levels[-1]}"
    for index, entry in enumerate(result):
        if entry.startswith(_SHLVL):
            result[index] = replacement
            break
    return result