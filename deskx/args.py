"""Command line parsing: a mode word followed by --key=value options."""

import re
from enum import Enum

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class Mode(Enum):
    CLIENT = "client"
    SERVER = "server"
    UNKNOWN = "unknown"


def _atoi(text):
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


class Args:
    """Options given on the command line; argv includes the program name."""

    def __init__(self, argv):
        self.mode = Mode.UNKNOWN
        self._options = {}
        if len(argv) < 2:
            return
        word = argv[1]
        if word == "server":
            self.mode = Mode.SERVER
        elif word == "client":
            self.mode = Mode.CLIENT

        for arg in argv[2:]:
            if len(arg) < 4 or not arg.startswith("--"):
                continue
            key, sep, value = arg[2:].partition("=")
            if not sep:
                continue
            self._options.setdefault(key, value)

    def __getitem__(self, key):
        return self._options.get(key, "")

    def ok(self):
        """True when the mode is known and at least one option was given."""
        return self.mode is not Mode.UNKNOWN and bool(self._options)

    def print(self):
        """Print every option as 'key: value', ordered by key."""
        for key, value in sorted(self._options.items()):
            print(f"{key}: {value}")

    def num(self, key):
        """The option read as an integer; -1 if absent, 0 if not numeric."""
        if key not in self._options:
            return -1
        return _atoi(self._options[key])