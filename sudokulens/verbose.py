"""Coloured console messages filtered by a global verbosity level."""

MAX_VERBOSE_LEVEL = 3

RED = "\x1b[31m"
GRN = "\x1b[32m"
YEL = "\x1b[33m"
BLU = "\x1b[34m"
MAG = "\x1b[35m"
CYN = "\x1b[36m"
WHT = "\x1b[37m"
RESET = "\x1b[0m"

_level = 0


class FatalError(RuntimeError):
    """An unrecoverable error; the command line reports it and exits with status 1."""


def set_level(level):
    """Set the verbosity level (0 to MAX_VERBOSE_LEVEL)."""
    global _level
    if not 0 <= level <= MAX_VERBOSE_LEVEL:
        raise ValueError(
            f"verbose level must be between 0 and {MAX_VERBOSE_LEVEL}, got {level}"
        )
    _level = level


def get_level():
    """Return the current verbosity level."""
    return _level


def _emit(threshold, colour, tag, message, trailer=""):
    if _level >= threshold:
        print(f"{colour}{tag} {RESET}{message}{trailer}")


def warn(message):
    """Print a warning when the level is at least 1."""
    _emit(1, YEL, "[-]", message)


def log(message):
    """Print a progress message when the level is at least 2."""
    _emit(2, GRN, "[+]", message, RESET)


def info(message):
    """Print a detailed message when the level is at least 3."""
    _emit(3, CYN, "[*]", message)