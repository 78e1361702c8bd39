import sys
from typing import Iterable, List, TypeVar

VERBOSE = False

T = TypeVar("T")


# Math


def sign(x: int) -> int:
    return 0 if x == 0 else (1 if x > 0 else -1)


# Iterators


def last(it: Iterable[T], default: T) -> T:
    value = default
    for value in it:
        pass
    return value


# I/O


def set_verbose(value: bool):
    global VERBOSE
    VERBOSE = value


def print_(*args, **kwargs):
    if VERBOSE:
        print(*args, **kwargs, file=sys.stderr)


def split_lines(script: str) -> List[str]:
    """Split on newlines; a final line without a newline is kept, but the empty string after a
    trailing newline is not"""
    lines = script.split("\n")
    if lines and not lines[-1]:
        lines.pop()
    return lines
