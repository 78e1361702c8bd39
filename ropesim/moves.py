import re
from typing import Iterable, Iterator, NamedTuple, Optional

from .rope import Direction

MAX_COUNT = 255
MOVE_PATTERN = re.compile(r"(?P<direction>\S) (?P<count>[0-9]+)")
LINE_TERMINATORS = "\r\n"


class MoveError(ValueError):
    def __init__(self, line: str, reason: str, line_number: Optional[int] = None):
        self.line = line
        self.reason = reason
        self.line_number = line_number
        location = "" if line_number is None else f" on line {line_number}"
        super().__init__(f"{reason}{location}: {line!r}")

    def at(self, line_number: int) -> "MoveError":
        return type(self)(self.line, self.reason, line_number)


class MoveFormatError(MoveError):
    """The line is not of the form '<letter> <count>' with a count in 0-255"""


class InvalidDirectionError(MoveError):
    """The letter is not one of U, D, L, R"""


class Move(NamedTuple):
    direction: Direction
    count: int


def parse_direction(line: str, letter: str) -> Direction:
    try:
        return Direction(letter)
    except ValueError:
        raise InvalidDirectionError(line, f"Unknown direction {letter!r}") from None


def parse_move(line: str) -> Move:
    line_ = line.rstrip(LINE_TERMINATORS)
    match = MOVE_PATTERN.fullmatch(line_)
    if match is None:
        raise MoveFormatError(line_, "Expected a move of the form '<letter> <count>'")
    count = int(match["count"])
    if count > MAX_COUNT:
        raise MoveFormatError(line_, f"Move count must be between 0 and {MAX_COUNT}")
    return Move(parse_direction(line_, match["direction"]), count)


def parse_moves(lines: Iterable[str]) -> Iterator[Move]:
    for line_number, line in enumerate(lines, 1):
        try:
            yield parse_move(line)
        except MoveError as e:
            raise e.at(line_number) from e
