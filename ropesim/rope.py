from enum import Enum
from itertools import accumulate
from typing import Dict, Iterable, List, Sequence, Tuple

from .vector import ORIGIN, Vector2

Segments = Tuple[Vector2, ...]


class Direction(Enum):
    Up = "U"
    Down = "D"
    Left = "L"
    Right = "R"

    @property
    def delta(self) -> Vector2:
        return STEP_VECTORS[self]


STEP_VECTORS: Dict[Direction, Vector2] = {
    Direction.Up: Vector2(0, 1),
    Direction.Down: Vector2(0, -1),
    Direction.Left: Vector2(-1, 0),
    Direction.Right: Vector2(1, 0),
}


def delta(direction: Direction) -> Vector2:
    return STEP_VECTORS[direction]


def catch_up(leader: Vector2, follower: Vector2) -> Vector2:
    gap = leader - follower
    if gap.chebyshev() <= 1:
        return follower
    else:
        return follower + gap.sign()


def catch_up_all(head: Vector2, rest: Iterable[Vector2]) -> List[Vector2]:
    # each segment follows the already-moved one in front of it
    return list(accumulate(rest, catch_up, initial=head))


def is_taut(segments: Sequence[Vector2]) -> bool:
    return all((a - b).chebyshev() <= 1 for a, b in zip(segments, segments[1:]))


class Rope:
    """A chain of segments on the grid; segment 0 is the head and the last one is the tail.
    Every segment starts at the origin and only ever moves through `step`."""

    def __init__(self, length: int):
        assert length >= 1, f"rope length must be at least 1; got {length}"
        self._segments: List[Vector2] = [ORIGIN] * length

    def __len__(self) -> int:
        return len(self._segments)

    def __repr__(self):
        return f"{type(self).__name__}({list(self._segments)})"

    @property
    def segments(self) -> Segments:
        return tuple(self._segments)

    def head(self) -> Vector2:
        return self._segments[0]

    def tail(self) -> Vector2:
        return self._segments[-1]

    def step(self, direction: Direction):
        head = self._segments[0] + delta(direction)
        self._segments = catch_up_all(head, self._segments[1:])
