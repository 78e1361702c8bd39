from typing import NamedTuple

from . import util


class Vector2(NamedTuple):
    x: int
    y: int

    def add(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def sub(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def sign(self) -> "Vector2":
        return Vector2(util.sign(self.x), util.sign(self.y))

    def chebyshev(self) -> int:
        """Length under the max-norm; two points are touching when their difference has
        chebyshev length <= 1"""
        return max(abs(self.x), abs(self.y))

    # tuple's + is concatenation; points add componentwise
    def __add__(self, other):  # type: ignore[override]
        return self.add(other)

    def __sub__(self, other):
        return self.sub(other)

    def __repr__(self):
        return f"({self.x}, {self.y})"


ORIGIN = Vector2(0, 0)


def add(a: Vector2, b: Vector2) -> Vector2:
    return a.add(b)


def sub(a: Vector2, b: Vector2) -> Vector2:
    return a.sub(b)


def sign(v: Vector2) -> Vector2:
    return v.sign()
