"""Simulate a rope dragged around the grid by a script of moves, and count the distinct
positions its tail visits.

Each segment of the rope follows the one in front of it: when the two stop touching (their
chebyshev distance exceeds 1) the follower moves one cell along each axis toward its leader,
so a follower that is off in both axes moves diagonally. Segments are updated front to back
within a step, each reacting to the already-moved segment ahead of it.

The default report runs the same script against a short (2 segment) and a long (10 segment)
rope.
"""
from itertools import repeat
from typing import IO, Iterable, Iterator, Sequence, Set

from .moves import Move, parse_moves
from .rope import Rope
from .util import last, print_, set_verbose, split_lines
from .vector import Vector2

SHORT, LONG = 2, 10
REPORT_NAMES = {SHORT: "short", LONG: "long"}


def simulate(rope: Rope, moves: Iterable[Move]) -> Iterator[Rope]:
    """Apply each move one step at a time, yielding the (mutated) rope after every step"""
    for move in moves:
        print_(f"== {move.direction.value} {move.count} ==")
        for direction in repeat(move.direction, move.count):
            rope.step(direction)
            print_(rope.segments)
            yield rope


def tail_positions(moves: Iterable[Move], rope_length: int) -> Iterator[Vector2]:
    rope = Rope(rope_length)
    yield rope.tail()
    for rope in simulate(rope, moves):
        yield rope.tail()


def count_tail_positions(script: str, rope_length: int) -> int:
    moves = parse_moves(split_lines(script))
    visited: Set[Vector2] = set(tail_positions(moves, rope_length))
    return len(visited)


def visited_counts(script: str, rope_length: int) -> Iterator[int]:
    """Number of distinct tail positions visited so far, after each line of the script"""
    rope = Rope(rope_length)
    visited = {rope.tail()}
    for move in parse_moves(split_lines(script)):
        visited.update(r.tail() for r in simulate(rope, [move]))
        yield len(visited)


def final_rope(script: str, rope_length: int) -> Rope:
    rope = Rope(rope_length)
    return last(simulate(rope, parse_moves(split_lines(script))), rope)


def report_line(rope_length: int, n_positions: int) -> str:
    name = REPORT_NAMES.get(rope_length, f"{rope_length}-segment")
    return f"The {name} tail visited {n_positions} positions!"


def run(input_: IO[str], lengths: Sequence[int] = (SHORT, LONG), verbose: bool = False) -> str:
    set_verbose(verbose)
    script = input_.read()
    # counting every length up front means a bad line aborts before any output
    counts = [count_tail_positions(script, n) for n in lengths]
    return "\n".join(map(report_line, lengths, counts))


test_input = """R 4
U 4
L 3
D 1
R 4
D 1
L 5
R 2"""

test_input_long = """R 5
U 8
L 8
D 3
R 17
D 10
L 25
U 20"""


def test():
    import io

    for script, length, expected in [
        (test_input, SHORT, 13),
        (test_input, LONG, 1),
        (test_input_long, LONG, 36),
    ]:
        actual = count_tail_positions(script, length)
        assert actual == expected, (actual, expected)

    actual_report = run(io.StringIO(test_input))
    expected_report = "The short tail visited 13 positions!\nThe long tail visited 1 positions!"
    assert actual_report == expected_report, (actual_report, expected_report)
