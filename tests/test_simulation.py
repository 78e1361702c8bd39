import io

import pytest

from ropesim import simulation
from ropesim.moves import InvalidDirectionError, MoveFormatError
from ropesim.simulation import count_tail_positions, final_rope, report_line, run, visited_counts
from ropesim.vector import Vector2

TEST_INPUT = simulation.test_input
TEST_INPUT_LONG = simulation.test_input_long


@pytest.mark.parametrize(
    "script, length, expected",
    [
        (TEST_INPUT, 2, 13),
        (TEST_INPUT, 10, 1),
        (TEST_INPUT_LONG, 10, 36),
        (TEST_INPUT + "\n", 2, 13),
        ("", 2, 1),
        ("R 0", 2, 1),
        ("R 2\nL 2", 1, 3),
        ("R 3\nU 3\nL 3\nD 3", 1, 12),
        ("R 1", 2, 1),
    ],
)
def test_count_tail_positions(script: str, length: int, expected: int):
    actual = count_tail_positions(script, length)
    assert actual == expected, (expected, actual)


@pytest.mark.parametrize("script", [TEST_INPUT, TEST_INPUT_LONG])
@pytest.mark.parametrize("length", [1, 2, 10])
def test_count_tail_positions_deterministic(script: str, length: int):
    assert count_tail_positions(script, length) == count_tail_positions(script, length)


@pytest.mark.parametrize("length", [1, 2, 5, 10])
def test_visited_counts_non_decreasing(length: int):
    counts = list(visited_counts(TEST_INPUT_LONG, length))
    assert len(counts) == 8
    assert counts == sorted(counts)
    assert counts[-1] == count_tail_positions(TEST_INPUT_LONG, length)


def test_final_rope():
    rope = final_rope(TEST_INPUT, 2)
    assert rope.head() == Vector2(2, 2)
    assert rope.tail() == Vector2(1, 2)


@pytest.mark.parametrize(
    "script, error",
    [
        ("R 4\nX 3", InvalidDirectionError),
        ("R 4\nR abc\nU 2", MoveFormatError),
        ("R", MoveFormatError),
        ("R 4\n\nU 2", MoveFormatError),
        ("R 256", MoveFormatError),
    ],
)
def test_bad_script_aborts(script: str, error: type):
    with pytest.raises(error):
        count_tail_positions(script, 2)


def test_run():
    actual = run(io.StringIO(TEST_INPUT_LONG))
    expected = "The short tail visited 88 positions!\nThe long tail visited 36 positions!"
    assert actual == expected, (expected, actual)


def test_run_bad_input_has_no_partial_report():
    with pytest.raises(MoveFormatError):
        run(io.StringIO("R 4\nU four\n"))


def test_run_verbose(capsys):
    run(io.StringIO("R 2"), lengths=[2], verbose=True)
    simulation.set_verbose(False)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "== R 2 ==" in captured.err


@pytest.mark.parametrize(
    "length, n, expected",
    [
        (2, 13, "The short tail visited 13 positions!"),
        (10, 1, "The long tail visited 1 positions!"),
        (3, 7, "The 3-segment tail visited 7 positions!"),
    ],
)
def test_report_line(length: int, n: int, expected: str):
    assert report_line(length, n) == expected


def test_self_check():
    simulation.test()
