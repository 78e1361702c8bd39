#! /usr/bin/env python
import sys
from inspect import signature
from pathlib import Path
from time import perf_counter_ns
from typing import IO

from bourbaki.application.cli import CommandLineInterface, cli_spec  # type: ignore

from ropesim import simulation

STDIN = "-"


def print_solution(solution):
    print(solution)


def get_input(input_path: Path) -> IO[str]:
    return sys.stdin if str(input_path) == STDIN else open(input_path)


cli = CommandLineInterface(
    prog="main",
    require_options=False,
    require_subcommand=True,
    implicit_flags=True,
    use_verbose_flag=True,
)


@cli.definition
class RopeSim:
    """Simulate a rope dragged around a grid and count the positions its tail visits"""

    @cli_spec.output_handler(print_solution)
    def run(self, input_path: Path, trace: bool = False):
        """Run the simulation for a short (2 segment) and a long (10 segment) rope, printing
        how many positions each tail visited.

        :param input_path: path to a file of moves, one '<letter> <count>' per line;
          pass - to read the moves from stdin.
        :param trace: print every move and the rope after every step to stderr.
        """
        with get_input(input_path) as input_:
            tic = perf_counter_ns()
            solution = simulation.run(input_, verbose=trace)
            toc = perf_counter_ns()
        print(f"Ran in {(toc - tic) / 1000000} ms", file=sys.stderr)
        return solution

    def test(self):
        """Check the simulation against the worked examples"""
        simulation.test()
        print("Tests pass!")

    def info(self):
        """Print some details about the simulation's methodology"""
        if simulation.__doc__:
            print(simulation.__doc__, end="\n\n")
        print("Signature:")
        print(signature(simulation.run))


if __name__ == "__main__":
    cli.run()
