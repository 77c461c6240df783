"""Command-line front ends for the DPLL and local search solvers."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Callable, Optional, Sequence

from satsolve.cnf import CNFError, Formula, Status, format_valuation, read_cnf, write_solution
from satsolve.dpll import solve
from satsolve.local_search import MAX_ATTEMPTS, greedy_local_search, walksat


def _load(path: str) -> Optional[Formula]:
    try:
        return read_cnf(path)
    except OSError as exc:
        print(f"error: cannot read {path}: {exc}", file=sys.stderr)
    except CNFError as exc:
        print(f"error: {path}: {exc}", file=sys.stderr)
    return None


def _print_time(start: float) -> None:
    print(f"CPU time used: {time.process_time() - start:f} seconds")


def _print_assignment(valuation: dict[int, int], num_variables: int) -> None:
    for var in range(1, num_variables + 1):
        print(f"{var} {valuation[var]}")


def _local_parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("input", help="DIMACS CNF file")
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    parser.add_argument(
        "--max-attempts", type=int, default=MAX_ATTEMPTS, help="attempt limit"
    )
    return parser


def dpll_main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve a CNF file with DPLL and write the solution file if satisfiable."""
    parser = argparse.ArgumentParser(prog="dpll", description="DPLL SAT solver")
    parser.add_argument("input", help="DIMACS CNF file")
    parser.add_argument("output", nargs="?", help="file to write the solution to")
    args = parser.parse_args(argv)
    formula = _load(args.input)
    if formula is None:
        return 1
    start = time.process_time()
    result = solve(formula)
    _print_time(start)
    if result.status is not Status.SATISFIABLE:
        print("UNSATISFIABLE")
        return 0
    print("SATISFIABLE")
    _print_assignment(result.valuation, formula.num_variables)
    if args.output is not None:
        try:
            write_solution(result.valuation, args.output)
        except OSError:
            print("Error opening file!")
            return 1
    return 0


def gensat_main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve a CNF file by greedy local search with random restarts."""
    args = _local_parser("gensat", "greedy local search SAT solver").parse_args(argv)
    start = time.process_time()
    formula = _load(args.input)
    if formula is None:
        return 1
    result = greedy_local_search(formula, random.Random(args.seed), args.max_attempts)
    _print_time(start)
    if result.status is Status.SATISFIABLE:
        print("SATISFIABLE")
        _print_assignment(result.valuation, formula.num_variables)
    else:
        print("UNSATISFIABLE")
    return 0


def walksat_main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve a CNF file by WalkSAT-style random repair."""
    args = _local_parser("walksat", "WalkSAT SAT solver").parse_args(argv)
    start = time.process_time()
    formula = _load(args.input)
    if formula is None:
        return 1
    result = walksat(formula, random.Random(args.seed), args.max_attempts)
    _print_time(start)
    if result.status is Status.SATISFIABLE:
        print("SATISFIABLE")
        print(format_valuation(result.valuation), end="")
    else:
        print("UNSATISFIABLE")
    return 0


_COMMANDS: dict[str, Callable[[Optional[Sequence[str]]], int]] = {
    "dpll": dpll_main,
    "gensat": gensat_main,
    "walksat": walksat_main,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the solver named by the first argument on the remaining arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] not in _COMMANDS:
        names = ", ".join(_COMMANDS)
        print(f"usage: satsolve {{{names}}} [arguments ...]", file=sys.stderr)
        return 2
    return _COMMANDS[args[0]](args[1:])


if __name__ == "__main__":
    sys.exit(main())