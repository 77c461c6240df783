"""Reading DIMACS CNF formulas and formatting solver results."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping, Sequence, Union

Clause = tuple[int, ...]
PathLike = Union[str, Path]


class Status(enum.IntEnum):
    """Outcome of examining a clause set."""

    UNSATISFIABLE = -1
    UNCERTAIN = 0
    SATISFIABLE = 1


class CNFError(ValueError):
    """Raised when CNF input cannot be understood."""


@dataclass(frozen=True)
class Formula:
    """A formula in conjunctive normal form."""

    num_variables: int
    num_clauses: int
    clauses: tuple[Clause, ...]


def _parse_problem_line(line: str, lineno: int) -> tuple[int, int]:
    tokens = line.split()
    if len(tokens) < 4 or tokens[0] != "p" or tokens[1] != "cnf":
        raise CNFError(f"line {lineno}: malformed problem line {line.strip()!r}")
    try:
        num_variables, num_clauses = int(tokens[2]), int(tokens[3])
    except ValueError as exc:
        raise CNFError(f"line {lineno}: malformed problem line {line.strip()!r}") from exc
    if num_variables < 0 or num_clauses < 0:
        raise CNFError(f"line {lineno}: negative counts in problem line")
    return num_variables, num_clauses


def _parse_clause(tokens: Iterable[str], num_variables: int, lineno: int) -> Clause:
    literals = []
    for token in tokens:
        try:
            literal = int(token)
        except ValueError as exc:
            raise CNFError(f"line {lineno}: invalid literal {token!r}") from exc
        if literal == 0:
            break
        if abs(literal) > num_variables:
            raise CNFError(
                f"line {lineno}: literal {literal} exceeds {num_variables} variables"
            )
        literals.append(literal)
    return tuple(literals)


def parse_cnf(text: str) -> Formula:
    """Parse DIMACS CNF text, one clause per line, ended by the first 0."""
    num_variables: int | None = None
    num_clauses = 0
    clauses: list[Clause] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if line.startswith("c"):
            continue
        if line.startswith("p"):
            num_variables, num_clauses = _parse_problem_line(line, lineno)
            continue
        tokens = line.split()
        if not tokens:
            continue
        if num_variables is None:
            raise CNFError(f"line {lineno}: clause before problem line")
        clauses.append(_parse_clause(tokens, num_variables, lineno))
    return Formula(num_variables or 0, num_clauses, tuple(clauses))


def read_cnf(path: PathLike) -> Formula:
    """Read and parse a DIMACS CNF file."""
    return parse_cnf(Path(path).read_text())


def format_clauses(clauses: Iterable[Sequence[int]]) -> str:
    """Render clauses one per line, each literal followed by a space."""
    return "".join("".join(f"{literal} " for literal in clause) + "\n" for clause in clauses)


def format_valuation(valuation: Mapping[int, int]) -> str:
    """Render the values of all variables in order on one line."""
    return "".join(f"{valuation[var]} " for var in sorted(valuation)) + "\n"


def write_solution(valuation: Mapping[int, int], path: PathLike) -> None:
    """Write one "variable value" line per variable to a file."""
    with open(path, "w") as handle:
        handle.writelines(f"{var} {valuation[var]}\n" for var in sorted(valuation))