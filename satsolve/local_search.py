"""Randomised local search for satisfying assignments: greedy hill climbing and WalkSAT."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Mapping, MutableMapping, Optional, Sequence

from satsolve.cnf import Clause, Formula, Status

MAX_ATTEMPTS = 100_000


@dataclass
class SearchResult:
    """Outcome of a local search, the valuation it ended with and the attempts used."""

    status: Status
    valuation: dict[int, int]
    attempts: int


def _literal_true(literal: int, valuation: Mapping[int, int]) -> bool:
    return valuation.get(abs(literal)) == (1 if literal > 0 else 0)


def _clause_satisfied(clause: Clause, valuation: Mapping[int, int]) -> bool:
    return any(_literal_true(literal, valuation) for literal in clause)


def count_satisfied(clauses: Sequence[Clause], valuation: Mapping[int, int]) -> int:
    """Number of clauses with at least one true literal."""
    return sum(1 for clause in clauses if _clause_satisfied(clause, valuation))


def is_satisfied(clauses: Sequence[Clause], valuation: Mapping[int, int]) -> bool:
    """Whether every clause has a true literal under the valuation."""
    return all(_clause_satisfied(clause, valuation) for clause in clauses)


def flip(valuation: MutableMapping[int, int], variable: int) -> int:
    """Set the variable to 0 if it is 1, otherwise to 1; return the argument."""
    var = abs(variable)
    valuation[var] = 0 if valuation.get(var) == 1 else 1
    return variable


def choose_random_literal(
    clauses: Sequence[Clause], valuation: Mapping[int, int], rng: random.Random
) -> Optional[int]:
    """Take the first literal of the first unsatisfied clause, negated at random.

    Returns None when no non-empty clause is left unsatisfied.
    """
    unsatisfied = next(
        (
            clause
            for clause in clauses
            if clause and not _clause_satisfied(clause, valuation)
        ),
        None,
    )
    if unsatisfied is None:
        return None
    head = unsatisfied[0]
    return head if rng.randrange(2) == 0 else -head


def greedy_local_search(
    formula: Formula,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> SearchResult:
    """Hill-climb from random restarts, flipping the best variable until no flip helps."""
    if rng is None:
        rng = random.Random()
    clauses = formula.clauses
    variables = range(1, formula.num_variables + 1)
    valuation = {var: rng.randrange(2) for var in variables}
    for attempt in range(1, max_attempts + 1):
        for var in variables:
            valuation[var] = rng.randrange(2)
        while True:
            best_sat = count_satisfied(clauses, valuation)
            best_var: Optional[int] = None
            for var in variables:
                flip(valuation, var)
                new_sat = count_satisfied(clauses, valuation)
                if new_sat > best_sat:
                    best_sat, best_var = new_sat, var
                flip(valuation, var)
            if best_var is None:
                break
            flip(valuation, best_var)
        if is_satisfied(clauses, valuation):
            return SearchResult(Status.SATISFIABLE, valuation, attempt)
    return SearchResult(Status.UNSATISFIABLE, valuation, max_attempts)


def walksat(
    formula: Formula,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> SearchResult:
    """Repeatedly repair the first unsatisfied clause by a random assignment of its head."""
    if rng is None:
        rng = random.Random()
    clauses = formula.clauses
    valuation = {var: -1 for var in range(1, formula.num_variables + 1)}
    attempts = 0
    if any(not clause for clause in clauses):
        return SearchResult(Status.UNSATISFIABLE, valuation, attempts)
    while attempts < max_attempts:
        if is_satisfied(clauses, valuation):
            return SearchResult(Status.SATISFIABLE, valuation, attempts)
        literal = choose_random_literal(clauses, valuation, rng)
        if literal is None:
            break
        valuation[abs(literal)] = 0 if literal > 0 else 1
        attempts += 1
    return SearchResult(Status.UNSATISFIABLE, valuation, attempts)