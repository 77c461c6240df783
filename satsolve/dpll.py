"""DPLL satisfiability search with unit propagation and pure literal elimination."""

from __future__ import annotations

from dataclasses import dataclass
from typing import MutableMapping, Optional, Sequence

from satsolve.cnf import Clause, Formula, Status

Clauses = list[Clause]
Valuation = MutableMapping[int, int]


@dataclass
class DPLLResult:
    """Outcome of a DPLL search and the valuation it left behind."""

    status: Status
    valuation: dict[int, int]


def _assign(valuation: Valuation, literal: int) -> None:
    """Record the value that makes the literal true."""
    valuation[abs(literal)] = int(literal > 0)


def find_unit_clause(clauses: Sequence[Clause]) -> Optional[int]:
    """Return the literal of the first single-literal clause, or None."""
    return next((clause[0] for clause in clauses if len(clause) == 1), None)


def find_pure_literal(clauses: Sequence[Clause], num_variables: int) -> Optional[int]:
    """Return the lowest variable occurring with one polarity only, signed by it."""
    polarity: dict[int, int] = {}
    for clause in clauses:
        for literal in clause:
            var = abs(literal)
            sign = 1 if literal > 0 else -1
            seen = polarity.get(var)
            if seen is None:
                polarity[var] = sign
            elif seen != sign:
                polarity[var] = 0
    for var in range(1, num_variables + 1):
        sign = polarity.get(var)
        if sign:
            return var * sign
    return None


def unit_propagate(clauses: Sequence[Clause], valuation: Valuation) -> Optional[Clauses]:
    """Assign the first unit literal and simplify; None if there is no unit clause."""
    unit = find_unit_clause(clauses)
    if unit is None:
        return None
    _assign(valuation, unit)
    return [
        tuple(literal for literal in clause if literal != -unit)
        for clause in clauses
        if unit not in clause
    ]


def eliminate_pure_literal(
    clauses: Sequence[Clause], num_variables: int, valuation: Valuation
) -> Optional[Clauses]:
    """Assign a pure literal and drop its clauses; None if there is no pure literal."""
    pure = find_pure_literal(clauses, num_variables)
    if pure is None:
        return None
    _assign(valuation, pure)
    return [clause for clause in clauses if pure not in clause]


def contains_empty_clause(clauses: Sequence[Clause]) -> bool:
    """Whether any clause has no literals left."""
    return any(not clause for clause in clauses)


def assign_if_consistent(clauses: Sequence[Clause], valuation: Valuation) -> bool:
    """Make every literal true if no variable occurs with both signs."""
    literals = {literal for clause in clauses for literal in clause}
    if any(-literal in literals for literal in literals):
        return False
    for literal in literals:
        _assign(valuation, literal)
    return True


def check_solution(clauses: Sequence[Clause], valuation: Valuation) -> Status:
    """Classify the clause set as unsatisfiable, satisfied or still open."""
    if contains_empty_clause(clauses):
        return Status.UNSATISFIABLE
    if assign_if_consistent(clauses, valuation):
        return Status.SATISFIABLE
    return Status.UNCERTAIN


def branch(clauses: Sequence[Clause], literal: int, valuation: Valuation) -> Clauses:
    """Assign a literal and return a copy of the clauses led by it as a unit clause."""
    _assign(valuation, literal)
    return [(literal,), *clauses]


def _simplify(
    clauses: Clauses, num_variables: int, valuation: Valuation
) -> tuple[Status, Clauses]:
    while True:
        status = check_solution(clauses, valuation)
        if status is not Status.UNCERTAIN:
            return status, clauses
        propagated = unit_propagate(clauses, valuation)
        if propagated is None:
            break
        clauses = propagated
    while True:
        status = check_solution(clauses, valuation)
        if status is not Status.UNCERTAIN:
            return status, clauses
        reduced = eliminate_pure_literal(clauses, num_variables, valuation)
        if reduced is None:
            return Status.UNCERTAIN, clauses
        clauses = reduced


def solve(formula: Formula) -> DPLLResult:
    """Decide the formula by DPLL search, trying each branch literal true first."""
    valuation = {var: -1 for var in range(1, formula.num_variables + 1)}
    pending: list[tuple[Clauses, Optional[int]]] = [(list(formula.clauses), None)]
    while pending:
        clauses, literal = pending.pop()
        if literal is not None:
            clauses = branch(clauses, literal, valuation)
        status, clauses = _simplify(clauses, formula.num_variables, valuation)
        if status is Status.SATISFIABLE:
            return DPLLResult(Status.SATISFIABLE, valuation)
        if status is Status.UNSATISFIABLE:
            continue
        chosen = clauses[0][0]
        pending.append((clauses, -chosen))
        pending.append((clauses, chosen))
    return DPLLResult(Status.UNSATISFIABLE, valuation)