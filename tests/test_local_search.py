import random

import pytest

from satsolve.cnf import Formula, Status, parse_cnf
from satsolve.local_search import (
    SearchResult,
    choose_random_literal,
    count_satisfied,
    flip,
    greedy_local_search,
    is_satisfied,
    walksat,
)

SAT_TEXT = """c small satisfiable formula
p cnf 4 4
1 -2 0
2 3 0
-1 -3 4 0
-4 2 0
"""

UNSAT = Formula(1, 2, ((1,), (-1,)))


@pytest.fixture
def formula():
    return parse_cnf(SAT_TEXT)


def test_count_matches_number_of_clauses_when_satisfied(formula):
    valuation = {1: 1, 2: 1, 3: 0, 4: 1}
    assert is_satisfied(formula.clauses, valuation)
    assert count_satisfied(formula.clauses, valuation) == len(formula.clauses)


def test_count_below_total_when_not_satisfied(formula):
    valuation = {1: 0, 2: 0, 3: 0, 4: 0}
    assert not is_satisfied(formula.clauses, valuation)
    assert count_satisfied(formula.clauses, valuation) < len(formula.clauses)


def test_unassigned_variables_satisfy_nothing(formula):
    valuation = {var: -1 for var in range(1, 5)}
    assert count_satisfied(formula.clauses, valuation) == 0


def test_empty_clause_never_satisfied():
    assert not is_satisfied([()], {1: 1})


def test_no_clauses_is_satisfied():
    assert is_satisfied([], {})


@pytest.mark.parametrize("start", [0, 1, -1])
def test_flip_twice_depends_on_start(start):
    valuation = {3: start}
    assert flip(valuation, 3) == 3
    assert valuation[3] in (0, 1)
    assert valuation[3] != start or start == -1
    flip(valuation, -3)
    if start == -1:
        assert valuation[3] == 0
    else:
        assert valuation[3] == start


def test_flip_returns_argument():
    assert flip({2: 1}, -2) == -2


def test_choose_random_literal_none_when_all_satisfied(formula):
    valuation = {1: 1, 2: 1, 3: 0, 4: 1}
    assert choose_random_literal(formula.clauses, valuation, random.Random(0)) is None


def test_choose_random_literal_uses_head_of_first_unsatisfied(formula):
    valuation = {1: 1, 2: 0, 3: 0, 4: 0}
    # first clause 1 -2 is satisfied, the second 2 3 is not
    rng = random.Random(5)
    seen = {choose_random_literal(formula.clauses, valuation, rng) for _ in range(50)}
    assert seen == {2, -2}


def test_greedy_finds_satisfying_valuation(formula):
    result = greedy_local_search(formula, random.Random(1), 50)
    assert result.status is Status.SATISFIABLE
    assert is_satisfied(formula.clauses, result.valuation)
    assert set(result.valuation) == {1, 2, 3, 4}
    assert 1 <= result.attempts <= 50


def test_greedy_gives_up_on_unsatisfiable():
    result = greedy_local_search(UNSAT, random.Random(2), 7)
    assert result.status is Status.UNSATISFIABLE
    assert result.attempts == 7


def test_greedy_is_reproducible_with_seed(formula):
    first = greedy_local_search(formula, random.Random(42), 20)
    second = greedy_local_search(formula, random.Random(42), 20)
    assert first == second


def test_walksat_stops_at_attempt_limit():
    result = walksat(UNSAT, random.Random(4), 25)
    assert result.status is Status.UNSATISFIABLE
    assert result.attempts == 25


def test_walksat_empty_clause_is_unsatisfiable():
    result = walksat(Formula(2, 1, ((),)), random.Random(0), 100)
    assert result.status is Status.UNSATISFIABLE
    assert result.valuation == {1: -1, 2: -1}


def test_walksat_empty_formula_satisfied_without_work():
    result = walksat(Formula(2, 0, ()), random.Random(0), 100)
    assert result.status is Status.SATISFIABLE
    assert result.attempts == 0