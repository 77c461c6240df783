# satsolve

`satsolve` reads propositional formulas in DIMACS CNF format and tries to satisfy them. It has three solvers:

- **DPLL** (`satsolve.dpll.solve`): a complete backtracking search. It uses unit propagation and pure-literal elimination, tries each branch literal true before false, and always reaches a definite answer.
- **Greedy local search** (`satsolve.local_search.greedy_local_search`): starts from a random assignment, keeps flipping the single variable that satisfies the most clauses until no flip helps, and restarts from a fresh random assignment if the result is not a solution.
- **WalkSAT-style repair** (`satsolve.local_search.walksat`): takes the first unsatisfied clause and assigns the variable of its first literal at random.

The two local-search solvers stop after a fixed number of attempts (100 000 by default). If they give up, that does not prove the formula is unsatisfiable.

## Installation

```
pip install .
```

## Input format

The input is a DIMACS CNF file:

```
c a comment
p cnf 3 2
1 -3 0
2 3 -1 0
```

- Lines starting with `c` are comments; blank lines are ignored.
- The `p cnf <variables> <clauses>` line declares the problem size and must come before any clause.
- Every other line is one clause: its literals, ended by `0`. Anything after the `0` on that line is ignored, and a clause cannot continue onto the next line.

A malformed problem line, a token that is not an integer, a literal whose variable exceeds the declared count, or a clause before the problem line raises `satsolve.cnf.CNFError` (a `ValueError`).

## Command line

```
satsolve-dpll formula.cnf [solution.txt]
satsolve-gensat formula.cnf [--seed N] [--max-attempts N]
satsolve-walksat formula.cnf [--seed N] [--max-attempts N]
```

Each command prints `CPU time used: <seconds> seconds` and then `SATISFIABLE` or `UNSATISFIABLE`.

- `satsolve-dpll` on success prints one `variable value` line per variable. If a solution file is given, it writes the same lines there; if that file cannot be opened it prints `Error opening file!` and exits with status 1.
- `satsolve-gensat` on success prints one `variable value` line per variable.
- `satsolve-walksat` on success prints the values of all variables in order on a single line.

`--seed` makes a local-search run repeatable; `--max-attempts` changes the attempt limit. A file that cannot be read or parsed gives an error message on standard error and exit status 1.

The `satsolve` command chooses the solver with a subcommand and passes the remaining arguments on:

```
satsolve dpll formula.cnf solution.txt
satsolve gensat formula.cnf --seed 1
satsolve walksat formula.cnf
```

Without a known subcommand it prints a usage line and exits with status 2.

## Values in an assignment

A valuation is a `dict` from variable number (starting at 1) to a value: `1` for true, `0` for false. The DPLL solver and the WalkSAT solver start every variable at `-1`, and a variable that the search never needed to set keeps that value in the result; either value satisfies the formula for such a variable.

## Library use

```python
from satsolve.cnf import parse_cnf, Status
from satsolve.dpll import solve

formula = parse_cnf("p cnf 2 2\n1 2 0\n-1 0\n")
result = solve(formula)
if result.status is Status.SATISFIABLE:
    print(result.valuation)
```

`satsolve.cnf` holds:

- `Formula` (`num_variables`, `num_clauses`, `clauses` as tuples of signed integers), `Status` (`UNSATISFIABLE`, `UNCERTAIN`, `SATISFIABLE`) and `CNFError`;
- `parse_cnf(text)` and `read_cnf(path)`;
- `format_clauses(clauses)`, `format_valuation(valuation)` and `write_solution(valuation, path)`.

`satsolve.dpll` exposes `solve(formula)`, which returns a `DPLLResult` (`status`, `valuation`), together with the steps it is built from: `find_unit_clause`, `find_pure_literal`, `unit_propagate`, `eliminate_pure_literal`, `contains_empty_clause`, `assign_if_consistent`, `check_solution` and `branch`.

`satsolve.local_search` exposes:

- `greedy_local_search(formula, rng=None, max_attempts=100000)`
- `walksat(formula, rng=None, max_attempts=100000)`

Both return a `SearchResult` (`status`, `valuation`, `attempts`). Pass a `random.Random` instance to repeat a run exactly. The helpers `count_satisfied`, `is_satisfied`, `flip` and `choose_random_literal` are available too.

## What it does not do

- The local-search solvers cannot prove a formula unsatisfiable; `UNSATISFIABLE` from them only means the attempt limit was reached (or, for WalkSAT, that the formula has an empty clause).
- Results are not printed in the competition `s`/`v` output format, and no proof of unsatisfiability is produced.
- Only the local-search commands accept a seed or attempt limit; the DPLL command takes no options beyond its files.

## Running the tests

```
pip install .[test]
pytest
```