"""DPLL, greedy local search and WalkSAT solvers for DIMACS CNF formulas."""

__version__ = "0.1.0"
__all__ = ["cnf", "dpll", "local_search", "cli"]