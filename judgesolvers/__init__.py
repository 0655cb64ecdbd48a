"""Solvers for classic online-judge programming problems, grouped by theme."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "dynamic",
    "geometry",
    "graphs",
    "primes",
    "products",
    "risk",
    "routing",
    "simulation",
    "sokoban",
    "text_puzzles",
]