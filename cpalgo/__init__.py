"""Competitive-programming algorithms and judge-style output checkers."""

__version__ = "0.1.0"

__all__ = [
    "dp",
    "fish",
    "geometry",
    "lca",
    "numbers",
    "numeric_checkers",
    "paths",
    "strings",
    "structures",
    "testgen",
    "token_checkers",
    "traversal",
    "verdict",
]