"""Parse textual quadratic polynomials and solve them in closed form."""

from .types import Expression, CoefficientMap
from .parser import (
    parse,
    split_terms,
    tokenize_term,
    Term,
    ParseError,
    MalformedTermError,
    UnsupportedExponentError,
)
from .solver import solve_degree_two, solve_coefficients, discriminant, Solver, SolverResult

__version__ = "0.1.0"

__all__ = [
    "Expression",
    "CoefficientMap",
    "parse",
    "split_terms",
    "tokenize_term",
    "Term",
    "ParseError",
    "MalformedTermError",
    "UnsupportedExponentError",
    "solve_degree_two",
    "solve_coefficients",
    "discriminant",
    "Solver",
    "SolverResult",
]
