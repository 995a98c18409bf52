# -----------------------------------------------------------------------------
# Coefficient Parser
# Purpose: Turn a formula string such as "3x^2+4x+1" into a CoefficientMap
# {exponent: coefficient}.
# Grammar (per '+'-separated term):
#   term     := coef [ var [ '^' exponent ] ]
#   coef     := '' | '+' | '-' | <float literal>     ('' -> 1, '-' -> -1)
#   exponent := single digit 0-9
# Safety:
#   - Raises MalformedTermError / UnsupportedExponentError (both ParseError);
#     a failing term aborts the whole parse, no partial map is returned.
# -----------------------------------------------------------------------------

from __future__ import annotations
import re
from functools import lru_cache
from typing import List, NamedTuple

from .types import Expression, CoefficientMap

class ParseError(ValueError):
    def __init__(self, term: str, reason: str):
        super().__init__(f"Cannot parse term {term!r}: {reason}")
        self.term = term
        self.reason = reason

class MalformedTermError(ParseError): pass

class UnsupportedExponentError(ParseError): pass

# Largest exponent a single caret digit can express.
MAX_EXPONENT = 9

# Integer-looking exponent text; used to tell "x^10" (unsupported) from "x^a" (malformed)
_INT = re.compile(r"[-+]?\d+")

# Plain float literal: sign, digits, optional fraction, optional exponent, or inf/nan.
# Narrower than float(): no "1_000" digit groups, no inner whitespace.
_FLOAT = re.compile(
    r"[-+]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][-+]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _to_float(text: str, term: str) -> float:
    if not _FLOAT.fullmatch(text):
        raise MalformedTermError(term, f"{text!r} is not a number")
    return float(text)


class Term(NamedTuple):
    # One classified term: numeric multiplier, power of the variable, raw text.
    coefficient: float
    exponent: int
    text: str


def split_terms(formula: str) -> List[str]:
    """
    Split a formula on the literal '+'.
    - An empty formula yields no terms.
    - Surrounding whitespace of each term is dropped ("3x^2 + 4" -> ["3x^2", "4"]).
    - A leading '-' stays inside the term; it is part of the numeric literal.
    """
    if not formula:
        return []
    return [t.strip() for t in formula.split("+")]


@lru_cache(maxsize=32)
def _term_pattern(variable: str) -> re.Pattern:
    # coef is non-greedy so the optional variable suffix gets first claim on the tail
    v = re.escape(variable)
    return re.compile(rf"(?P<coef>.*?)(?:(?P<var>{v})(?:\^(?P<exp>.*))?)?", re.DOTALL)


def _coefficient(text: str, term: str) -> float:
    """
    Interpret the numeric prefix of a term.
    Empty or '+' means an implicit 1, a lone '-' means -1.
    """
    if text in ("", "+"):
        return 1.0
    if text == "-":
        return -1.0
    return _to_float(text, term)


def _exponent(text: str, term: str) -> int:
    if len(text) == 1 and text in "0123456789":
        return int(text)
    if _INT.fullmatch(text):
        raise UnsupportedExponentError(
            term, f"exponent {text!r} is outside 0..{MAX_EXPONENT}"
        )
    raise MalformedTermError(term, "'^' must be followed by a single digit")


def tokenize_term(term: str, variable: str) -> Term:
    """
    Classify one raw term by explicit pattern matching:
      "<coef><var>^<n>" -> exponent n
      "<coef><var>"     -> exponent 1
      "<coef>"          -> exponent 0
    The suffix is checked, not assumed: a caret term must end in `variable`,
    so "3y^2" (variable "x") and "3^2" raise MalformedTermError instead of
    being read as exponent 2.
    """
    if not term:
        raise MalformedTermError(term, "empty term")
    m = _term_pattern(variable).fullmatch(term)
    coef_text, var, exp_text = m.group("coef"), m.group("var"), m.group("exp")

    if var is None:
        # Pure constant: the whole token must be a float literal
        if "^" in term:
            raise MalformedTermError(term, f"'^' without variable {variable!r}")
        return Term(_to_float(term, term), 0, term)

    exponent = 1 if exp_text is None else _exponent(exp_text, term)
    return Term(_coefficient(coef_text, term), exponent, term)


def parse(expression: Expression) -> CoefficientMap:
    """
    Parse an Expression into a CoefficientMap.
    A repeated exponent overwrites the earlier one (last write wins).

    Example:
        parse(Expression("x", "3x^2+4x+1")) -> {0: 1.0, 1: 4.0, 2: 3.0}
    """
    coeffs = {}
    for raw in split_terms(expression.formula):
        term = tokenize_term(raw, expression.variable)
        coeffs[term.exponent] = term.coefficient
    return CoefficientMap(coeffs)
