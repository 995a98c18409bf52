# -----------------------------------------------------------------------------
# Solver: closed-form roots of a degree-two polynomial
# Responsibilities:
#   • Parse the expression into a CoefficientMap (parse errors propagate)
#   • Read c0, c1, c2 (missing -> 0.0) and compute the discriminant
#   • Apply the quadratic formula with IEEE-754 semantics: sqrt of a negative
#     is NaN and division by zero yields ±inf or NaN instead of raising
#   • Structured, traced result for the API layer (Solver.solve)
# -----------------------------------------------------------------------------

# src/polyroots/solver.py
from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from .types import Expression, CoefficientMap
from .parser import parse, split_terms, ParseError
from .tracer import Tracer
from .log import get_logger

logger = get_logger(__name__)

Roots = Tuple[float, float]


def _ieee_sqrt(x: float) -> float:
    # math.sqrt raises ValueError for x < 0; IEEE gives NaN
    if math.isnan(x) or x < 0:
        return math.nan
    return math.sqrt(x)


def _ieee_div(num: float, den: float) -> float:
    """
    Float division following IEEE-754 instead of raising ZeroDivisionError:
      nonzero / ±0 -> signed infinity (sign of num times sign of the zero)
      0 / ±0, nan / ±0 -> nan
    """
    if den != 0:
        return num / den
    if num == 0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


def discriminant(cm: CoefficientMap) -> float:
    """D = c1^2 - 4*c0*c2 over a parsed map; missing coefficients read as zero."""
    c0, c1, c2 = cm.coefficient(0), cm.coefficient(1), cm.coefficient(2)
    return c1 * c1 - 4.0 * c0 * c2


def solve_coefficients(c0: float, c1: float, c2: float) -> Roots:
    """
    Quadratic formula on bare coefficients of c2*x^2 + c1*x + c0.
    Returns (root1, root2) with root1 taking +sqrt(D), root2 taking -sqrt(D).
    No rounding or validation; NaN/inf are valid outcomes.
    """
    # float ** raises OverflowError for large c1; * overflows to inf
    sq = _ieee_sqrt(c1 * c1 - 4.0 * c0 * c2)
    den = 2.0 * c2
    r1 = _ieee_div(-c1 + sq, den)
    r2 = _ieee_div(-c1 - sq, den)
    return r1, r2


def solve_degree_two(expression: Expression) -> Roots:
    """
    Parse `expression` and return both roots of c2*x^2 + c1*x + c0.

    Example:
        solve_degree_two(Expression("x", "x^2+-4")) -> (2.0, -2.0)
    """
    cm = parse(expression)
    return solve_coefficients(cm.coefficient(0), cm.coefficient(1), cm.coefficient(2))


def classify_roots(c2: float, D: float) -> str:
    """
    Label the outcome of the formula:
      degenerate - c2 == 0, the roots are ±inf / NaN from the division
      no_real    - D < 0 (or NaN), both roots NaN
      repeated   - D == 0, root1 == root2
      distinct   - two different real roots
    """
    if c2 == 0:
        return "degenerate"
    if math.isnan(D) or D < 0:
        return "no_real"
    return "repeated" if D == 0 else "distinct"


@dataclass
class SolverResult:
    # Structured response used by the API layer and the demo page
    ok: bool
    variable: str
    formula: str
    coefficients: Dict[int, float] = field(default_factory=dict)
    discriminant: float | None = None
    roots: Roots | None = None
    root_kind: str | None = None
    steps: List[str] = field(default_factory=list)
    trace: List[Dict[str, Any]] = field(default_factory=list)
    error: str | None = None
    error_kind: str | None = None  # "user_input"


class Solver:
    """
    Traced front end over `parse` + `solve_coefficients`.
    Parse failures are reported in the result instead of raised.
    """

    def solve(self, expression: Expression) -> SolverResult:
        trace = Tracer()
        trace.add("input", variable=expression.variable, formula=expression.formula)

        try:
            cm = parse(expression)
        except ParseError as e:
            logger.warning("parse failed for %r: %s", expression.formula, e)
            trace.add("error", error_kind="user_input", term=e.term, message=str(e))
            return SolverResult(
                ok=False, variable=expression.variable, formula=expression.formula,
                steps=[f"Could not parse {e.term!r}: {e.reason}."],
                trace=trace.steps(), error=str(e), error_kind="user_input",
            )

        trace.add("parse", terms=split_terms(expression.formula))
        c0, c1, c2 = cm.coefficient(0), cm.coefficient(1), cm.coefficient(2)
        trace.add("coefficients", c0=c0, c1=c1, c2=c2)
        ignored = sorted(e for e in cm if e > 2)
        if ignored:
            trace.add("ignored_terms", exponents=ignored)

        D = discriminant(cm)
        trace.add("discriminant", D=D)
        roots = solve_coefficients(c0, c1, c2)
        kind = classify_roots(c2, D)
        trace.add("roots", root1=roots[0], root2=roots[1], root_kind=kind)
        logger.debug("solved %r -> %r (%s)", expression.formula, roots, kind)

        steps = [
            f"Parsed coefficients: c2={c2}, c1={c1}, c0={c0}.",
            f"Discriminant D = c1^2 - 4*c0*c2 = {D}.",
            "Quadratic formula: x = (-c1 ± sqrt(D)) / (2*c2).",
            f"Roots: {roots[0]}, {roots[1]}.",
        ]
        if ignored:
            steps.insert(1, f"Terms with exponents {ignored} are ignored by the degree-two formula.")

        return SolverResult(
            ok=True, variable=expression.variable, formula=expression.formula,
            coefficients=cm.as_dict(), discriminant=D, roots=roots, root_kind=kind,
            steps=steps, trace=trace.steps(),
        )
