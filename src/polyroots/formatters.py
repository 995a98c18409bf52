from __future__ import annotations
import math
from typing import Any, Dict, List, Union

from .types import CoefficientMap

ROUND_SIG = 3

def _sig(x: float, n: int = ROUND_SIG) -> float:
    if x == 0 or not math.isfinite(x):
        return x
    from math import log10, floor
    p = -int(floor(log10(abs(x)))) + (n - 1)
    return round(x, p)

def _num(c: float) -> str:
    # 3.0 -> "3", 2.5 -> "2.5", -0.0 -> "-0"; repr keeps full precision for reparsing
    if c == 0 and math.copysign(1.0, c) < 0:
        return "-0"
    return str(int(c)) if c.is_integer() else repr(c)

def json_float(x: float) -> Union[float, str]:
    # JSON has no NaN/Infinity literals
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    return x

def format_polynomial(cm: CoefficientMap, variable: str = "x") -> str:
    """
    Render a coefficient map back into formula text, highest exponent first.
    {0: 1.0, 1: 4.0, 2: 3.0} -> "3x^2+4x+1"; negatives become "+-" terms.
    Non-finite coefficients are written as Python float literals ("inf", "nan").
    """
    terms: List[str] = []
    for e in sorted(cm, reverse=True):
        c = cm[e]
        lit = _num(c) if math.isfinite(c) else repr(c)
        if e == 0:
            terms.append(lit)
        elif e == 1:
            terms.append(f"{lit}{variable}")
        else:
            terms.append(f"{lit}{variable}^{e}")
    return "+".join(terms)

def paraphrase_roots(result: Any) -> str:
    """One-line summary of a SolverResult for the API and demo page."""
    if not result.ok:
        return f"Could not read the formula: {result.error}"
    r1, r2 = result.roots
    if result.root_kind == "no_real" and math.isnan(result.discriminant):
        return "No real roots: the discriminant is undefined (NaN)."
    if result.root_kind == "no_real":
        return f"No real roots: the discriminant {_sig(result.discriminant)} is negative."
    if result.root_kind == "degenerate":
        return f"Not a quadratic ({result.variable}^2 coefficient is 0); the formula gives {r1} and {r2}."
    if result.root_kind == "repeated":
        return f"One repeated root at approximately {_sig(r1)}."
    return f"The roots are approximately {_sig(r1)} and {_sig(r2)}."

def coefficients_payload(coefficients: Dict[int, float]) -> Dict[str, Union[float, str]]:
    # JSON object keys must be strings
    return {str(e): json_float(c) for e, c in sorted(coefficients.items())}
