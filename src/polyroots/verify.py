from __future__ import annotations
import math
from typing import Dict, List, Optional, Sequence

from sympy import Float, Poly, symbols

from .types import CoefficientMap

TOL = 1e-6

_x = symbols("x")

def _poly(cm: CoefficientMap) -> Optional[Poly]:
    # None when a coefficient is inf/nan; SymPy cannot build a polynomial from those
    if not all(math.isfinite(c) for c in cm.values()):
        return None
    return Poly(sum((Float(c) * _x**e for e, c in cm.items()), Float(0)), _x)

def residual(cm: CoefficientMap, root: float) -> float:
    # Value of the parsed polynomial at `root`; NaN when it cannot be evaluated.
    p = _poly(cm)
    if p is None or not math.isfinite(root):
        return math.nan
    return float(p.eval(Float(root)))

def residual_check(cm: CoefficientMap, roots: Sequence[float], tol: float = TOL) -> Dict[str, bool]:
    # Relative to the largest coefficient so scaled polynomials share one tolerance.
    scale = max([1.0] + [abs(c) for c in cm.values() if math.isfinite(c)])
    out: Dict[str, bool] = {}
    for i, r in enumerate(roots, start=1):
        res = residual(cm, r)
        out[f"root{i}_ok"] = math.isfinite(res) and abs(res) <= tol * scale * max(1.0, r * r)
    return out

def reference_roots(cm: CoefficientMap) -> List[complex]:
    """Numeric roots computed by SymPy, used to cross-check the closed form."""
    p = _poly(cm)
    if p is None or p.is_zero or p.degree() < 1:
        return []
    return [complex(r) for r in p.nroots()]
