# -----------------------------------------------------------------------------
# Solve trace
# Purpose:
#   Ordered record of what the solver did with one expression (input, parsed
#   terms, coefficients, discriminant, roots, or the parse error).
#   Floats are exported through json_float, so NaN/±inf roots and
#   coefficients come out as "NaN"/"Infinity"/"-Infinity" and steps() can be
#   handed to any strict JSON encoder as is.
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .formatters import json_float

def _encode(value: Any) -> Any:
    # Walk nested containers; only floats change
    if isinstance(value, float):
        return json_float(value)
    if isinstance(value, dict):
        return {k: _encode(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_encode(v) for v in value]
    return value

@dataclass(frozen=True)
class TraceStep:
    kind: str      # "input" | "parse" | "coefficients" | "ignored_terms" | "discriminant" | "roots" | "error"
    detail: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "detail": _encode(self.detail)}

@dataclass
class Tracer:
    """Per-solve collector; never shared between calls."""
    _steps: List[TraceStep] = field(default_factory=list)

    def add(self, kind: str, **detail: Any) -> None:
        self._steps.append(TraceStep(kind, dict(detail)))

    def steps(self) -> List[Dict[str, Any]]:
        return [s.to_dict() for s in self._steps]
