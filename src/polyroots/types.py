# -----------------------------------------------------------------------------
# Types module: Shared value objects for the parser and solver
# Purpose:
#   Define the input expression (variable + formula text) and the parsed
#   coefficient map handed from the parser to the closed-form solver.
# -----------------------------------------------------------------------------

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

@dataclass(frozen=True)
class Expression:
    """
    A polynomial written as text in a single variable.
    Example:
        variable: "x"
        formula:  "3x^2+4x+1"
    Attributes:
        - variable: symbol used in the formula (one or more characters)
        - formula: additive terms separated by '+'; subtraction is written
          as a negative term, e.g. "x^2+-4"
    """
    variable: str
    formula: str

    def __post_init__(self):
        if not self.variable or not self.variable.strip():
            raise ValueError("Expression variable must be a non-empty symbol.")
        if not self.formula or not self.formula.strip():
            raise ValueError("Expression formula must be non-empty.")


class CoefficientMap(Mapping):
    """
    Read-only mapping exponent -> coefficient produced by the parser.
    Missing exponents read as 0.0 through `coefficient()`; plain `[]` access
    keeps normal Mapping semantics and raises KeyError.
    """

    def __init__(self, data: Optional[Dict[int, float]] = None):
        self._data: Dict[int, float] = dict(data or {})

    def __getitem__(self, exponent: int) -> float:
        return self._data[exponent]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"CoefficientMap({self._data!r})"

    def coefficient(self, exponent: int) -> float:
        # Never inserts: absent exponents are simply zero.
        return self._data.get(exponent, 0.0)

    @property
    def degree(self) -> Optional[int]:
        return max(self._data) if self._data else None

    def as_dict(self) -> Dict[int, float]:
        return dict(self._data)
