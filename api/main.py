# --- polyroots: Quadratic Parser & Solver API (FastAPI) ----------------------
# Purpose: Minimal API that (1) parses a formula string into coefficients and
# (2) solves it with the closed-form quadratic formula.
# ------------------------------------------------------------------------------

from __future__ import annotations
import os
from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any
from polyroots import Expression, CoefficientMap, Solver, ParseError, parse
from polyroots.formatters import json_float, coefficients_payload, paraphrase_roots
from polyroots.log import get_logger
from polyroots.verify import residual_check

# Load .env for external configuration (default variable, limits, log level)
load_dotenv()
DEFAULT_VARIABLE = os.getenv("DEFAULT_VARIABLE", "x")
MAX_FORMULA_LENGTH = int(os.getenv("MAX_FORMULA_LENGTH", "256"))

logger = get_logger("polyroots.api")

# FastAPI app with two main endpoints: /parse and /solve
app = FastAPI(title="polyroots Quadratic Solver API")

_solver = Solver()

# ----------------------------- Schemas ----------------------------------------
class ExpressionRequest(BaseModel):
    # Formula text such as "3x^2+4x+1"; variable defaults to DEFAULT_VARIABLE.
    formula: str = Field(min_length=1, max_length=MAX_FORMULA_LENGTH)
    variable: Optional[str] = Field(default=None, min_length=1, max_length=16)

class Parsed(BaseModel):
    # Output of /parse: the coefficient map keyed by exponent (as string).
    variable: str
    formula: str
    coefficients: Dict[str, Any]
    degree: Optional[int] = None

def _expression(req: ExpressionRequest) -> Expression:
    """Build the value object, mapping blank input to a 422 like other user errors."""
    try:
        return Expression(variable=req.variable or DEFAULT_VARIABLE, formula=req.formula)
    except ValueError as e:
        raise HTTPException(status_code=422, detail={"error": str(e), "error_kind": "user_input"})

# ----------------------------- Routes -----------------------------------------
@app.get("/health")
def health(): return {"ok": True}

@app.post("/parse", response_model=Parsed)
def parse_formula(req: ExpressionRequest):
    """
    Parser-only step: formula text -> {exponent: coefficient}.
    Unparseable terms are a client error (422) naming the offending term.
    """
    expr = _expression(req)
    try:
        cm = parse(expr)
    except ParseError as e:
        logger.info("rejected formula %r: %s", expr.formula, e)
        raise HTTPException(status_code=422, detail={
            "error": str(e), "error_kind": "user_input", "term": e.term,
        })
    return Parsed(
        variable=expr.variable,
        formula=expr.formula,
        coefficients=coefficients_payload(cm.as_dict()),
        degree=cm.degree,
    )

@app.post("/solve")
def solve(req: ExpressionRequest):
    """
    Core solving path:
    1) Parse the formula (failures come back as ok=false, error_kind=user_input).
    2) Apply the quadratic formula; NaN/Infinity roots are encoded as strings.
    3) Attach residual sanity checks for the roots.
    """
    expr = _expression(req)
    res = _solver.solve(expr)

    if not res.ok:
        # Same envelope as success, with the error annotated
        return {
            "ok": False,
            "variable": res.variable,
            "formula": res.formula,
            "roots": None,
            "discriminant": None,
            "coefficients": {},
            "root_kind": None,
            "paraphrase": paraphrase_roots(res),
            "steps": res.steps,
            "trace": res.trace,
            "checks": {},
            "error": res.error,
            "error_kind": res.error_kind,
        }

    checks = residual_check(CoefficientMap(res.coefficients), res.roots)
    return {
        "ok": True,
        "variable": res.variable,
        "formula": res.formula,
        "roots": [json_float(r) for r in res.roots],
        "discriminant": json_float(res.discriminant),
        "coefficients": coefficients_payload(res.coefficients),
        "root_kind": res.root_kind,
        "paraphrase": paraphrase_roots(res),
        "steps": res.steps,
        "trace": res.trace,
        "checks": checks,
    }
