import json
import math
from polyroots import Expression, Solver
from polyroots.tracer import Tracer

def test_steps_keep_order_and_kinds():
    t = Tracer()
    t.add("input", formula="x^2+-4")
    t.add("discriminant", D=16.0)
    assert t.steps() == [
        {"kind": "input", "detail": {"formula": "x^2+-4"}},
        {"kind": "discriminant", "detail": {"D": 16.0}},
    ]

def test_non_finite_floats_are_encoded_at_any_depth():
    t = Tracer()
    t.add("roots", root1=math.nan, root2=-math.inf, extra={"values": [math.inf, 1.5]})
    detail = t.steps()[0]["detail"]
    assert detail == {"root1": "NaN", "root2": "-Infinity", "extra": {"values": ["Infinity", 1.5]}}

def test_solver_trace_is_strict_json():
    res = Solver().solve(Expression("x", "2x+1"))
    text = json.dumps(res.trace, allow_nan=False)
    roots = [s for s in json.loads(text) if s["kind"] == "roots"][0]["detail"]
    assert roots["root1"] == "NaN"
    assert roots["root2"] == "-Infinity"
    assert roots["root_kind"] == "degenerate"

def test_error_step_names_the_term():
    res = Solver().solve(Expression("x", "x^2+4q"))
    step = res.trace[-1]
    assert step["kind"] == "error"
    assert step["detail"]["error_kind"] == "user_input"
    assert step["detail"]["term"] == "4q"
