import math
import pytest
from polyroots import (
    Expression, CoefficientMap, parse, split_terms, tokenize_term,
    ParseError, MalformedTermError, UnsupportedExponentError,
)

def _parse(formula, var="x"):
    return parse(Expression(var, formula))

def test_explicit_coefficients():
    cm = _parse("3x^2+4x+1")
    assert cm == {0: 1.0, 1: 4.0, 2: 3.0}

def test_implicit_leading_coefficient_and_missing_degree_one():
    cm = _parse("x^2+4")
    assert cm == {0: 4.0, 2: 1.0}
    assert 1 not in cm

def test_negative_terms():
    cm = _parse("-3x^2+-4x+-1")
    assert cm == {0: -1.0, 1: -4.0, 2: -3.0}

def test_lone_minus_means_minus_one():
    assert _parse("-x^2+-x") == {2: -1.0, 1: -1.0}

def test_decimal_and_scientific_literals():
    assert _parse("0.5x^2+1e3x+-2.25") == {2: 0.5, 1: 1000.0, 0: -2.25}

def test_whitespace_around_terms():
    assert _parse(" 3x^2 + 4x + 1 ") == {0: 1.0, 1: 4.0, 2: 3.0}

def test_last_write_wins():
    assert _parse("1+2x+5") == {0: 5.0, 1: 2.0}

def test_single_digit_exponents():
    assert _parse("2x^0+7x^9") == {0: 2.0, 9: 7.0}

def test_multi_character_variable():
    assert _parse("2t2^2+-t2+3", var="t2") == {2: 2.0, 1: -1.0, 0: 3.0}

def test_other_variable_name():
    assert _parse("y^2+-9", var="y") == {2: 1.0, 0: -9.0}

def test_deterministic():
    assert _parse("3x^2+4x+1") == _parse("3x^2+4x+1")

def test_round_trip_from_coefficients():
    for a, b, c in [(3.0, 4.0, 1.0), (-2.5, 0.25, -7.0), (1.0, 1.0, 1.0), (10.0, -1.0, 0.0)]:
        formula = f"{a}x^2+{b}x+{c}"
        assert _parse(formula) == {0: c, 1: b, 2: a}

def test_split_terms():
    assert split_terms("3x^2+-4x+1") == ["3x^2", "-4x", "1"]
    assert split_terms("") == []

def test_tokenize_term():
    t = tokenize_term("-3x^2", "x")
    assert (t.coefficient, t.exponent, t.text) == (-3.0, 2, "-3x^2")
    assert tokenize_term("x", "x").exponent == 1
    assert tokenize_term("7", "x") == (7.0, 0, "7")

@pytest.mark.parametrize("formula", [
    "3y^2+1", "abc", "3x^2+4z", "xx", "3x++1", "3x^2+", "-", "3^2",
    "1_0x^2+1", "3 x^2+1", "1_000", "2.5 x", "0x10",
])
def test_malformed_terms(formula):
    with pytest.raises(MalformedTermError):
        _parse(formula)

@pytest.mark.parametrize("formula", ["x^", "x^a", "2x^2x"])
def test_bad_caret(formula):
    with pytest.raises(MalformedTermError):
        _parse(formula)

@pytest.mark.parametrize("formula", ["x^10+1", "3x^12", "x^-1"])
def test_multi_digit_exponent_rejected(formula):
    with pytest.raises(UnsupportedExponentError):
        _parse(formula)

def test_parse_error_is_value_error_with_term():
    with pytest.raises(ParseError) as ei:
        _parse("3x^2+4q+1")
    assert ei.value.term == "4q"
    assert isinstance(ei.value, ValueError)

def test_expression_rejects_blank_input():
    with pytest.raises(ValueError):
        Expression("x", "")
    with pytest.raises(ValueError):
        Expression(" ", "x^2")

def test_coefficient_map_default_zero_does_not_insert():
    cm = CoefficientMap({2: 1.0})
    assert cm.coefficient(1) == 0.0
    assert 1 not in cm
    assert len(cm) == 1
    with pytest.raises(KeyError):
        cm[1]

def test_coefficient_map_degree():
    assert CoefficientMap().degree is None
    assert _parse("x^2+4").degree == 2
    assert _parse("4").degree == 0

def test_non_finite_literals():
    cm = _parse("infx^2+nan")
    assert math.isinf(cm[2])
    assert math.isnan(cm[0])
