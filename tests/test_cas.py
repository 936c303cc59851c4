import pytest

from tinycas.cas import Cas
from tinycas.lexer import CasError


def test_assignment_returns_name_and_value():
    cas = Cas()
    assert cas.calc("x = 3") == ("x", 3.0)
    assert cas.get_variable("x") == 3.0


def test_bare_expression_goes_to_ans():
    cas = Cas()
    name, value = cas.calc("5")
    assert name == "ans"
    assert cas.get_variable("ans") == value == 5.0


def test_ans_can_be_reused():
    cas = Cas()
    _, first = cas.calc("5")
    _, second = cas.calc("ans + ans")
    assert second == 2 * first


def test_unset_variable_defaults_to_zero():
    assert Cas().get_variable("q") == 0.0


def test_set_variable_overwrites():
    cas = Cas()
    cas.set_variable("y", 1.5)
    cas.set_variable("y", 2.5)
    assert cas.get_variable("y") == 2.5


def test_set_variable_used_in_calc():
    cas = Cas()
    cas.set_variable("y", 2.5)
    assert cas.calc("y") == ("ans", 2.5)


def test_unknown_variable_raises():
    with pytest.raises(CasError, match="Variable y does not exist"):
        Cas().calc("y")


def test_left_side_must_be_variable():
    cas = Cas()
    with pytest.raises(CasError, match="Left hand side should be a variable but isn't"):
        cas.calc("3 = 4")
    assert cas.get_variable("ans") == 0.0


def test_implicit_multiplication_with_variable():
    cas = Cas()
    cas.calc("x = 3")
    _, implicit = cas.calc("2x")
    _, explicit = cas.calc("2*x")
    assert implicit == explicit


def test_reassignment_from_itself():
    cas = Cas()
    cas.calc("x = 4")
    cas.calc("x = x * x")
    assert cas.get_variable("x") == 16.0


def test_failed_statement_keeps_previous_values():
    cas = Cas()
    cas.calc("x = 4")
    with pytest.raises(CasError):
        cas.calc("x = z")
    assert cas.get_variable("x") == 4.0