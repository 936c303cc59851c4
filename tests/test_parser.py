import pytest

from tinycas.lexer import CasError, Token, TokenType, tokenize
from tinycas.parser import (
    BinaryOp,
    Equation,
    FunctionCall,
    Number,
    Paren,
    Parser,
    Variable,
    parse,
)


def parse_text(text):
    return parse(tokenize(text))


def test_bare_expression_assigns_to_ans():
    result = parse_text("1+2")
    assert result == Equation(
        Variable("ans"), BinaryOp(TokenType.PLUS, Number("1"), Number("2"))
    )


def test_assignment():
    assert parse_text("x = 3") == Equation(Variable("x"), Number("3"))


def test_parser_class_on_manual_tokens():
    tokens = [Token(TokenType.NUMBER, "7"), Token(TokenType.END)]
    assert Parser(tokens).parse() == Equation(Variable("ans"), Number("7"))


def test_multiplication_binds_tighter_than_addition():
    rhs = parse_text("1+2*3").rhs
    assert rhs.operator is TokenType.PLUS
    assert rhs.lhs == Number("1")
    assert rhs.rhs == BinaryOp(TokenType.MULTIPLY, Number("2"), Number("3"))


def test_subtraction_is_left_associative():
    rhs = parse_text("8-4-2").rhs
    assert rhs == BinaryOp(
        TokenType.MINUS,
        BinaryOp(TokenType.MINUS, Number("8"), Number("4")),
        Number("2"),
    )


def test_power_is_left_associative():
    rhs = parse_text("2^3^2").rhs
    assert rhs == BinaryOp(
        TokenType.POWER,
        BinaryOp(TokenType.POWER, Number("2"), Number("3")),
        Number("2"),
    )


def test_negative_literal():
    assert parse_text("-5").rhs == Number("-5")


def test_leading_minus_before_variable_becomes_multiplication():
    assert parse_text("-x").rhs == BinaryOp(
        TokenType.MULTIPLY, Number("-1"), Variable("x")
    )


def test_implicit_multiplication():
    assert parse_text("2x").rhs == BinaryOp(
        TokenType.MULTIPLY, Number("2"), Variable("x")
    )


def test_function_with_parenthesised_argument():
    assert parse_text("sin(x)").rhs == FunctionCall(
        TokenType.SIN, Paren(Variable("x"))
    )


def test_function_takes_only_a_term():
    rhs = parse_text("sqrt 4 + 1").rhs
    assert rhs == BinaryOp(
        TokenType.PLUS, FunctionCall(TokenType.SQRT, Number("4")), Number("1")
    )


def test_trailing_equals_is_consumed():
    assert parse_text("x=") == Equation(Variable("ans"), Variable("x"))


def test_parenthesised_negative_is_allowed():
    rhs = parse_text("2+(-3)").rhs
    assert rhs == BinaryOp(TokenType.PLUS, Number("2"), Paren(Number("-3")))


@pytest.mark.parametrize(
    "text, message",
    [
        ("3--5", "Right side of subtraction cannot directly be a negative number"),
        ("2*-x", "Right side of multiplication cannot directly be a negative number"),
        ("2+-3^2", "Right side of addition cannot directly be a negative number"),
        ("2^sqrt -4", "Right side of power cannot directly be a negative number"),
    ],
)
def test_negative_right_operand_is_rejected(text, message):
    with pytest.raises(CasError, match=message):
        parse_text(text)


def test_missing_right_parenthesis():
    with pytest.raises(CasError, match="Expected right parenthesis after expression"):
        parse_text("(1+2")


def test_missing_operand():
    with pytest.raises(CasError, match="Expected term but got End"):
        parse_text("1+")


def test_empty_input():
    with pytest.raises(CasError, match="Expected term but got End"):
        parse_text("")


def test_unknown_token():
    with pytest.raises(CasError, match=r"Unknown token: \$"):
        parse_text("2 $ 3")


def test_function_of_function_is_rejected():
    with pytest.raises(CasError, match="Expected term but got Sine"):
        parse_text("sin sin x")