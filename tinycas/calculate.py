"""Numeric evaluation of parsed expressions."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Mapping

from .lexer import CasError, TokenType, tokenize
from .parser import BinaryOp, Equation, Expr, FunctionCall, Number, Paren, Variable, parse


def _divide(lhs: float, rhs: float) -> float:
    if rhs == 0:
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


def _power(base: float, exponent: float) -> float:
    if base < 0:
        return -_power(abs(base), exponent)
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.inf if base == 0 else math.nan


_BINARY: dict[TokenType, Callable[[float, float], float]] = {
    TokenType.PLUS: operator.add,
    TokenType.MINUS: operator.sub,
    TokenType.MULTIPLY: operator.mul,
    TokenType.DIVIDE: _divide,
    TokenType.POWER: _power,
}

_FUNCTIONS: dict[TokenType, Callable[[float], float]] = {
    TokenType.SQRT: math.sqrt,
    TokenType.SIN: math.sin,
    TokenType.COS: math.cos,
    TokenType.TAN: math.tan,
    TokenType.ASIN: math.asin,
    TokenType.ACOS: math.acos,
    TokenType.ATAN: math.atan,
    TokenType.LOG: math.log10,
    TokenType.LN: math.log,
}

_LOGARITHMS = frozenset({TokenType.LOG, TokenType.LN})


def _apply(function: TokenType, argument: float) -> float:
    implementation = _FUNCTIONS.get(function)
    if implementation is None:
        return 0.0
    try:
        return implementation(argument)
    except OverflowError:
        return math.inf
    except ValueError:
        if function in _LOGARITHMS and argument == 0:
            return -math.inf
        return math.nan


def _has_letter(name: str) -> bool:
    return any(char.isascii() and char.isalpha() for char in name)


def evaluate(expr: Expr, variables: Mapping[str, float] | None = None) -> float:
    """Compute the value of an expression, looking names up in ``variables``."""
    if isinstance(expr, Number):
        try:
            return float(expr.value)
        except ValueError:
            raise CasError(f"Invalid number: {expr.value}") from None
    if isinstance(expr, Variable):
        if variables is not None and _has_letter(expr.name) and expr.name in variables:
            return variables[expr.name]
        raise CasError(f"Variable {expr.name} does not exist")
    if isinstance(expr, Paren):
        return evaluate(expr.expr, variables)
    if isinstance(expr, BinaryOp):
        lhs = evaluate(expr.lhs, variables)
        rhs = evaluate(expr.rhs, variables)
        combine = _BINARY.get(expr.operator)
        return combine(lhs, rhs) if combine is not None else 0.0
    if isinstance(expr, FunctionCall):
        return _apply(expr.function, evaluate(expr.argument, variables))
    return 0.0


def evaluate_string(text: str) -> float:
    """Parse ``text`` and evaluate its right-hand side without variables."""
    equation: Equation = parse(tokenize(text))
    return evaluate(equation.rhs)