"""Human-readable dumps of token lists and expression trees."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .lexer import Token, TokenType, token_type_name
from .parser import BinaryOp, Expr, FunctionCall, Number, Paren, Variable

_INDENT_STEP = 4

_OPERATOR_LABELS = {
    TokenType.PLUS: "Add",
    TokenType.MINUS: "Sub",
    TokenType.MULTIPLY: "Mul",
    TokenType.DIVIDE: "Div",
    TokenType.POWER: "Pow",
}

_FUNCTION_LABELS = {
    TokenType.SQRT: "Sqrt",
    TokenType.SIN: "Sine",
    TokenType.COS: "Cos",
    TokenType.TAN: "Tan",
    TokenType.ASIN: "Arcsine",
    TokenType.ACOS: "Arccosine",
    TokenType.ATAN: "Arctangent",
}


def format_tokens(tokens: Iterable[Token]) -> str:
    """One line per token: its type name and, if present, its value."""
    lines = []
    for token in tokens:
        line = token_type_name(token.type)
        if token.value is not None:
            line += f", Value: {token.value}"
        lines.append(line + "\n")
    return "".join(lines)


def _ast_lines(expr: Expr | None, indent: int) -> Iterator[str]:
    if expr is None:
        return
    pad = " " * indent
    child = indent + _INDENT_STEP
    if isinstance(expr, Number):
        yield f"{pad}Number: {expr.value}\n"
    elif isinstance(expr, Variable):
        yield f"{pad}Variable: {expr.name}\n"
    elif isinstance(expr, Paren):
        yield f"{pad}Paren\n"
        yield from _ast_lines(expr.expr, child)
    elif isinstance(expr, BinaryOp):
        label = _OPERATOR_LABELS.get(expr.operator)
        if label is None:
            return
        yield f"{pad}{label}\n"
        yield from _ast_lines(expr.lhs, child)
        yield from _ast_lines(expr.rhs, child)
    elif isinstance(expr, FunctionCall):
        label = _FUNCTION_LABELS.get(expr.function)
        if label is None:
            return
        yield f"{pad}{label}\n"
        yield from _ast_lines(expr.argument, child)


def format_ast(expr: Expr | None, indent: int = 0) -> str:
    """Indented tree view of an expression."""
    return "".join(_ast_lines(expr, indent))


def print_tokens(tokens: Iterable[Token]) -> None:
    """Print the token dump followed by a blank line."""
    print(format_tokens(tokens))


def print_ast(expr: Expr | None, indent: int = 0) -> None:
    """Print the tree view of an expression."""
    print(format_ast(expr, indent), end="")