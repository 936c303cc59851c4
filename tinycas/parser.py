"""Recursive-descent parser producing an expression tree from tokens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .lexer import (
    FUNCTIONS,
    CasError,
    Token,
    TokenType,
    binary_precedence,
    token_type_name,
)


@dataclass(frozen=True)
class Number:
    """A numeric literal, kept as the text it was written with."""

    value: str


@dataclass(frozen=True)
class Variable:
    """A reference to a named variable."""

    name: str


@dataclass(frozen=True)
class Paren:
    """A parenthesised sub-expression."""

    expr: Expr


@dataclass(frozen=True)
class BinaryOp:
    """An infix operation; ``operator`` is the operator's token type."""

    operator: TokenType
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True)
class FunctionCall:
    """A function applied to a single term; ``function`` is its token type."""

    function: TokenType
    argument: Expr


@dataclass(frozen=True)
class Equation:
    """A statement ``lhs = rhs``; a bare expression is assigned to ``ans``."""

    lhs: Expr
    rhs: Expr


Expr = Union[Number, Variable, Paren, BinaryOp, FunctionCall]

_OPERATION_NAMES = {
    TokenType.PLUS: "addition",
    TokenType.MINUS: "subtraction",
    TokenType.MULTIPLY: "multiplication",
    TokenType.DIVIDE: "division",
    TokenType.POWER: "power",
}


def _is_negative(expr: Expr) -> bool:
    """Whether an expression starts directly with a negative literal."""
    if isinstance(expr, Number):
        return expr.value.startswith("-")
    if isinstance(expr, Variable):
        return expr.name.startswith("-")
    if isinstance(expr, BinaryOp) and expr.operator is TokenType.POWER:
        return _is_negative(expr.lhs)
    if isinstance(expr, FunctionCall) and expr.function is TokenType.SQRT:
        return _is_negative(expr.argument)
    return False


class Parser:
    """Builds an :class:`Equation` from a token list."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0

    def parse(self) -> Equation:
        """Parse the tokens into an equation."""
        self._pos = 0
        lhs = self._expression()
        following = self._peek()
        if following is not None and following.type is not TokenType.END:
            return Equation(lhs, self._expression())
        return Equation(Variable("ans"), lhs)

    def _peek(self, offset: int = 0) -> Token | None:
        index = self._pos + offset
        return self._tokens[index] if index < len(self._tokens) else None

    def _advance(self) -> Token:
        if self._pos >= len(self._tokens):
            raise CasError("No more tokens to consume")
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def _accept(self, token_type: TokenType) -> Token | None:
        token = self._peek()
        if token is None or token.type is not token_type:
            return None
        self._pos += 1
        return token

    def _next_is_function(self) -> bool:
        token = self._peek()
        return token is not None and token.type in FUNCTIONS

    def _expression(self, min_precedence: int = 0) -> Expr:
        lhs = self._function() if self._next_is_function() else self._term()

        while (current := self._peek()) is not None:
            precedence = binary_precedence(current.type)
            if precedence is None or precedence < min_precedence:
                break
            operator = self._advance().type
            rhs = self._expression(precedence + 1)

            name = _OPERATION_NAMES.get(operator)
            if name is None:
                raise CasError(
                    f"Unexpected binary operator {token_type_name(operator)}"
                )
            if _is_negative(rhs):
                raise CasError(
                    f"Right side of {name} cannot directly be a negative number"
                )
            lhs = BinaryOp(operator, lhs, rhs)

        self._accept(TokenType.EQUALS)
        return lhs

    def _term(self) -> Expr:
        token = self._peek()
        if token is None:
            raise CasError("Expected term but got end of input")
        if token.type is TokenType.UNKNOWN:
            raise CasError(f"Unknown token: {token.value or ''}")

        following = self._peek(1)
        if (
            token.type is TokenType.MINUS
            and following is not None
            and following.type is TokenType.NUMBER
        ):
            self._advance()
            literal = self._advance()
            return Number(f"-{literal.value or ''}")
        if (literal := self._accept(TokenType.NUMBER)) is not None:
            return Number(literal.value or "")
        if (ident := self._accept(TokenType.VARIABLE)) is not None:
            return Variable(ident.value or "")
        if self._accept(TokenType.LPAREN) is not None:
            inner = self._expression()
            if self._accept(TokenType.RPAREN) is None:
                raise CasError("Expected right parenthesis after expression")
            return Paren(inner)
        raise CasError(f"Expected term but got {token_type_name(token.type)}")

    def _function(self) -> FunctionCall:
        function = self._advance().type
        return FunctionCall(function, self._term())


def parse(tokens: list[Token]) -> Equation:
    """Parse a token list into an equation."""
    return Parser(tokens).parse()