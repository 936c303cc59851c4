"""Tokenizer for calculator expressions, with implicit multiplication."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum, auto
from itertools import pairwise

PRECISION = 18
PI = 3.141592653589793238
PI_TEXT = "3.141592653589793238"


class CasError(Exception):
    """Raised when an expression cannot be tokenized, parsed or evaluated."""


class TokenType(Enum):
    NUMBER = auto()
    VARIABLE = auto()
    PLUS = auto()
    MINUS = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    POWER = auto()
    SQRT = auto()
    SIN = auto()
    COS = auto()
    TAN = auto()
    ASIN = auto()
    ACOS = auto()
    ATAN = auto()
    LOG = auto()
    LOGN = auto()
    LN = auto()
    LPAREN = auto()
    RPAREN = auto()
    EQUALS = auto()
    END = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str | None = None


FUNCTIONS = frozenset(
    {
        TokenType.SQRT,
        TokenType.SIN,
        TokenType.COS,
        TokenType.TAN,
        TokenType.ASIN,
        TokenType.ACOS,
        TokenType.ATAN,
        TokenType.LOG,
        TokenType.LN,
    }
)

_TYPE_NAMES = {
    TokenType.NUMBER: "Number",
    TokenType.VARIABLE: "Variable",
    TokenType.PLUS: "Plus",
    TokenType.MINUS: "Minus",
    TokenType.MULTIPLY: "Multiply",
    TokenType.DIVIDE: "Divide",
    TokenType.POWER: "Power",
    TokenType.SQRT: "Square root",
    TokenType.SIN: "Sine",
    TokenType.COS: "Cosine",
    TokenType.TAN: "Tangent",
    TokenType.ASIN: "Arcsine",
    TokenType.ACOS: "Arccosine",
    TokenType.ATAN: "Arctangent",
    TokenType.LOG: "Log",
    TokenType.LN: "Ln",
    TokenType.LPAREN: "Left parenthesis",
    TokenType.RPAREN: "Right parenthesis",
    TokenType.EQUALS: "Equals",
    TokenType.END: "End",
    TokenType.UNKNOWN: "Unknown",
}

_PRECEDENCE = {
    TokenType.PLUS: 1,
    TokenType.MINUS: 1,
    TokenType.MULTIPLY: 2,
    TokenType.DIVIDE: 2,
    TokenType.POWER: 3,
    **{function: 3 for function in FUNCTIONS},
}

_SYMBOLS = {
    "=": TokenType.EQUALS,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "^": TokenType.POWER,
}

# Checked in this order; the first prefix that matches wins.
_WORDS: tuple[tuple[str, TokenType, str | None], ...] = (
    ("sqrt", TokenType.SQRT, None),
    ("sin", TokenType.SIN, None),
    ("cos", TokenType.COS, None),
    ("tan", TokenType.TAN, None),
    ("asin", TokenType.ASIN, None),
    ("acos", TokenType.ACOS, None),
    ("atan", TokenType.ATAN, None),
    ("log", TokenType.LOG, None),
    ("ln", TokenType.LN, None),
    ("pi", TokenType.NUMBER, PI_TEXT),
    ("e", TokenType.NUMBER, f"{math.e:f}"),
    ("phi", TokenType.NUMBER, f"{(1 + math.sqrt(5)) / 2:f}"),
    ("tau", TokenType.NUMBER, f"{math.tau:f}"),
    ("ans", TokenType.VARIABLE, "ans"),
)

_VALUE_TYPES = frozenset({TokenType.NUMBER, TokenType.VARIABLE, TokenType.RPAREN})
_OPERAND_STARTS = frozenset({TokenType.VARIABLE, TokenType.NUMBER, TokenType.LPAREN})
_SPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_INTEGER = re.compile(r"[0-9]+")


def token_type_name(token_type: TokenType) -> str:
    """Human-readable name of a token type."""
    return _TYPE_NAMES.get(token_type, "InvalidTokenType")


def binary_precedence(token_type: TokenType) -> int | None:
    """Binding strength of an operator token, or None for non-operators."""
    return _PRECEDENCE.get(token_type)


def _is_alpha(char: str) -> bool:
    return char.isascii() and char.isalpha()


class Lexer:
    """Splits an expression string into tokens."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0

    def tokenize(self) -> list[Token]:
        """Return the tokens of the source, ending with an END token."""
        self._pos = 0
        tokens = []
        while self._pos < len(self._source):
            tokens.append(self._next_token())
        tokens.append(Token(TokenType.END))
        return _insert_implicit_multiplication(tokens)

    def _next_token(self) -> Token:
        source = self._source
        while self._pos < len(source) and source[self._pos] in _SPACE:
            self._pos += 1
        if self._pos >= len(source):
            return Token(TokenType.END)

        char = source[self._pos]
        if char in _DIGITS:
            return self._number()
        if _is_alpha(char):
            return self._word()

        self._pos += 1
        token_type = _SYMBOLS.get(char)
        if token_type is None:
            return Token(TokenType.UNKNOWN, char)
        return Token(token_type)

    def _number(self) -> Token:
        source = self._source
        whole = _INTEGER.match(source, self._pos)
        text = whole.group()
        self._pos = whole.end()

        if self._pos < len(source) and source[self._pos] in ".,":
            self._pos += 1
            fraction = _INTEGER.match(source, self._pos)
            if fraction is None:
                raise CasError("Expected digit after decimal point in number")
            text = f"{text}.{fraction.group()}"
            self._pos = fraction.end()

        return Token(TokenType.NUMBER, text)

    def _word(self) -> Token:
        for word, token_type, value in _WORDS:
            if self._source.startswith(word, self._pos):
                self._pos += len(word)
                return Token(token_type, value)
        char = self._source[self._pos]
        self._pos += 1
        return Token(TokenType.VARIABLE, char)


def _insert_implicit_multiplication(tokens: list[Token]) -> list[Token]:
    """Make juxtaposition explicit and turn a leading minus into -1 * ..."""
    result: list[Token] = []
    for current, following in pairwise(tokens):
        if (
            current.type is TokenType.MINUS
            and following.type is not TokenType.NUMBER
            and (not result or result[-1].type not in _VALUE_TYPES)
        ):
            result.append(Token(TokenType.NUMBER, "-1"))
            result.append(Token(TokenType.MULTIPLY))
            continue

        result.append(current)
        if current.type in _VALUE_TYPES and (
            following.type in FUNCTIONS or following.type in _OPERAND_STARTS
        ):
            result.append(Token(TokenType.MULTIPLY))

    result.append(tokens[-1])
    return result


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string."""
    return Lexer(source).tokenize()