"""Calculator session that keeps variables between statements."""

from __future__ import annotations

from .calculate import evaluate
from .lexer import CasError, tokenize
from .parser import Variable, parse


class Cas:
    """Evaluates statements and remembers assigned variables."""

    def __init__(self) -> None:
        self._variables: dict[str, float] = {}

    def set_variable(self, key: str, value: float) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        self._variables[key] = value

    def get_variable(self, key: str) -> float:
        """Value of ``key``, or 0 if it was never set."""
        return self._variables.get(key, 0.0)

    def calc(self, text: str) -> tuple[str, float]:
        """Evaluate a statement and assign the result; a bare expression goes to ``ans``."""
        equation = parse(tokenize(text))
        result = evaluate(equation.rhs, self._variables)
        if not isinstance(equation.lhs, Variable):
            raise CasError("Left hand side should be a variable but isn't")
        self.set_variable(equation.lhs.name, result)
        return equation.lhs.name, result