"""A small numeric calculator with variables, implicit multiplication and elementary functions."""

__version__ = "0.1.0"
__all__ = ["lexer", "parser", "debug", "calculate", "cas", "cli"]