"""
Error types raised or reported by the expression DSL.

Scan errors are returned by ``GrammarScanner.scan`` as part of a
``ScanResult``; the remaining errors are raised directly.
"""
from typing import Optional


class MathParserError(Exception):
    """Base class for every error of the package."""


class ScanError(MathParserError):
    """An expression failed grammar validation."""

    def __init__(self, message, position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.position = position


class UnexpectedTokenError(ScanError):
    """The next token is not a legal successor of the current state.

    ``token`` is None when the expression ended where an operand was still
    required.
    """

    def __init__(self, token, state):
        if token is None:
            message = f"Unexpected end of expression after {state.name}"
            position = None
        else:
            message = f"Unexpected token '{token.text}' after {state.name}"
            position = token.position
        super().__init__(message, position)
        self.token = token
        self.state = state


class ArityMismatchError(ScanError):
    """A function call was closed with the wrong number of arguments."""

    def __init__(self, function: str, expected: int, actual: int, position: Optional[int] = None):
        qualifier = "Too few" if actual < expected else "Too many"
        message = f"{qualifier} arguments in '{function}': expected {expected}, got {actual}"
        super().__init__(message, position)
        self.function = function
        self.expected = expected
        self.actual = actual

    @property
    def too_few(self) -> bool:
        return self.actual < self.expected

    @property
    def too_many(self) -> bool:
        return self.actual > self.expected


class UnbalancedBracketsError(ScanError):
    """Brackets do not pair up; ``missing`` is the bracket that is lacking."""

    def __init__(self, missing: str, position: Optional[int] = None):
        super().__init__(f"Unbalanced brackets: missing '{missing}'", position)
        self.missing = missing


class UnknownFunctionError(MathParserError, LookupError):
    """A function name has no entry in the arity table."""

    def __init__(self, name: str):
        super().__init__(f"Unknown function '{name}'")
        self.name = name


class LexerError(MathParserError, ValueError):
    def __init__(self, text: str, position: int):
        super().__init__(f"Unexpected input '{text}' at position {position}")
        self.text = text
        self.position = position


class UndefinedNameError(MathParserError, LookupError):
    def __init__(self, name: str):
        super().__init__(f"Unknown variable '{name}'")
        self.name = name
