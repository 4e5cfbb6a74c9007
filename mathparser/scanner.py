"""
Grammar validation of classified token sequences.

The scanner is a finite automaton keyed by the type of the previous token,
with a bracket counter and a stack of open function calls on the side. It
runs in a single forward pass and stops at the first violation.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional

from .errors import (
    ArityMismatchError,
    ScanError,
    UnbalancedBracketsError,
    UnexpectedTokenError,
    UnknownFunctionError,
)
from .functions import FUNCTION_ARITIES
from .predicates import OPERAND_STATES, EdgeTable, State
from .tokens import Token, TokenType

logger = logging.getLogger(__name__)


@dataclass
class FunctionCall:
    """An open function call during a scan."""

    name: str
    arity: int
    opening_depth: int
    separators: int = 0

    @property
    def arguments(self) -> int:
        return self.separators + 1


@dataclass(frozen=True)
class ScanResult:
    error: Optional[ScanError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self):
        return self.ok

    def raise_for_error(self):
        if self.error is not None:
            raise self.error


class GrammarScanner:
    """Validates token sequences against the arithmetic expression grammar.

    An instance keeps per-scan state and must not run two scans at once;
    it is reset at the start of every scan and can be reused afterwards.
    """

    def __init__(self, arities: Optional[Mapping[str, int]] = None, edges: Optional[EdgeTable] = None):
        self.arities = FUNCTION_ARITIES if arities is None else arities
        self.edges = edges or EdgeTable.default()
        self.reset()

    def reset(self):
        self.state = State.MATH_EXP
        self.depth = 0
        self.calls: List[FunctionCall] = []

    def scan(self, tokens: Iterable[Token]) -> ScanResult:
        self.reset()

        for token in tokens:
            error = self.advance(token)
            if error is not None:
                return self.reject(error)

        error = self.finish()
        if error is not None:
            return self.reject(error)
        return ScanResult()

    def check(self, tokens: Iterable[Token]) -> None:
        """Scan ``tokens`` and raise the first violation, if any."""
        self.scan(tokens).raise_for_error()

    def reject(self, error: ScanError) -> ScanResult:
        logger.debug(f"Expression rejected: {error}")
        return ScanResult(error)

    def advance(self, token: Token) -> Optional[ScanError]:
        if not self.edges.edge(self.state).matches(token):
            return UnexpectedTokenError(token, self.state)

        previous = self.state
        self.state = State.after(token)

        if token.type == TokenType.FUNCTION_NAME:
            self.enter_function(token)
        elif token.type == TokenType.LBRACKET:
            self.depth += 1
        elif token.type == TokenType.RBRACKET:
            return self.close_bracket(token)
        elif token.type == TokenType.FUNC_SEPARATOR:
            return self.next_argument(token, previous)
        return None

    def enter_function(self, token: Token) -> None:
        name = token.text
        if name not in self.arities:
            raise UnknownFunctionError(name)
        self.calls.append(FunctionCall(name, self.arities[name], self.depth))

    def close_bracket(self, token: Token) -> Optional[ScanError]:
        self.depth -= 1
        if self.depth < 0:
            return UnbalancedBracketsError("(", token.position)

        if self.calls and self.calls[-1].opening_depth == self.depth:
            call = self.calls.pop()
            if call.arguments != call.arity:
                return ArityMismatchError(call.name, call.arity, call.arguments, token.position)
        return None

    def next_argument(self, token: Token, previous: State) -> Optional[ScanError]:
        # Separators are only legal directly inside a call's own brackets
        if not self.calls or self.calls[-1].opening_depth + 1 != self.depth:
            return UnexpectedTokenError(token, previous)
        self.calls[-1].separators += 1
        return None

    def finish(self) -> Optional[ScanError]:
        if self.state not in OPERAND_STATES:
            return UnexpectedTokenError(None, self.state)
        if self.depth != 0:
            return UnbalancedBracketsError(")")
        return None


def scan(tokens: Iterable[Token], arities: Optional[Mapping[str, int]] = None) -> ScanResult:
    return GrammarScanner(arities).scan(tokens)
