"""
Token predicates and the edge table of the grammar automaton.

Each automaton state owns one outgoing edge: a predicate telling which
token may follow. Several states accept the same successors, so edges are
stored once in ``EdgeTable`` and states refer to them by ``EdgeSet``.
Predicates are frozen, so a shared edge can never drift apart from its
aliases.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Tuple

from .tokens import Token, TokenType


class State(Enum):
    """Automaton states: the start state plus one per token type."""

    MATH_EXP = auto()
    VARIABLE = auto()
    CONSTANT = auto()
    NUMBER = auto()
    BINARY_OP = auto()
    UNARY_OP = auto()
    FUNCTION_NAME = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    FUNC_SEPARATOR = auto()

    @classmethod
    def after(cls, token: Token) -> "State":
        """State reached by consuming ``token``."""
        return cls[token.type.name]


# States in which the expression may legally end.
OPERAND_STATES = frozenset({State.VARIABLE, State.CONSTANT, State.NUMBER, State.RBRACKET})


class EdgeSet(Enum):
    OPERAND_START = auto()
    OPERAND_FOLLOW = auto()
    UNARY_FOLLOW = auto()
    FUNCTION_FOLLOW = auto()


class TokenPredicate:
    def matches(self, token: Token) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class TerminalPredicate(TokenPredicate):
    type: TokenType

    def matches(self, token: Token) -> bool:
        return token.type == self.type


@dataclass(frozen=True)
class DisjunctionPredicate(TokenPredicate):
    predicates: Tuple[TokenPredicate, ...]

    def matches(self, token: Token) -> bool:
        return any(predicate.matches(token) for predicate in self.predicates)


class EdgeTable:
    """Maps automaton states to shared successor predicates."""

    def __init__(self, edges: Dict[EdgeSet, TokenPredicate], transitions: Dict[State, EdgeSet]):
        missing = set(State) - set(transitions)
        if missing:
            raise ValueError(f"States without an edge: {sorted(s.name for s in missing)}")
        undefined = set(transitions.values()) - set(edges)
        if undefined:
            raise ValueError(f"Undefined edge sets: {sorted(e.name for e in undefined)}")
        self.edges = dict(edges)
        self.transitions = dict(transitions)

    def edge(self, state: State) -> TokenPredicate:
        return self.edges[self.transitions[state]]

    def edge_set(self, state: State) -> EdgeSet:
        return self.transitions[state]

    @classmethod
    def default(cls) -> "EdgeTable":
        """Wire the arithmetic expression grammar.

        <MathExp>  ::= [<UnaryOp>] <Operand> { <BinaryOp> <Operand> }*
        <Operand>  ::= <Variable> | <Constant> | <Number> | <Function> | '(' <MathExp> ')'
        <Function> ::= <FunctionName> '(' <MathExp> { ',' <MathExp> }* ')'
        """
        terminals = {token_type: TerminalPredicate(token_type) for token_type in TokenType}

        def any_of(*token_types):
            return DisjunctionPredicate(tuple(terminals[t] for t in token_types))

        edges = {
            EdgeSet.OPERAND_START: any_of(
                TokenType.VARIABLE,
                TokenType.CONSTANT,
                TokenType.NUMBER,
                TokenType.FUNCTION_NAME,
                TokenType.LBRACKET,
                TokenType.UNARY_OP,
            ),
            EdgeSet.OPERAND_FOLLOW: any_of(
                TokenType.BINARY_OP,
                TokenType.RBRACKET,
                TokenType.FUNC_SEPARATOR,
            ),
            EdgeSet.UNARY_FOLLOW: any_of(
                TokenType.VARIABLE,
                TokenType.NUMBER,
                TokenType.CONSTANT,
                TokenType.FUNCTION_NAME,
                TokenType.LBRACKET,
            ),
            # A function name must be immediately followed by '('
            EdgeSet.FUNCTION_FOLLOW: terminals[TokenType.LBRACKET],
        }
        transitions = {
            State.MATH_EXP: EdgeSet.OPERAND_START,
            State.BINARY_OP: EdgeSet.OPERAND_START,
            State.LBRACKET: EdgeSet.OPERAND_START,
            State.FUNC_SEPARATOR: EdgeSet.OPERAND_START,
            State.VARIABLE: EdgeSet.OPERAND_FOLLOW,
            State.CONSTANT: EdgeSet.OPERAND_FOLLOW,
            State.NUMBER: EdgeSet.OPERAND_FOLLOW,
            State.RBRACKET: EdgeSet.OPERAND_FOLLOW,
            State.UNARY_OP: EdgeSet.UNARY_FOLLOW,
            State.FUNCTION_NAME: EdgeSet.FUNCTION_FOLLOW,
        }
        return cls(edges, transitions)
