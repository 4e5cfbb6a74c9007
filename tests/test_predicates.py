"""
Tests for token predicates and the automaton edge table.
"""

import dataclasses

import pytest

from mathparser.predicates import (
    DisjunctionPredicate,
    EdgeSet,
    EdgeTable,
    State,
    TerminalPredicate,
)
from mathparser.tokens import Token, TokenType


class TestTerminalPredicate:

    def test_matches_its_own_type(self):
        """A terminal predicate accepts tokens of exactly its type."""
        predicate = TerminalPredicate(TokenType.NUMBER)

        assert predicate.matches(Token(TokenType.NUMBER, "3"))
        assert not predicate.matches(Token(TokenType.VARIABLE, "x"))

    def test_predicates_are_immutable(self):
        """Shared predicates cannot be mutated after wiring."""
        predicate = TerminalPredicate(TokenType.NUMBER)

        with pytest.raises(dataclasses.FrozenInstanceError):
            predicate.type = TokenType.VARIABLE


class TestDisjunctionPredicate:

    def test_matches_any_member(self):
        """A disjunction accepts a token when any member accepts it."""
        predicate = DisjunctionPredicate((
            TerminalPredicate(TokenType.BINARY_OP),
            TerminalPredicate(TokenType.RBRACKET),
        ))

        assert predicate.matches(Token(TokenType.BINARY_OP, "+"))
        assert predicate.matches(Token(TokenType.RBRACKET, ")"))
        assert not predicate.matches(Token(TokenType.LBRACKET, "("))

    def test_empty_disjunction_matches_nothing(self):
        """A disjunction without members rejects every token."""
        assert not DisjunctionPredicate(()).matches(Token(TokenType.NUMBER, "1"))


class TestEdgeTable:

    def test_operand_states_share_one_edge(self):
        """Variable, Constant, Number and ')' use the same successor set."""
        table = EdgeTable.default()
        edge = table.edge(State.VARIABLE)

        for state in (State.CONSTANT, State.NUMBER, State.RBRACKET):
            assert table.edge(state) is edge
            assert table.edge_set(state) is EdgeSet.OPERAND_FOLLOW

    def test_expression_start_edge_is_shared(self):
        """Operators, '(' and ',' accept the same successors as the start."""
        table = EdgeTable.default()
        edge = table.edge(State.MATH_EXP)

        for state in (State.BINARY_OP, State.LBRACKET, State.FUNC_SEPARATOR):
            assert table.edge(state) is edge

    def test_four_distinct_edge_sets(self):
        """The default grammar is wired with four successor sets."""
        table = EdgeTable.default()

        assert len({id(table.edge(state)) for state in State}) == 4

    def test_function_name_requires_bracket(self):
        """Only '(' may follow a function name."""
        edge = EdgeTable.default().edge(State.FUNCTION_NAME)

        assert edge.matches(Token(TokenType.LBRACKET, "("))
        for token_type in TokenType:
            if token_type is not TokenType.LBRACKET:
                assert not edge.matches(Token(token_type, "?"))

    def test_unary_operator_cannot_repeat(self):
        """A unary operator may not follow another unary operator."""
        edge = EdgeTable.default().edge(State.UNARY_OP)

        assert not edge.matches(Token(TokenType.UNARY_OP, "-"))
        assert edge.matches(Token(TokenType.LBRACKET, "("))

    def test_missing_state_rejected(self):
        """A table must define an edge for every state."""
        edges = {EdgeSet.OPERAND_START: TerminalPredicate(TokenType.NUMBER)}

        with pytest.raises(ValueError, match="States without an edge"):
            EdgeTable(edges, {State.MATH_EXP: EdgeSet.OPERAND_START})

    def test_undefined_edge_set_rejected(self):
        """Every edge set a state points to must be defined."""
        edges = {EdgeSet.OPERAND_START: TerminalPredicate(TokenType.NUMBER)}
        transitions = {state: EdgeSet.OPERAND_START for state in State}
        transitions[State.FUNCTION_NAME] = EdgeSet.FUNCTION_FOLLOW

        with pytest.raises(ValueError, match=r"Undefined edge sets: \['FUNCTION_FOLLOW'\]"):
            EdgeTable(edges, transitions)

    def test_state_after_token(self):
        """Consuming a token moves to the state named after its type."""
        assert State.after(Token(TokenType.FUNC_SEPARATOR, ",")) is State.FUNC_SEPARATOR
        assert State.after(Token(TokenType.NUMBER, "1")) is State.NUMBER
