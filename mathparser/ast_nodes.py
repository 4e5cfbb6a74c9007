"""
Expression tree nodes.

Nodes are immutable. Leaves reference a number, a variable or a named
constant; internal nodes carry an operator and own their operands.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union


class UnaryOperator(Enum):
    NEGATE = "-"
    SIN = "sin"
    COS = "cos"
    TAN = "tg"
    COT = "ctg"
    SQRT = "sqrt"
    EXP = "exp"
    LN = "ln"


class BinaryOperator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"


@dataclass(frozen=True)
class NumberNode:
    value: float


@dataclass(frozen=True)
class VariableNode:
    name: str


@dataclass(frozen=True)
class ConstantNode:
    name: str


@dataclass(frozen=True)
class UnaryOpNode:
    op: UnaryOperator
    operand: "Node"


@dataclass(frozen=True)
class BinaryOpNode:
    left: "Node"
    op: BinaryOperator
    right: "Node"


Node = Union[NumberNode, VariableNode, ConstantNode, UnaryOpNode, BinaryOpNode]
