from typing import Mapping, Optional

import numpy as np

from .ast_nodes import BinaryOpNode, ConstantNode, NumberNode, UnaryOpNode, VariableNode
from .errors import UndefinedNameError
from .functions import BINARY_OPERATIONS, CONSTANTS, UNARY_OPERATIONS


class Evaluator:
    """Evaluates expression trees against a name -> value context.

    Arithmetic follows IEEE-754: division by zero, ln of non-positive
    values and similar domain errors produce inf or nan instead of raising.
    """

    def __init__(self, context: Mapping[str, float], constants: Optional[Mapping[str, float]] = None):
        self.context = context  # {"x": 2.0}
        self.constants = CONSTANTS if constants is None else constants

    def eval(self, node) -> float:
        with np.errstate(all="ignore"):
            return float(self._eval(node))

    def _eval(self, node) -> np.float64:
        if isinstance(node, NumberNode):
            return np.float64(node.value)

        if isinstance(node, VariableNode):
            if node.name not in self.context:
                raise UndefinedNameError(node.name)
            return np.float64(self.context[node.name])

        if isinstance(node, ConstantNode):
            if node.name in self.context:
                return np.float64(self.context[node.name])
            if node.name not in self.constants:
                raise UndefinedNameError(node.name)
            return np.float64(self.constants[node.name])

        if isinstance(node, UnaryOpNode):
            return UNARY_OPERATIONS[node.op](self._eval(node.operand))

        if isinstance(node, BinaryOpNode):
            left = self._eval(node.left)
            right = self._eval(node.right)
            return BINARY_OPERATIONS[node.op](left, right)

        raise TypeError(f"Invalid AST node {node!r}")


def evaluate(node, environment: Mapping[str, float], constants: Optional[Mapping[str, float]] = None) -> float:
    return Evaluator(environment, constants).eval(node)


class Function:
    """A one-variable function backed by an expression tree.

    This is what the one-dimensional optimizers consume: ``f.evaluate(x)``
    binds ``x`` to ``variable`` and evaluates the tree.
    """

    def __init__(self, tree, variable: str = "x", constants: Optional[Mapping[str, float]] = None):
        self.tree = tree
        self.variable = variable
        self.constants = constants

    def evaluate(self, x: float) -> float:
        return Evaluator({self.variable: x}, self.constants).eval(self.tree)

    __call__ = evaluate
