import math

import numpy as np

from .ast_nodes import BinaryOperator, UnaryOperator


# Required argument count of every function the tokenizer and scanner know.
FUNCTION_ARITIES = {
    "sin": 1,
    "cos": 1,
    "tg": 1,
    "tan": 1,
    "ctg": 1,
    "cot": 1,
    "sqrt": 1,
    "exp": 1,
    "ln": 1,
}

CONSTANTS = {
    "pi": math.pi,
    "e": math.e,
}


UNARY_OPERATIONS = {
    UnaryOperator.NEGATE: np.negative,
    UnaryOperator.SIN: np.sin,
    UnaryOperator.COS: np.cos,
    UnaryOperator.TAN: np.tan,
    # Historical behavior: "ctg" evaluates arctan, not 1 / tan.
    UnaryOperator.COT: np.arctan,
    UnaryOperator.SQRT: np.sqrt,
    UnaryOperator.EXP: np.exp,
    UnaryOperator.LN: np.log,
}

BINARY_OPERATIONS = {
    BinaryOperator.ADD: np.add,
    BinaryOperator.SUBTRACT: np.subtract,
    BinaryOperator.MULTIPLY: np.multiply,
    BinaryOperator.DIVIDE: np.divide,
    BinaryOperator.POWER: np.power,
}
