from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class TokenType(Enum):
    VARIABLE = auto()
    CONSTANT = auto()
    NUMBER = auto()
    BINARY_OP = auto()
    UNARY_OP = auto()
    FUNCTION_NAME = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    FUNC_SEPARATOR = auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str
    position: Optional[int] = None  # offset in the source text, if known

    def __str__(self):
        return self.text

    def __repr__(self):
        return f"Token({self.type.name}, {self.text!r})"
