import logging
from typing import Mapping, Optional

from .errors import LexerError
from .functions import CONSTANTS, FUNCTION_ARITIES
from .tokens import Token, TokenType

logger = logging.getLogger(__name__)

BINARY_OPERATORS = "+*/^"

# After these a '-' negates the following operand instead of subtracting.
UNARY_CONTEXT = (TokenType.BINARY_OP, TokenType.UNARY_OP, TokenType.LBRACKET, TokenType.FUNC_SEPARATOR)

SINGLE_CHAR_TOKENS = {
    '(': TokenType.LBRACKET,
    ')': TokenType.RBRACKET,
    ',': TokenType.FUNC_SEPARATOR,
}


class Tokenizer:
    def __init__(self, text, functions: Optional[Mapping[str, int]] = None,
                 constants: Optional[Mapping[str, float]] = None):
        self.text = text
        self.functions = FUNCTION_ARITIES if functions is None else functions
        self.constants = CONSTANTS if constants is None else constants
        self.pos = 0
        self.current = text[0] if text else None
        self.tokens = []

    def advance(self):
        self.pos += 1
        self.current = self.text[self.pos] if self.pos < len(self.text) else None

    def skip_spaces(self):
        while self.current and self.current.isspace():
            self.advance()

    def number(self):
        start = self.pos
        while self.current and (self.current.isdigit() or self.current == '.'):
            self.advance()
        text = self.text[start:self.pos]
        try:
            float(text)
        except ValueError:
            raise LexerError(text, start) from None
        return Token(TokenType.NUMBER, text, start)

    def identifier(self):
        start = self.pos
        while self.current and (self.current.isalnum() or self.current == '_'):
            self.advance()
        name = self.text[start:self.pos]
        # Any name called like a function is one, known or not
        if name in self.functions or self.next_non_space() == '(':
            return Token(TokenType.FUNCTION_NAME, name, start)
        if name in self.constants:
            return Token(TokenType.CONSTANT, name, start)
        return Token(TokenType.VARIABLE, name, start)

    def next_non_space(self):
        rest = self.text[self.pos:].lstrip()
        return rest[0] if rest else None

    def minus(self):
        previous = self.tokens[-1] if self.tokens else None
        if previous is None or previous.type in UNARY_CONTEXT:
            return Token(TokenType.UNARY_OP, '-', self.pos)
        return Token(TokenType.BINARY_OP, '-', self.pos)

    def generate_tokens(self):
        self.pos = 0
        self.current = self.text[0] if self.text else None
        self.tokens = []
        while self.current:
            if self.current.isspace():
                self.skip_spaces()
                continue

            if self.current.isdigit() or self.current == '.':
                self.tokens.append(self.number())
                continue

            if self.current.isalpha() or self.current == '_':
                self.tokens.append(self.identifier())
                continue

            if self.current == '-':
                self.tokens.append(self.minus())
            elif self.current in BINARY_OPERATORS:
                self.tokens.append(Token(TokenType.BINARY_OP, self.current, self.pos))
            elif self.current in SINGLE_CHAR_TOKENS:
                self.tokens.append(Token(SINGLE_CHAR_TOKENS[self.current], self.current, self.pos))
            else:
                logger.debug(f"Unexpected character {self.current!r} in expression: {self.text}")
                raise LexerError(self.current, self.pos)

            self.advance()

        return self.tokens
