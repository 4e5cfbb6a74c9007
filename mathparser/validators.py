"""
Django validator for fields that store expression formulas.
"""
from typing import Mapping, Optional

from django.core.exceptions import ValidationError
from django.utils.deconstruct import deconstructible

from .errors import (
    ArityMismatchError,
    LexerError,
    UnbalancedBracketsError,
    UnexpectedTokenError,
    UnknownFunctionError,
)
from .scanner import GrammarScanner
from .tokenizer import Tokenizer


@deconstructible
class ExpressionValidator:
    """Reject formulas that are not syntactically valid expressions."""

    codes = {
        UnexpectedTokenError: "unexpected_token",
        ArityMismatchError: "arity_mismatch",
        UnbalancedBracketsError: "unbalanced_brackets",
    }

    def __init__(self, functions: Optional[Mapping[str, int]] = None,
                 constants: Optional[Mapping[str, float]] = None):
        self.functions = functions
        self.constants = constants

    def __call__(self, value):
        try:
            tokens = Tokenizer(value, self.functions, self.constants).generate_tokens()
        except LexerError as e:
            raise ValidationError(str(e), code="invalid_character")

        try:
            result = GrammarScanner(self.functions).scan(tokens)
        except UnknownFunctionError as e:
            raise ValidationError(str(e), code="unknown_function")

        if not result.ok:
            raise ValidationError(result.error.message, code=self.codes[type(result.error)])

    def __eq__(self, other):
        return (
            isinstance(other, ExpressionValidator)
            and self.functions == other.functions
            and self.constants == other.constants
        )


validate_expression = ExpressionValidator()
