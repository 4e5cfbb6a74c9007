"""
Tests for the Django formula validator.
"""

import pytest
from django.core.exceptions import ValidationError

from mathparser.validators import ExpressionValidator, validate_expression


class TestExpressionValidator:

    def test_valid_formula_passes(self):
        """A valid formula raises nothing."""
        validate_expression("sqrt(x ^ 2 + 1) / (2 * pi)")

    @pytest.mark.parametrize("formula, code", [
        ("x + $", "invalid_character"),
        ("x * * 2", "unexpected_token"),
        ("x +", "unexpected_token"),
        ("(x + 1", "unbalanced_brackets"),
        ("x + 1)", "unbalanced_brackets"),
        ("foo(x)", "unknown_function"),
    ])
    def test_invalid_formula_codes(self, formula, code):
        """Each kind of violation maps to its own error code."""
        with pytest.raises(ValidationError) as exc_info:
            validate_expression(formula)

        assert exc_info.value.code == code

    def test_arity_mismatch(self):
        """Calls with the wrong argument count are rejected."""
        validator = ExpressionValidator(functions={"max": 2})

        with pytest.raises(ValidationError) as exc_info:
            validator("max(x)")

        assert exc_info.value.code == "arity_mismatch"
        assert "Too few arguments in 'max'" in exc_info.value.messages[0]

    def test_custom_functions(self):
        """Validators accept the functions they are configured with."""
        ExpressionValidator(functions={"max": 2})("max(x, 1)")

    def test_equality(self):
        """Validators with the same tables compare equal."""
        assert ExpressionValidator() == validate_expression
        assert ExpressionValidator(functions={"max": 2}) != validate_expression

    def test_unknown_function_message(self):
        """A call to a function outside the table names that function."""
        with pytest.raises(ValidationError) as exc_info:
            ExpressionValidator(functions={"max": 2})("1 + gamma (x)")

        assert exc_info.value.code == "unknown_function"
        assert exc_info.value.messages == ["Unknown function 'gamma'"]
