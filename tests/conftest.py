import pytest

from mathparser.tokenizer import Tokenizer


ARITIES = {"sin": 1, "cos": 1, "ln": 1, "max": 2, "clamp": 3}


@pytest.fixture
def arities():
    return dict(ARITIES)


@pytest.fixture
def tokenize(arities):
    """Tokenize expression text with the test arity table."""
    def _tokenize(text):
        return Tokenizer(text, functions=arities).generate_tokens()
    return _tokenize
