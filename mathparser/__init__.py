"""
Arithmetic expression DSL.

Validates classified token sequences against the expression grammar and
evaluates expression trees to floating point numbers.
"""

from .tokenizer import Tokenizer
from .scanner import GrammarScanner, ScanResult
from .evaluator import Evaluator, Function, evaluate

__all__ = ['Tokenizer', 'GrammarScanner', 'ScanResult', 'Evaluator', 'Function', 'evaluate']
