"""
Expression package for parencalc.

Tokenizer, composable token streams and the recursive-descent grammar that
evaluates fully-parenthesized arithmetic.
"""

from .errors import (
    DivisionByZeroError,
    EmptyExpressionError,
    ExpressionError,
    ExpressionTooDeepError,
    MalformedNumberError,
    UnbalancedParenthesesError,
    UnexpectedTokenError,
)
from .stream import (
    AppendTokenStream,
    BufferedTokenStream,
    PrependTokenStream,
    TokenStream,
)
from .symbols import SymbolClassifier
from .syntax import (
    BraceSyntax,
    ExpressionSyntax,
    GlobalSyntax,
    NumberSyntax,
    Syntax,
    evaluate,
    stream_evaluate,
)
from .tokenizer import Tokenizer, tokenize
from .value import OPERATIONS, Value, constant

__all__ = [
    "AppendTokenStream",
    "BraceSyntax",
    "BufferedTokenStream",
    "DivisionByZeroError",
    "EmptyExpressionError",
    "ExpressionError",
    "ExpressionTooDeepError",
    "ExpressionSyntax",
    "GlobalSyntax",
    "MalformedNumberError",
    "NumberSyntax",
    "OPERATIONS",
    "PrependTokenStream",
    "SymbolClassifier",
    "Syntax",
    "TokenStream",
    "Tokenizer",
    "UnbalancedParenthesesError",
    "UnexpectedTokenError",
    "Value",
    "constant",
    "evaluate",
    "stream_evaluate",
    "tokenize",
]
