"""
Line tokenizer.

Groups consecutive characters of the same kind into tokens and drops the
whitespace tokens:

    "( 12 + 3 )"  ->  ["(", "12", "+", "3", ")"]
"""

from typing import Callable, Self
from parencalc.lib.expr.errors import EmptyExpressionError
from parencalc.lib.expr.stream import BufferedTokenStream, TokenStream
from parencalc.lib.expr.symbols import SymbolClassifier


class Tokenizer:
    """Turns one line into a token stream.

    Attributes:
        classifier_factory: Builds the classifier for a single pass
    """

    def __init__(
        self: Self,
        classifier_factory: Callable[[], SymbolClassifier] = SymbolClassifier,
    ) -> None:
        self.classifier_factory: Callable[[], SymbolClassifier] = classifier_factory

    def tokens(self: Self, line: str) -> list[str]:
        """Split a line into its non-blank tokens.

        Args:
            line: The expression text

        Returns:
            list[str]: Tokens in document order

        Raises:
            EmptyExpressionError: If the line is empty
        """
        if not line:
            raise EmptyExpressionError()

        # Parenthesis kinds depend on depth, so each pass gets its own classifier
        classifier: SymbolClassifier = self.classifier_factory()
        tokens: list[str] = []
        token: str = line[0]
        last_kind: int = classifier.kind(line[0])

        for character in line[1:]:
            kind: int = classifier.kind(character)
            if kind != last_kind:
                tokens.append(token)
                token = ""
            token += character
            last_kind = kind
        if token:
            tokens.append(token)

        return [t for t in tokens if not t.isspace()]

    def read(self: Self, line: str) -> TokenStream:
        """Tokenize a line and expose the tokens as a stream."""
        return BufferedTokenStream(self.tokens(line))


def tokenize(line: str) -> list[str]:
    """Tokenize with a fresh default tokenizer."""
    return Tokenizer().tokens(line)
