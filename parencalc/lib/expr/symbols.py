"""
Character classification for the tokenizer.

Every character maps to an integer kind; a token boundary is wherever the kind
changes between adjacent characters. Parentheses carry a kind derived from the
nesting depth, so two adjacent parentheses always differ and never merge into
one token.
"""

from typing import Final, Self

LETTER: Final[int] = 0
NUMERIC: Final[int] = 1
SPACE: Final[int] = 2
SYMBOL: Final[int] = 3

# First parenthesis kind; must stay clear of the fixed kinds above
BRACE_BASE: Final[int] = 4

DECIMAL_POINT: Final[str] = "."


def numeric_is(character: str) -> bool:
    """True for characters that belong to a number literal."""
    return character.isdecimal() or character == DECIMAL_POINT


class SymbolClassifier:
    """Stateful character classifier.

    The depth counter is never reset, so one instance serves exactly one
    tokenization pass.

    Attributes:
        depth: Kind handed to the next parenthesis
    """

    def __init__(self: Self, depth: int = BRACE_BASE) -> None:
        self.depth: int = depth

    def kind(self: Self, character: str) -> int:
        """Classify one character.

        Args:
            character: A single character

        Returns:
            int: The character kind
        """
        if character.isalpha():
            return LETTER
        if numeric_is(character):
            return NUMERIC
        if character.isspace():
            return SPACE
        if character == "(":
            kind: int = self.depth
            self.depth += 1
            return kind
        if character == ")":
            kind = self.depth
            self.depth -= 1
            return kind
        return SYMBOL
