"""
Pull-based token streams.

A stream hands out one token per `next()` call and `None` once it is
exhausted. Streams compose through two decorators:

- `prepend(*tokens)` returns `tokens` first, then everything the base yields.
  The grammar uses it to push back a token it has just read.
- `append(*tokens)` returns everything the base yields, then `tokens`.
  The grammar uses it to guarantee a closing `)`.

Decorators keep a reference to their base and never copy its remaining
tokens, so composing is O(1) no matter how long the line is.

Example:
    stream = BufferedTokenStream(["1", "+", "2"]).prepend("(").append(")")
    list(stream)  # ['(', '1', '+', '2', ')']
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Optional, Self


class TokenStream(ABC):
    """Forward-only token source terminated by `None`."""

    @abstractmethod
    def next(self: Self) -> Optional[str]:
        """Return the next token, or `None` at the end of the stream."""
        ...

    def prepend(self: Self, *tokens: str) -> "TokenStream":
        return PrependTokenStream(self, *tokens)

    def append(self: Self, *tokens: str) -> "TokenStream":
        return AppendTokenStream(self, *tokens)

    def __iter__(self: Self) -> Iterator[str]:
        """Drain the stream up to (not including) the end signal."""
        token: Optional[str] = self.next()
        while token is not None:
            yield token
            token = self.next()


class BufferedTokenStream(TokenStream):
    """Stream over a fixed sequence of tokens."""

    def __init__(self: Self, tokens: Iterable[str]) -> None:
        self.buffer: tuple[str, ...] = tuple(tokens)
        self.position: int = 0

    def next(self: Self) -> Optional[str]:
        if self.position < len(self.buffer):
            token: str = self.buffer[self.position]
            self.position += 1
            return token
        return None


class PrependTokenStream(TokenStream):
    """Yields the injected tokens, then delegates every call to the base."""

    def __init__(self: Self, stream: TokenStream, *tokens: str) -> None:
        self.stream: TokenStream = stream
        self.tokens: tuple[str, ...] = tokens
        self.position: int = 0

    def next(self: Self) -> Optional[str]:
        if self.position < len(self.tokens):
            token: str = self.tokens[self.position]
            self.position += 1
            return token
        return self.stream.next()


class AppendTokenStream(TokenStream):
    """Yields the base tokens, then the injected ones, then `None` for good.

    Base tokens are returned untouched. The base is not polled again once it
    has reported its end.
    """

    def __init__(self: Self, stream: TokenStream, *tokens: str) -> None:
        self.stream: TokenStream = stream
        self.tokens: tuple[str, ...] = tokens
        self.position: int = 0
        self.drained: bool = False

    def next(self: Self) -> Optional[str]:
        if not self.drained:
            token: Optional[str] = self.stream.next()
            if token is not None:
                return token
            self.drained = True
        if self.position < len(self.tokens):
            injected: str = self.tokens[self.position]
            self.position += 1
            return injected
        return None
