r"""
Recursive-descent grammar that evaluates fully-parenthesized expressions.

Each syntax reads from a shared `TokenStream` and returns a deferred `Value`:

- `GlobalSyntax` wraps the whole line in a synthetic `( ... )` so the outer
  parentheses may be omitted, then hands over to `BraceSyntax`.
- `BraceSyntax` consumes a `(` and hands over to `ExpressionSyntax`.
- `ExpressionSyntax` applies operators strictly left to right until it reads
  the matching `)`; nested groups recurse through `BraceSyntax`.
- `NumberSyntax` consumes one number token.

Lookahead is done by reading a token and pushing it back with
`stream.prepend(token)`; there is no peek buffer and no tree is built.

Operand policy:
    strict  - an operand that is neither a number nor `(` raises
              `UnexpectedTokenError`.
    lenient - such an operand is consumed and read as zero.

Example:
    value = GlobalSyntax().value(Tokenizer().read("(1 + 2) * 3"))
    value()  # 9.0
"""

from typing import Optional, Protocol, Self, runtime_checkable
from parencalc.lib.expr.errors import (
    ExpressionTooDeepError,
    MalformedNumberError,
    UnbalancedParenthesesError,
    UnexpectedTokenError,
)
from parencalc.lib.expr.stream import TokenStream
from parencalc.lib.expr.symbols import numeric_is
from parencalc.lib.expr.tokenizer import Tokenizer
from parencalc.lib.expr.value import OPERATIONS, ZERO, Combinator, Value, constant


@runtime_checkable
class Syntax(Protocol):
    """A grammar rule producing a value from a token stream."""

    def value(self: Self, stream: TokenStream) -> Value: ...


class NumberSyntax:
    """A single decimal literal."""

    def value(self: Self, stream: TokenStream) -> Value:
        token: Optional[str] = stream.next()
        if token is None:
            raise UnbalancedParenthesesError()
        try:
            number: float = float(token)
        except ValueError as e:
            raise MalformedNumberError(token) from e
        return constant(number)


class ExpressionSyntax:
    """Body of one parenthesized group, up to and including its `)`."""

    def __init__(self: Self, strict: bool = True) -> None:
        self.strict: bool = strict

    def nextValue(self: Self, stream: TokenStream) -> Value:
        """Read one operand: a number or a nested group."""
        token: Optional[str] = stream.next()
        if token is None:
            raise UnbalancedParenthesesError()
        if numeric_is(token[0]):
            return NumberSyntax().value(stream.prepend(token))
        if token == "(":
            return BraceSyntax(self.strict).value(stream.prepend(token))
        if self.strict:
            raise UnexpectedTokenError(token, "a number or '('")
        return ZERO

    def value(self: Self, stream: TokenStream) -> Value:
        value: Value = ZERO
        token: Optional[str] = stream.next()

        while token != ")":
            if token is None:
                raise UnbalancedParenthesesError()
            combine: Optional[Combinator] = OPERATIONS.get(token)
            if combine is not None:
                value = combine(value, self.nextValue(stream))
            else:
                # Not an operator: push it back and read it as the operand
                value = self.nextValue(stream.prepend(token))
            token = stream.next()

        return value


class BraceSyntax:
    """A `(` followed by an expression body."""

    def __init__(self: Self, strict: bool = True) -> None:
        self.strict: bool = strict

    def value(self: Self, stream: TokenStream) -> Value:
        token: Optional[str] = stream.next()
        if token is None:
            raise UnbalancedParenthesesError()
        if token != "(":
            raise UnexpectedTokenError(token, "'('")
        return ExpressionSyntax(self.strict).value(stream)


class GlobalSyntax:
    """Entry point: the whole line as one implicit group."""

    def __init__(self: Self, strict: bool = True) -> None:
        self.strict: bool = strict

    def value(self: Self, stream: TokenStream) -> Value:
        wrapped: TokenStream = stream.prepend("(").append(")")
        value: Value = BraceSyntax(self.strict).value(wrapped)
        # An extra ')' closes the implicit group early and leaves tokens behind
        if self.strict and wrapped.next() is not None:
            raise UnbalancedParenthesesError("unmatched ')'")
        return value


def stream_evaluate(stream: TokenStream, strict: bool = True) -> float:
    """Parse and read the expression held in `stream`.

    Raises:
        ExpressionTooDeepError: When nesting or operator chaining exceeds
            the interpreter's recursion limit
    """
    try:
        return GlobalSyntax(strict).value(stream)()
    except RecursionError as e:
        raise ExpressionTooDeepError() from e


def evaluate(line: str, strict: bool = True) -> float:
    """Tokenize, parse and read one expression line.

    Raises:
        ExpressionError: On any tokenizing, parsing or arithmetic failure
    """
    return stream_evaluate(Tokenizer().read(line), strict)
