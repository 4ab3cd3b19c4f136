"""
Deferred numeric values.

A `Value` is a zero-argument callable returning a float. Building one does no
arithmetic; the whole expression is computed when the outermost value is
called. Values are pure and may be read any number of times.
"""

import operator
from typing import Callable, Final
from parencalc.lib.expr.errors import DivisionByZeroError

Value = Callable[[], float]
Combinator = Callable[[Value, Value], Value]


def constant(number: float) -> Value:
    return lambda: number


ZERO: Final[Value] = constant(0.0)


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZeroError()
    return a / b


def binary(operation: Callable[[float, float], float]) -> Combinator:
    """Lift a float operation into a combinator over values."""

    def combine(a: Value, b: Value) -> Value:
        return lambda: operation(a(), b())

    return combine


OPERATIONS: Final[dict[str, Combinator]] = {
    "+": binary(operator.add),
    "-": binary(operator.sub),
    "*": binary(operator.mul),
    "/": binary(_divide),
}
