"""Tests for deferred values."""

import pytest
from unittest.mock import Mock
from parencalc.lib.expr import DivisionByZeroError, OPERATIONS, constant
from parencalc.lib.expr.value import ZERO


def test_constant_reads_back():
    assert constant(2.5)() == 2.5
    assert ZERO() == 0.0


@pytest.mark.parametrize(
    "symbol, expected",
    [("+", 8.0), ("-", 4.0), ("*", 12.0), ("/", 3.0)],
)
def test_operations(symbol, expected):
    assert OPERATIONS[symbol](constant(6.0), constant(2.0))() == expected


def test_combining_does_no_arithmetic():
    left = Mock(return_value=1.0)
    right = Mock(return_value=2.0)
    value = OPERATIONS["+"](left, right)
    left.assert_not_called()
    right.assert_not_called()
    assert value() == 3.0
    assert value() == 3.0
    assert left.call_count == 2


def test_division_by_zero_raised_on_read():
    value = OPERATIONS["/"](constant(1.0), constant(0.0))
    with pytest.raises(DivisionByZeroError):
        value()
