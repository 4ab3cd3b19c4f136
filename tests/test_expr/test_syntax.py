"""Tests for the expression grammar."""

import pytest
from parencalc.lib.expr import (
    BraceSyntax,
    BufferedTokenStream,
    DivisionByZeroError,
    EmptyExpressionError,
    ExpressionSyntax,
    ExpressionTooDeepError,
    GlobalSyntax,
    MalformedNumberError,
    NumberSyntax,
    Syntax,
    UnbalancedParenthesesError,
    UnexpectedTokenError,
    evaluate,
)


@pytest.mark.parametrize("literal", ["0", "7", "42", "3.5", "0.25", "1000000"])
def test_single_literal(literal):
    assert evaluate(literal) == float(literal)


@pytest.mark.parametrize(
    "a, op, b, expected",
    [
        (7, "+", 2, 9.0),
        (7, "-", 2, 5.0),
        (7, "*", 2, 14.0),
        (7, "/", 2, 3.5),
        (1.5, "*", 4, 6.0),
    ],
)
def test_binary_matches_float_arithmetic(a, op, b, expected):
    assert evaluate(f"({a} {op} {b})") == expected


def test_left_to_right_without_precedence():
    assert evaluate("(10 - 4 - 3)") == (10 - 4) - 3
    assert evaluate("(8 / 2 / 2)") == 2.0
    assert evaluate("(1 + 2 * 3)") == 9.0


def test_nested_group_resolved_first():
    assert evaluate("(2 + (3 * 4))") == 14.0
    assert evaluate("((2 + 3) * 4)") == 20.0


def test_outer_parentheses_optional():
    assert evaluate("3 + 4") == evaluate("(3 + 4)") == 7.0


def test_end_to_end():
    assert evaluate("((1+2)*(3-1))") == 6.0


def test_deep_nesting():
    assert evaluate("((((5))))") == 5.0
    assert evaluate("(1 + (2 + (3 + (4))))") == 10.0


def test_leading_operator_applies_to_zero():
    assert evaluate("(- 5)") == -5.0


def test_second_operand_replaces_running_value():
    assert evaluate("(1 2)") == 2.0


def test_blank_line_is_zero():
    assert evaluate("   ") == 0.0


def test_empty_line():
    with pytest.raises(EmptyExpressionError):
        evaluate("")


def test_malformed_number():
    with pytest.raises(MalformedNumberError) as exc_info:
        evaluate("(1..2 + 3)")
    assert exc_info.value.token == "1..2"


def test_missing_close_paren():
    with pytest.raises(UnbalancedParenthesesError):
        evaluate("((1 + 2)")


def test_extra_close_paren():
    with pytest.raises(UnbalancedParenthesesError):
        evaluate("(1 + 2))")


def test_extra_close_paren_lenient():
    assert evaluate("(1 + 2))", strict=False) == 3.0


def test_operator_missing_operand():
    with pytest.raises(UnexpectedTokenError) as exc_info:
        evaluate("(1 +)")
    assert exc_info.value.token == ")"


def test_unknown_operand_strict():
    with pytest.raises(UnexpectedTokenError) as exc_info:
        evaluate("(1 + abc)")
    assert exc_info.value.token == "abc"


def test_unknown_operand_lenient_reads_zero():
    # historical fallback: the bad operand is silently zero
    assert evaluate("(1 + abc)", strict=False) == 1.0
    assert evaluate("(abc)", strict=False) == 0.0


def test_division_by_zero():
    with pytest.raises(DivisionByZeroError):
        evaluate("(1 / (2 - 2))")


def test_value_is_deferred():
    value = GlobalSyntax().value(BufferedTokenStream(["1", "/", "0"]))
    with pytest.raises(DivisionByZeroError):
        value()


def test_number_syntax_consumes_one_token():
    stream = BufferedTokenStream(["12", "+"])
    assert NumberSyntax().value(stream)() == 12.0
    assert stream.next() == "+"


def test_expression_syntax_stops_at_close():
    stream = BufferedTokenStream(["1", "+", "2", ")", "rest"])
    assert ExpressionSyntax().value(stream)() == 3.0
    assert stream.next() == "rest"


def test_brace_syntax_requires_open():
    with pytest.raises(UnexpectedTokenError):
        BraceSyntax().value(BufferedTokenStream(["1", ")"]))


def test_syntaxes_satisfy_protocol():
    for syntax in (NumberSyntax(), ExpressionSyntax(), BraceSyntax(), GlobalSyntax()):
        assert isinstance(syntax, Syntax)


def test_moderate_nesting_evaluates():
    assert evaluate("(" * 50 + "2" + ")" * 50) == 2.0
    assert evaluate(" + ".join(["1"] * 100)) == 100.0


@pytest.mark.parametrize(
    "line",
    [
        "(" + "+".join(["1"] * 3000) + ")",
        "(" * 2000 + "1" + ")" * 2000,
    ],
    ids=["long-chain", "deep-nesting"],
)
def test_too_deep_raises_expression_error(line):
    with pytest.raises(ExpressionTooDeepError) as error_info:
        evaluate(line)
    assert isinstance(error_info.value.__cause__, RecursionError)
