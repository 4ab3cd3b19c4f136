"""
Expression evaluation for parencalc.

Wraps the expression package behind a single call that never raises for bad
input: tokenizing, parsing and arithmetic failures come back as a failed
`EvalResult`.

Example:
    result = expression_evaluate("((1+2)*(3-1))")
    result.value   # 6.0
    result.tokens  # ['(', '(', '1', '+', '2', ')', '*', ...]
"""

from parencalc.config.settings import appsettings
from parencalc.lib.expr import ExpressionError, Tokenizer, stream_evaluate
from parencalc.lib.expr.stream import BufferedTokenStream
from parencalc.lib.log import LOG
from parencalc.models.dataModel import EvalResult


def expression_evaluate(text: str, strict: bool | None = None) -> EvalResult:
    """Evaluate one expression line.

    Args:
        text: The expression
        strict: Operand policy; None uses `appsettings.strictOperands`

    Returns:
        EvalResult with the value and tokens, or the error message
    """
    if strict is None:
        strict = appsettings.strictOperands

    tokens: list[str] = []
    try:
        tokens = Tokenizer().tokens(text)
        value: float = stream_evaluate(BufferedTokenStream(tokens), strict)
        return EvalResult(value=value, tokens=tokens, error=None, success=True)
    except ExpressionError as e:
        LOG(f"Error evaluating {text!r}: {e}")
        return EvalResult(value=None, tokens=tokens, error=str(e), success=False)


def result_format(value: float) -> str:
    """Render a result the way Python prints a float."""
    return str(value)
