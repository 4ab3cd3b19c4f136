"""Errors raised while tokenizing, parsing or reading an expression."""


class ExpressionError(ValueError):
    """Base class for every fatal expression error."""


class EmptyExpressionError(ExpressionError):
    def __init__(self) -> None:
        super().__init__("empty expression")


class MalformedNumberError(ExpressionError):
    def __init__(self, token: str) -> None:
        super().__init__(f"malformed number: {token!r}")
        self.token = token


class UnexpectedTokenError(ExpressionError):
    def __init__(self, token: str, expected: str) -> None:
        super().__init__(f"unexpected token {token!r}, expected {expected}")
        self.token = token
        self.expected = expected


class UnbalancedParenthesesError(ExpressionError):
    def __init__(self, detail: str = "expression ended before ')'") -> None:
        super().__init__(f"unbalanced parentheses: {detail}")


class DivisionByZeroError(ExpressionError):
    def __init__(self) -> None:
        super().__init__("division by zero")


class ExpressionTooDeepError(ExpressionError):
    def __init__(self) -> None:
        super().__init__("expression nested or chained too deeply")
