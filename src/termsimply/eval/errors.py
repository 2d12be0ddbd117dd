"""Runtime errors raised by the evaluator."""

from termsimply.eval.value import Value


class EvalError(Exception):
    """Base class for evaluation errors."""

    def __init__(self, message: str):
        super().__init__(f"{type(self).__name__}: {message}")


class UnboundVariable(EvalError):
    """Variable has no binding in scope."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unbound variable {name!r}")


class NonIntegerAddition(EvalError):
    """Addition with a closure operand."""

    def __init__(self, lhs: Value, rhs: Value):
        self.lhs = lhs
        self.rhs = rhs
        super().__init__(f"cannot add {lhs} and {rhs}")


class NonIntegerPredicate(EvalError):
    """Zero test on a closure."""

    def __init__(self, value: Value):
        self.value = value
        super().__init__(f"predicate evaluated to {value}, expected an integer")


class ApplicationOfNonFunction(EvalError):
    """Application whose callee is an integer."""

    def __init__(self, value: Value):
        self.value = value
        super().__init__(f"cannot apply {value}")


class IntegerOverflow(EvalError):
    """Integer outside the configured signed width."""

    def __init__(self, value: int, width: int):
        self.value = value
        self.width = width
        super().__init__(f"{value} does not fit in {width} bits")


class EvaluationDepthExceeded(EvalError):
    """Evaluation nested deeper than the recursion budget."""

    def __init__(self, limit: int | None):
        self.limit = limit
        if limit is None:
            super().__init__("evaluation exhausted the host stack")
        else:
            super().__init__(f"evaluation exceeded depth {limit}")
