"""Error types for the type checker.

Type errors only ever carry identifiers and types; runtime values belong to
termsimply.eval.errors.
"""

from termsimply.core.types import Type


class TypeError(Exception):
    """Base class for type errors."""

    def __init__(self, message: str):
        super().__init__(f"{type(self).__name__}: {message}")


class UndefinedIdentifier(TypeError):
    """Identifier not found in the type environment."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"undefined identifier {name!r}")


class MismatchedOperandTypes(TypeError):
    """Operands of an integer operator are not all Int."""

    def __init__(self, received: list[Type], expected: list[Type]):
        self.received = received
        self.expected = expected
        received_str = ", ".join(str(t) for t in received)
        expected_str = ", ".join(str(t) for t in expected)
        super().__init__(f"received [{received_str}], expected [{expected_str}]")


class NonIntegerPredicate(TypeError):
    """Zero test applied to a non-Int predicate."""

    def __init__(self, type: Type):
        self.type = type
        super().__init__(f"predicate has type {type}, expected Int")


class MismatchedBranchTypes(TypeError):
    """Branches of a zero test disagree."""

    def __init__(self, then_type: Type, else_type: Type):
        self.then_type = then_type
        self.else_type = else_type
        super().__init__(f"then branch is {then_type}, else branch is {else_type}")


class ApplicationOfNonFunction(TypeError):
    """Callee does not have an arrow type."""

    def __init__(self, type: Type):
        self.type = type
        super().__init__(f"cannot apply a value of type {type}")


class ArgumentTypeMismatch(TypeError):
    """Argument type differs from the callee's domain."""

    def __init__(self, received: Type, expected: Type):
        self.received = received
        self.expected = expected
        super().__init__(f"received {received}, expected {expected}")


class CheckDepthExceeded(TypeError):
    """Term nests deeper than the host stack allows the checker to follow."""

    def __init__(self):
        super().__init__("term is nested too deeply to check")
