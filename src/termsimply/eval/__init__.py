"""Interpreter and operational semantics."""

from termsimply.eval.errors import (
    ApplicationOfNonFunction,
    EvalError,
    EvaluationDepthExceeded,
    IntegerOverflow,
    NonIntegerAddition,
    NonIntegerPredicate,
    UnboundVariable,
)
from termsimply.eval.machine import Evaluator, evaluate
from termsimply.eval.value import ValueEnvironment, VClosure, VInt, Value

__all__ = [
    "Evaluator",
    "evaluate",
    "Value",
    "VInt",
    "VClosure",
    "ValueEnvironment",
    "EvalError",
    "UnboundVariable",
    "NonIntegerAddition",
    "NonIntegerPredicate",
    "ApplicationOfNonFunction",
    "IntegerOverflow",
    "EvaluationDepthExceeded",
]
