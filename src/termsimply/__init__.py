"""A typed lambda calculus over the integers with a value evaluator and a
type evaluator that share one AST."""

from __future__ import annotations

from loguru import logger

from termsimply.config.settings import EvalSettings, load_settings
from termsimply.core import (
    Add,
    App,
    Environment,
    IfZero,
    Int,
    IntLit,
    Lambda,
    Term,
    Type,
    TypeArrow,
    TypeChecker,
    TypeEnvironment,
    TypeInt,
    Var,
    type_check,
)
from termsimply.core import errors as type_errors
from termsimply.eval import Evaluator, ValueEnvironment, VClosure, VInt, Value, evaluate
from termsimply.eval import errors as eval_errors

logger.disable("termsimply")


def run(
    term: Term,
    env: ValueEnvironment | None = None,
    tenv: TypeEnvironment | None = None,
    settings: EvalSettings | None = None,
) -> tuple[Type, Value]:
    """Type-check a term, then evaluate it.

    Well-typed terms always terminate, so the evaluator's depth budget is lifted
    once the checker accepts the term.

    Raises:
        termsimply.core.errors.TypeError: The term is rejected; it is not evaluated
        termsimply.eval.errors.EvalError: Evaluation failed
    """
    try:
        ty = type_check(tenv, term)
    except type_errors.TypeError as e:
        logger.info("run.rejected error={}", e)
        raise
    if settings is None:
        settings = load_settings().eval
    return ty, evaluate(env, term, settings.model_copy(update={"max_depth": None}))


__all__ = [
    "Term",
    "IntLit",
    "Var",
    "Lambda",
    "App",
    "Add",
    "IfZero",
    "Type",
    "TypeInt",
    "TypeArrow",
    "Int",
    "Environment",
    "TypeEnvironment",
    "ValueEnvironment",
    "Value",
    "VInt",
    "VClosure",
    "TypeChecker",
    "Evaluator",
    "type_check",
    "evaluate",
    "run",
    "type_errors",
    "eval_errors",
]
