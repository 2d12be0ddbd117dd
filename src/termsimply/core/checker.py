"""Syntax-directed type checker.

Each case mirrors the evaluator in termsimply.eval.machine, computing the type
a term would produce instead of its value.
"""

from loguru import logger

from termsimply.core.ast import Add, App, IfZero, IntLit, Lambda, Term, Var
from termsimply.core.environment import Environment
from termsimply.core.errors import (
    ApplicationOfNonFunction,
    ArgumentTypeMismatch,
    CheckDepthExceeded,
    MismatchedBranchTypes,
    MismatchedOperandTypes,
    NonIntegerPredicate,
    UndefinedIdentifier,
)
from termsimply.core.types import Int, Type, TypeArrow, TypeInt

TypeEnvironment = Environment[Type]


class TypeChecker:
    """Type evaluator for the simply typed object language."""

    def infer(self, tenv: TypeEnvironment, term: Term) -> Type:
        """Compute the type of a term.

        Args:
            tenv: Types of the identifiers in scope
            term: Term to check

        Returns:
            The type of the term

        Raises:
            UndefinedIdentifier: If a variable is not in scope
            TypeError: Any other type error; the first one found aborts
        """
        match term:
            case IntLit(_):
                return Int

            case Var(name):
                try:
                    return tenv.lookup(name)
                except KeyError as e:
                    raise UndefinedIdentifier(name) from e

            case Add(lhs, rhs):
                return self._infer_add(tenv, lhs, rhs)

            case IfZero(predicate, then_branch, else_branch):
                return self._infer_if_zero(tenv, predicate, then_branch, else_branch)

            case Lambda(param, param_type, body):
                # The annotation is trusted; the body is checked under it
                body_type = self.infer(tenv.extend(param, param_type), body)
                return TypeArrow(param_type, body_type)

            case App(func, arg):
                return self._infer_app(tenv, func, arg)

            case _:
                raise ValueError(f"Unknown term type: {type(term)}")

    def _infer_add(self, tenv: TypeEnvironment, lhs: Term, rhs: Term) -> Type:
        left = self.infer(tenv, lhs)
        right = self.infer(tenv, rhs)
        match (left, right):
            case (TypeInt(), TypeInt()):
                return Int
            case _:
                raise MismatchedOperandTypes(received=[left, right], expected=[Int, Int])

    def _infer_if_zero(
        self, tenv: TypeEnvironment, predicate: Term, then_branch: Term, else_branch: Term
    ) -> Type:
        predicate_type = self.infer(tenv, predicate)
        then_type = self.infer(tenv, then_branch)
        else_type = self.infer(tenv, else_branch)
        if predicate_type != Int:
            raise NonIntegerPredicate(predicate_type)
        if then_type != else_type:
            raise MismatchedBranchTypes(then_type, else_type)
        return then_type

    def _infer_app(self, tenv: TypeEnvironment, func: Term, arg: Term) -> Type:
        func_type = self.infer(tenv, func)
        arg_type = self.infer(tenv, arg)
        match func_type:
            case TypeArrow(domain, codomain) if domain == arg_type:
                return codomain
            case TypeArrow(domain, _):
                raise ArgumentTypeMismatch(received=arg_type, expected=domain)
            case _:
                raise ApplicationOfNonFunction(func_type)


def type_check(tenv: TypeEnvironment | None, term: Term) -> Type:
    """Type-check a term under a type environment (empty when None)."""
    if tenv is None:
        tenv = Environment.empty()
    try:
        result = TypeChecker().infer(tenv, term)
    except RecursionError as e:
        logger.warning("typecheck.depth_exceeded")
        raise CheckDepthExceeded() from e
    logger.debug("typecheck.done type={}", result)
    return result
