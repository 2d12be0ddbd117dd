"""Tree-walking evaluator for the object language."""

from loguru import logger

from termsimply.config.settings import EvalSettings, load_settings
from termsimply.core.ast import Add, App, IfZero, IntLit, Lambda, Term, Var
from termsimply.core.environment import Environment
from termsimply.eval.errors import (
    ApplicationOfNonFunction,
    EvaluationDepthExceeded,
    IntegerOverflow,
    NonIntegerAddition,
    NonIntegerPredicate,
    UnboundVariable,
)
from termsimply.eval.value import ValueEnvironment, VClosure, VInt, Value


class Evaluator:
    """Call-by-value evaluator.

    Operands are evaluated left to right. Type annotations are ignored; a term
    that fails the type checker can still be run here and fails at the first
    stuck step instead.
    """

    def __init__(self, settings: EvalSettings | None = None) -> None:
        self.settings = settings if settings is not None else load_settings().eval
        self._int_bounds = self.settings.int_bounds()

    def evaluate(self, term: Term, env: ValueEnvironment | None = None) -> Value:
        """Evaluate term to a value.

        Raises:
            EvalError: The first runtime error reached
        """
        if env is None:
            env = Environment.empty()
        try:
            return self._evaluate(term, env, 0)
        except RecursionError as e:
            raise self._stack_exhausted() from e

    def apply(self, func: Value, arg: Value) -> Value:
        """Apply function value to argument."""
        try:
            return self._apply(func, arg, 0)
        except RecursionError as e:
            raise self._stack_exhausted() from e

    def _stack_exhausted(self) -> EvaluationDepthExceeded:
        logger.warning("eval.stack_exhausted")
        return EvaluationDepthExceeded(None)

    def _evaluate(self, term: Term, env: ValueEnvironment, depth: int) -> Value:
        if self.settings.max_depth is not None and depth > self.settings.max_depth:
            logger.warning("eval.depth_exceeded limit={}", self.settings.max_depth)
            raise EvaluationDepthExceeded(self.settings.max_depth)
        depth += 1

        match term:
            case IntLit(value):
                return self._make_int(value)

            case Var(name):
                try:
                    return env.lookup(name)
                except KeyError as e:
                    raise UnboundVariable(name) from e

            case Add(lhs, rhs):
                left = self._evaluate(lhs, env, depth)
                right = self._evaluate(rhs, env, depth)
                match (left, right):
                    case (VInt(x), VInt(y)):
                        return self._make_int(x + y)
                    case _:
                        raise NonIntegerAddition(left, right)

            case IfZero(predicate, then_branch, else_branch):
                match self._evaluate(predicate, env, depth):
                    case VInt(0):
                        return self._evaluate(then_branch, env, depth)
                    case VInt(_):
                        return self._evaluate(else_branch, env, depth)
                    case other:
                        raise NonIntegerPredicate(other)

            case Lambda(param, _, body):
                # Capture the defining environment
                return VClosure(param, body, env)

            case App(func, arg):
                func_val = self._evaluate(func, env, depth)
                # Argument is evaluated even if func_val turns out not to be a closure
                arg_val = self._evaluate(arg, env, depth)
                return self._apply(func_val, arg_val, depth)

            case _:
                raise ValueError(f"Unknown term type: {type(term)}")

    def _apply(self, func: Value, arg: Value, depth: int) -> Value:
        match func:
            case VClosure(param, body, closure_env):
                return self._evaluate(body, closure_env.extend(param, arg), depth)
            case _:
                raise ApplicationOfNonFunction(func)

    def _make_int(self, value: int) -> VInt:
        if self._int_bounds is not None:
            low, high = self._int_bounds
            if not low <= value <= high:
                raise IntegerOverflow(value, self.settings.int_width)
        return VInt(value)


def evaluate(env: ValueEnvironment | None, term: Term, settings: EvalSettings | None = None) -> Value:
    """Evaluate a term under a value environment (empty when None)."""
    result = Evaluator(settings).evaluate(term, env)
    logger.debug("eval.done value={}", result)
    return result
