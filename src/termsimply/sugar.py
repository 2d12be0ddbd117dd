"""Builders for writing object programs in Python.

    lam("x", Int, ifz(v("x"), 1, v("x") + 2))(10)
    lam([("f", arrow(Int, Int)), ("y", Int)], app(v("f"), app(v("f"), v("y"))))
"""

from __future__ import annotations

import functools

from termsimply.core.ast import App, IfZero, IntLit, Lambda, Term, Var, as_term
from termsimply.core.types import Type, TypeArrow

Param = tuple[str, Type]


def v(name: str) -> Var:
    return Var(name)


def lit(value: int) -> IntLit:
    return IntLit(value)


def lam(
    params: str | list[Param], param_type: Type | Term | int | str, body: Term | int | str | None = None
) -> Lambda:
    """Build a lambda, or nested lambdas from a list of (name, type) pairs.

    lam("x", Int, body) and lam([("x", Int)], body) are the same term.
    """
    match params:
        case list():
            if body is not None:
                raise ValueError("lam with a parameter list takes the body as its second argument")
            if not params:
                raise ValueError("lam needs at least one parameter")
            binding = as_term(param_type)
            for name, ty in reversed(params):
                binding = Lambda(name, ty, binding)
            return binding
        case str() as name:
            if body is None:
                raise ValueError(f"lam {name!r} is missing its body")
            return Lambda(name, param_type, as_term(body))
        case _:
            raise ValueError(f"Invalid lambda parameters: {params!r}")


def app(func: Term | str, *args: Term | int | str) -> Term:
    """Left-nested application: app(f, a, b) is ((f a) b)."""
    return functools.reduce(App, map(as_term, args), as_term(func))


def ifz(predicate: Term | int | str, then_branch: Term | int | str, else_branch: Term | int | str) -> IfZero:
    return IfZero(as_term(predicate), as_term(then_branch), as_term(else_branch))


def arrow(*types: Type) -> Type:
    """Right-folded arrow: arrow(a, b, c) is a -> (b -> c)."""
    if not types:
        raise ValueError("arrow needs at least one type")
    return functools.reduce(lambda codomain, domain: TypeArrow(domain, codomain), reversed(types))
