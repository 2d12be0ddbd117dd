"""Core language AST.

Variables are referenced by name; every lambda carries the type of its
parameter. The same tree is walked by the type checker and the evaluator.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from termsimply.core.types import Type


def _check_identifier(name: object) -> None:
    if not isinstance(name, str) or not name:
        raise ValueError(f"Identifier must be a non-empty string, got {name!r}")


def _check_term(*terms: object) -> None:
    for term in terms:
        if not isinstance(term, Term):
            raise ValueError(f"Expected a term, got {term!r}")


def as_term(value: Term | int | str) -> Term:
    """Coerce an integer to a literal and a string to a variable."""
    match value:
        case Term():
            return value
        case bool():
            raise ValueError(f"Cannot use {value!r} as a term")
        case int():
            return IntLit(value)
        case str():
            return Var(value)
        case _:
            raise ValueError(f"Cannot use {value!r} as a term")


class Term:
    """Base class for terms."""

    def __add__(self, other: Term | int) -> Add:
        return Add(self, as_term(other))

    def __radd__(self, other: Term | int) -> Add:
        return Add(as_term(other), self)

    def __call__(self, *args: Term | int | str) -> Term:
        return functools.reduce(App, map(as_term, args), self)


@dataclass(frozen=True)
class IntLit(Term):
    """Integer literal."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Integer literal must be an int, got {self.value!r}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Var(Term):
    """Variable reference by name."""

    name: str

    def __post_init__(self) -> None:
        _check_identifier(self.name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Lambda(Term):
    """Lambda abstraction: λ(x:σ).t

    param_type is the annotation for the bound variable. It is only consulted
    by the type checker.
    """

    param: str
    param_type: Type
    body: Term

    def __post_init__(self) -> None:
        _check_identifier(self.param)
        if not isinstance(self.param_type, Type):
            raise ValueError(f"Lambda annotation must be a type, got {self.param_type!r}")
        _check_term(self.body)

    def __str__(self) -> str:
        return f"λ{self.param}:{self.param_type}. {self.body}"


@dataclass(frozen=True)
class App(Term):
    """Function application: f arg."""

    func: Term
    arg: Term

    def __post_init__(self) -> None:
        _check_term(self.func, self.arg)

    def __str__(self) -> str:
        return f"({self.func} {self.arg})"


@dataclass(frozen=True)
class Add(Term):
    """Integer addition."""

    lhs: Term
    rhs: Term

    def __post_init__(self) -> None:
        _check_term(self.lhs, self.rhs)

    def __str__(self) -> str:
        return f"({self.lhs} + {self.rhs})"


@dataclass(frozen=True)
class IfZero(Term):
    """Zero test: then_branch when the predicate is 0, else_branch otherwise."""

    predicate: Term
    then_branch: Term
    else_branch: Term

    def __post_init__(self) -> None:
        _check_term(self.predicate, self.then_branch, self.else_branch)

    def __str__(self) -> str:
        return f"ifz {self.predicate} then {self.then_branch} else {self.else_branch}"
