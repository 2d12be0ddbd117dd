"""Type representations for the object language."""

from __future__ import annotations

from dataclasses import dataclass


class Type:
    """Base class for types."""

    pass


@dataclass(frozen=True)
class TypeInt(Type):
    """The integer type."""

    def __str__(self) -> str:
        return "Int"


@dataclass(frozen=True)
class TypeArrow(Type):
    """Function type: σ → τ.

    Arrows associate to the right when printed, so a domain that is itself an
    arrow is parenthesised:
        TypeArrow(TypeArrow(Int, Int), Int)  =>  (Int -> Int) -> Int
    """

    domain: Type
    codomain: Type

    def __post_init__(self) -> None:
        if not isinstance(self.domain, Type) or not isinstance(self.codomain, Type):
            raise ValueError(f"Arrow components must be types, got {self.domain!r}, {self.codomain!r}")

    def __str__(self) -> str:
        match self.domain:
            case TypeArrow():
                domain_str = f"({self.domain})"
            case _:
                domain_str = str(self.domain)
        return f"{domain_str} -> {self.codomain}"


Int = TypeInt()
