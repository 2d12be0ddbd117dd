"""Value representations for the interpreter."""

from __future__ import annotations

from dataclasses import dataclass

from termsimply.core.ast import Term
from termsimply.core.environment import Environment


@dataclass(frozen=True)
class VInt:
    """Runtime integer value.

    Created by evaluating IntLit and Add terms.
    """

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class VClosure:
    """Lambda closure: λx.e with captured environment."""

    param: str
    body: Term
    env: "ValueEnvironment"  # Environment at the lambda, not at the call site

    def __str__(self) -> str:
        return "(Closure)"


# Sum type for all values
Value = VInt | VClosure

ValueEnvironment = Environment[Value]
