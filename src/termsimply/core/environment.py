"""Immutable environments shared by the type checker and the evaluator."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Generic, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class Environment(Generic[V]):
    """Mapping from identifiers to types (checker) or values (evaluator).

    - bindings: read-only view of this scope's bindings

    Extension copies the bindings into a new scope, so a child never affects
    its parent and closures can hold on to the scope they were built in.
    """

    bindings: Mapping[str, V] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "bindings", MappingProxyType(dict(self.bindings)))

    @staticmethod
    def empty() -> "Environment[V]":
        """Create an empty environment."""
        return Environment()

    @staticmethod
    def of(bindings: Mapping[str, V]) -> "Environment[V]":
        """Create an environment holding the given bindings."""
        return Environment(bindings)

    def lookup(self, name: str) -> V:
        """Look up the binding for a name.

        Args:
            name: Identifier to resolve

        Returns:
            The bound type or value

        Raises:
            KeyError: If the name is not bound in this scope
        """
        if name not in self.bindings:
            raise KeyError(name)
        return self.bindings[name]

    def get(self, name: str, default: V | None = None) -> V | None:
        return self.bindings.get(name, default)

    def extend(self, name: str, value: V) -> "Environment[V]":
        """Return a child scope binding name to value, shadowing any prior binding.

        Args:
            name: Identifier to bind
            value: Type or value to bind it to

        Returns:
            A new environment; the receiver is unchanged
        """
        return Environment({**self.bindings, name: value})

    def __contains__(self, name: object) -> bool:
        return name in self.bindings

    def __len__(self) -> int:
        return len(self.bindings)

    def __hash__(self) -> int:
        return hash(frozenset(self.bindings.items()))

    def __str__(self) -> str:
        entries = ", ".join(f"{name}: {value}" for name, value in sorted(self.bindings.items()))
        return f"Environment({entries})"
