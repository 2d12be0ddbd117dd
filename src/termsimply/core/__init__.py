"""Core language: AST, types, environments, and type checker."""

from termsimply.core.ast import (
    Add,
    App,
    IfZero,
    IntLit,
    Lambda,
    Term,
    Var,
    as_term,
)
from termsimply.core.checker import TypeChecker, TypeEnvironment, type_check
from termsimply.core.environment import Environment
from termsimply.core.errors import (
    ApplicationOfNonFunction,
    ArgumentTypeMismatch,
    CheckDepthExceeded,
    MismatchedBranchTypes,
    MismatchedOperandTypes,
    NonIntegerPredicate,
    TypeError,
    UndefinedIdentifier,
)
from termsimply.core.types import Int, Type, TypeArrow, TypeInt

__all__ = [
    # AST
    "Term",
    "IntLit",
    "Var",
    "Lambda",
    "App",
    "Add",
    "IfZero",
    "as_term",
    # Types
    "Type",
    "TypeInt",
    "TypeArrow",
    "Int",
    # Environment
    "Environment",
    "TypeEnvironment",
    # Errors
    "TypeError",
    "UndefinedIdentifier",
    "MismatchedOperandTypes",
    "NonIntegerPredicate",
    "MismatchedBranchTypes",
    "ApplicationOfNonFunction",
    "ArgumentTypeMismatch",
    "CheckDepthExceeded",
    # Type Checker
    "TypeChecker",
    "type_check",
]
