"""Test configuration and shared fixtures."""

import pytest

from termsimply.config.settings import EvalSettings
from termsimply.core.checker import TypeChecker
from termsimply.core.environment import Environment
from termsimply.eval.machine import Evaluator


@pytest.fixture(autouse=True)
def _clean_config_env(monkeypatch):
    """Keep tests independent of TERMSIMPLY_* variables in the caller's shell."""
    for var in (
        "TERMSIMPLY_EVAL_MAX_DEPTH",
        "TERMSIMPLY_EVAL_INT_WIDTH",
        "TERMSIMPLY_LOG_FILTER",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def empty_env() -> Environment:
    return Environment.empty()


@pytest.fixture
def checker() -> TypeChecker:
    return TypeChecker()


@pytest.fixture
def evaluator() -> Evaluator:
    return Evaluator(EvalSettings())
