"""Tests for the term builders."""

import pytest

from termsimply.core.ast import Add, App, IfZero, IntLit, Lambda, Var
from termsimply.core.types import Int, TypeArrow
from termsimply.sugar import app, arrow, ifz, lam, lit, v


class TestLam:
    """Tests for lam."""

    def test_single(self):
        assert lam("x", Int, "x") == Lambda("x", Int, Var("x"))

    def test_parameter_list(self):
        term = lam([("x", Int), ("y", Int)], v("x") + v("y"))
        assert term == Lambda("x", Int, Lambda("y", Int, Add(Var("x"), Var("y"))))

    def test_missing_body(self):
        with pytest.raises(ValueError):
            lam("x", Int)

    def test_empty_parameter_list(self):
        with pytest.raises(ValueError):
            lam([], 1)


class TestBuilders:
    """Tests for the remaining builders."""

    def test_app_left_nested(self):
        assert app("f", 1, "y") == App(App(Var("f"), IntLit(1)), Var("y"))

    def test_ifz_coerces(self):
        assert ifz("x", 1, lit(2)) == IfZero(Var("x"), IntLit(1), IntLit(2))

    def test_arrow_right_folded(self):
        assert arrow(Int, Int, Int) == TypeArrow(Int, TypeArrow(Int, Int))
        assert arrow(Int) == Int

    def test_arrow_needs_a_type(self):
        with pytest.raises(ValueError):
            arrow()
