"""Tests for type operations."""

import pytest

from termsimply.core.types import Int, TypeArrow, TypeInt


class TestTypeInt:
    """Tests for the integer type."""

    def test_str(self):
        assert str(Int) == "Int"

    def test_equality(self):
        """Every TypeInt instance is the same type."""
        assert TypeInt() == Int
        assert TypeInt() == TypeInt()


class TestTypeArrow:
    """Tests for TypeArrow (function types)."""

    def test_str_simple(self):
        """Test string representation of simple arrow."""
        assert str(TypeArrow(Int, Int)) == "Int -> Int"

    def test_str_nested_domain(self):
        """An arrow in domain position is parenthesised."""
        t = TypeArrow(TypeArrow(Int, Int), Int)
        assert str(t) == "(Int -> Int) -> Int"

    def test_str_nested_codomain(self):
        """Arrows associate to the right, so the codomain needs no parentheses."""
        t = TypeArrow(Int, TypeArrow(Int, Int))
        assert str(t) == "Int -> Int -> Int"

    def test_structural_equality(self):
        assert TypeArrow(Int, TypeArrow(Int, Int)) == TypeArrow(Int, TypeArrow(Int, Int))
        assert TypeArrow(Int, Int) != Int
        assert TypeArrow(TypeArrow(Int, Int), Int) != TypeArrow(Int, TypeArrow(Int, Int))

    def test_rejects_non_types(self):
        with pytest.raises(ValueError):
            TypeArrow(Int, "Int")
