"""Tests for immutable environments."""

import pytest
from hypothesis import given, strategies as st

from termsimply.core.environment import Environment
from termsimply.core.types import Int, TypeArrow

names = st.text(alphabet="abcdefghxyz", min_size=1, max_size=3)
values = st.integers(min_value=-1000, max_value=1000)
bindings = st.dictionaries(names, values, max_size=6)


class TestEnvironmentCreation:
    """Tests for environment creation."""

    def test_empty(self):
        env = Environment.empty()
        assert len(env) == 0
        assert "x" not in env

    def test_of(self):
        env = Environment.of({"x": Int, "f": TypeArrow(Int, Int)})
        assert len(env) == 2
        assert env.lookup("f") == TypeArrow(Int, Int)

    def test_of_copies_input(self):
        """Mutating the source mapping later does not leak into the environment."""
        source = {"x": 1}
        env = Environment.of(source)
        source["x"] = 2
        source["y"] = 3
        assert env.lookup("x") == 1
        assert "y" not in env

    def test_bindings_are_read_only(self):
        env = Environment.of({"x": 1})
        with pytest.raises(TypeError):
            env.bindings["x"] = 2


class TestEnvironmentLookup:
    """Tests for lookup and get."""

    def test_lookup_missing(self):
        with pytest.raises(KeyError):
            Environment.empty().lookup("x")

    def test_get_missing(self):
        env = Environment.empty()
        assert env.get("x") is None
        assert env.get("x", Int) == Int


class TestEnvironmentExtend:
    """Tests for extension and scoping."""

    def test_shadowing(self):
        parent = Environment.empty().extend("x", 1)
        child = parent.extend("x", 2)
        assert child.lookup("x") == 2
        assert parent.lookup("x") == 1

    def test_extend_does_not_touch_parent(self):
        parent = Environment.empty()
        child = parent.extend("x", Int)
        assert "x" in child
        assert "x" not in parent
        assert len(parent) == 0

    def test_siblings_are_independent(self):
        root = Environment.of({"z": 0})
        left = root.extend("x", 1)
        right = root.extend("x", 2)
        assert left.lookup("x") == 1
        assert right.lookup("x") == 2
        assert left.lookup("z") == right.lookup("z") == 0

    def test_str(self):
        env = Environment.of({"y": Int, "x": TypeArrow(Int, Int)})
        assert str(env) == "Environment(x: Int -> Int, y: Int)"


class TestEnvironmentLaws:
    """Property tests for extend/lookup."""

    @given(bindings, names, values)
    def test_lookup_after_extend(self, initial, name, value):
        env = Environment.of(initial)
        assert env.extend(name, value).lookup(name) == value

    @given(bindings, names, names, values)
    def test_other_names_unchanged(self, initial, name, other, value):
        if name == other:
            return
        env = Environment.of(initial)
        extended = env.extend(name, value)
        assert extended.get(other) == env.get(other)
        assert (other in extended) == (other in env)

    @given(bindings, names, values)
    def test_receiver_unchanged(self, initial, name, value):
        env = Environment.of(initial)
        before = dict(env.bindings)
        env.extend(name, value)
        assert dict(env.bindings) == before

    @given(bindings)
    def test_equal_environments_hash_equal(self, initial):
        forward = Environment.of(initial)
        backward = Environment.of(dict(reversed(list(initial.items()))))
        assert forward == backward
        assert hash(forward) == hash(backward)
