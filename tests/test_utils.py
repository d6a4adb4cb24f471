"""Tests for template substitution, nested key helpers and predicates."""

import pytest

from wyntine_verifier import is_array, is_boolean, is_number, is_object, is_string
from wyntine_verifier.utils import access_key, is_integer, is_safe_integer, key_paths, replace


class TestReplace:
    def test_positional_placeholders(self):
        assert replace("{0} and {1}", ["a", 2]) == "a and 2"

    def test_repeated_placeholder(self):
        assert replace("{0}-{1}-{0}", ["x", "y"]) == "x-y-x"

    def test_unmatched_placeholder_is_kept(self):
        assert replace("{0} {1}", ["only"]) == "only {1}"

    def test_values_use_default_formatting(self):
        assert replace("{0} {1}", [True, 1.5]) == "True 1.5"


class TestNestedKeys:
    DATA = {"errors": {"string": {"not": "a", "lengths": {"max": "b"}}, "boolean": {"not": "c"}}}

    def test_key_paths(self):
        assert key_paths(self.DATA) == ["errors.string.not", "errors.string.lengths.max", "errors.boolean.not"]

    def test_key_paths_of_non_mapping(self):
        assert key_paths("text") == []

    def test_access_key(self):
        assert access_key(self.DATA, "errors.string.lengths.max") == "b"

    def test_access_key_missing_path(self):
        with pytest.raises(KeyError):
            access_key(self.DATA, "errors.string.regex")

    def test_access_key_through_leaf(self):
        with pytest.raises(KeyError):
            access_key(self.DATA, "errors.string.not.deeper")

    def test_access_key_non_mapping(self):
        with pytest.raises(TypeError):
            access_key(["errors"], "errors")


class TestPredicates:
    def test_is_string(self):
        assert is_string("")
        assert not is_string(b"bytes")

    def test_is_number_excludes_bool(self):
        assert is_number(1)
        assert is_number(1.5)
        assert not is_number(True)
        assert not is_number("1")

    def test_is_boolean(self):
        assert is_boolean(False)
        assert not is_boolean(0)

    def test_is_array(self):
        assert is_array([])
        assert is_array((1, 2))
        assert not is_array("ab")
        assert not is_array({})

    def test_is_object(self):
        assert is_object({})
        assert not is_object(None)
        assert not is_object([])

    def test_integers(self):
        assert is_integer(3)
        assert is_integer(3.0)
        assert not is_integer(3.5)
        assert not is_integer(float("inf"))
        assert is_safe_integer(9_007_199_254_740_991)
        assert not is_safe_integer(9_007_199_254_740_992)
        assert not is_safe_integer(-9_007_199_254_740_992)
