"""Tests for ObjectVerifier."""

import pytest

from wyntine_verifier import ItemType, ObjectItem, ObjectVerifier, StringVerifier, VerifierConfigurationError


class TestObjectType:
    def test_accepts_mappings(self):
        assert ObjectVerifier().verify({}).is_success

    def test_rejects_other_values(self):
        assert ObjectVerifier().verify([]).errors == ("Given input is not an object.",)


class TestObjectItems:
    def test_required_key_missing(self):
        verifier = ObjectVerifier().add_string("name", required=True)
        assert verifier.verify({}).errors == (
            "-- Object key 'name' --",
            "Given object does not have required key 'name'.",
        )

    def test_optional_key_missing_is_skipped(self):
        assert ObjectVerifier().add_string("name").verify({}).is_success

    def test_wrong_value_type(self):
        verifier = ObjectVerifier().add_string("name").add_number("age")
        assert verifier.verify({"name": 1, "age": 3}).errors == (
            "-- Object key 'name' --",
            "Given input is not a string.",
        )

    def test_nested_objects(self):
        verifier = ObjectVerifier().add_object("inner", lambda v: v.add_boolean("flag", required=True))
        assert verifier.verify({"inner": {"flag": True}}).is_success
        assert verifier.verify({"inner": {}}).errors == (
            "-- Object key 'inner' --",
            "-- Object key 'flag' --",
            "Given object does not have required key 'flag'.",
        )

    def test_messages_in_turkish(self):
        verifier = ObjectVerifier().add_number("n", required=True)
        assert verifier.verify({}, lang="tr").errors == (
            "-- Nesne anahtarı 'n' --",
            "Verilen nesnede gerekli anahtar 'n' bulunmuyor.",
        )


class TestGeneralType:
    def test_applies_to_keys_without_items(self):
        verifier = ObjectVerifier().add_string("name").set_general_type(ItemType.NUMBER)
        assert verifier.verify({"name": "x", "age": 3}).is_success
        assert verifier.verify({"name": "x", "age": "old"}).errors == (
            "-- Object key 'age' --",
            "Given input is not a number.",
        )

    def test_configured_general_type(self):
        verifier = ObjectVerifier().set_general_type(ItemType.STRING, lambda v: v.set_min_length(2))
        assert verifier.verify({"a": "ok"}).is_success
        assert verifier.verify({"a": "x"}).is_error

    def test_ignored_when_exact(self):
        verifier = ObjectVerifier().set_general_type(ItemType.NUMBER).set_exact()
        assert verifier.verify({"age": "old"}).errors == ("Given object has extra keys: age",)

    def test_not_allowed_keys_are_not_checked_against_general_type(self):
        verifier = ObjectVerifier().set_general_type(ItemType.NUMBER).set_not_allowed_keys(["x"])
        assert verifier.verify({"x": "s"}).errors == ("Given object has keys that are not allowed: x",)

    def test_unknown_type_raises(self):
        with pytest.raises(VerifierConfigurationError):
            ObjectVerifier().set_general_type("date")

    def test_general_type_mapping_must_hold_verifier(self):
        with pytest.raises(VerifierConfigurationError):
            ObjectVerifier({"general_type": "string"})


class TestExactAndNotAllowed:
    def test_exact_reports_extra_keys(self):
        verifier = ObjectVerifier().add_number("a").set_exact()
        assert verifier.verify({"a": 1, "b": 2}).errors == ("Given object has extra keys: b",)

    def test_exact_with_several_items(self):
        verifier = ObjectVerifier().add_number("a").add_number("b").set_exact()
        assert verifier.verify({"a": 1, "b": 2}).is_success

    def test_not_allowed_keys(self):
        verifier = ObjectVerifier().set_not_allowed_keys(["secret", "token"])
        assert verifier.verify({"name": 1}).is_success
        assert verifier.verify({"token": 1, "secret": 2}).errors == (
            "Given object has keys that are not allowed: token, secret",
        )

    def test_item_using_not_allowed_key_fails(self):
        verifier = ObjectVerifier().add_string("a").set_not_allowed_keys(["a"])
        assert verifier.verify({}).errors == ("Cannot use not allowed keys in items: a",)

    def test_not_allowed_keys_are_deduplicated(self):
        verifier = ObjectVerifier().set_not_allowed_keys(["a", "b"]).add_not_allowed_keys(["b", "c"])
        assert verifier.options["not_allowed_keys"] == ("a", "b", "c")


class TestObjectConstruction:
    def test_item_mapping_with_empty_options(self):
        verifier = ObjectVerifier({"items": [{"key": "name", "verifier": StringVerifier(), "options": None}]})
        item = verifier.options["items"][0]
        assert isinstance(item, ObjectItem)
        assert item.required is False
        assert verifier.verify({}).is_success

    def test_item_mapping_with_nested_options(self):
        verifier = ObjectVerifier({"items": [{"key": "name", "verifier": StringVerifier(), "options": {"required": True}}]})
        assert verifier.verify({}).errors == (
            "-- Object key 'name' --",
            "Given object does not have required key 'name'.",
        )

    def test_builders_keep_original(self):
        base = ObjectVerifier().add_string("name")
        exact = base.set_exact()
        extended = base.add_number("age", required=True)
        assert base.verify({"name": "x", "other": 1}).is_success
        assert exact.verify({"name": "x", "other": 1}).is_error
        assert len(base.options["items"]) == 1
        assert len(extended.options["items"]) == 2
        assert "exact" not in base.options
