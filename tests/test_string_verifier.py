"""Tests for StringVerifier and the shared verifier construction rules."""

import re

import pytest

from wyntine_verifier import NumberVerifier, StringVerifier, VerificationError, VerifierConfigurationError
from wyntine_verifier.language import get_lang
from wyntine_verifier.verifiers.string_verifier import check_lengths


class TestStringType:
    def test_accepts_string(self):
        assert StringVerifier().verify("abc").is_success

    def test_rejects_non_string_with_single_message(self):
        result = StringVerifier().set_min_length(2).set_regex("a").verify(5)
        assert result.errors == ("Given input is not a string.",)

    def test_expected_string(self):
        verifier = StringVerifier().set_expected_string("yes")
        assert verifier.verify("yes").is_success
        assert verifier.verify("no").errors == ("Given string 'no' is not equal to 'yes'.",)


class TestStringLengths:
    def test_exact_length_mismatch(self):
        result = StringVerifier().set_length(3).verify("ab")
        assert result.is_error
        assert result.errors == ("Given string 'ab' (2) has not equal length of 3.",)

    def test_exact_length_match(self):
        assert StringVerifier().set_length(2).verify("ab").is_success

    def test_min_and_max(self):
        verifier = StringVerifier().set_min_length(2).set_max_length(4)
        assert verifier.verify("abc").is_success
        assert verifier.verify("a").errors == ("Given string 'a' (1) is shorter than given minimum length of 2.",)
        assert verifier.verify("abcde").errors == (
            "Given string 'abcde' (5) is longer than given maximum length of 4.",
        )

    def test_max_lower_than_min_is_a_fail(self):
        options = StringVerifier().set_min_length(5).set_max_length(2).options
        outcome = check_lengths(options, get_lang(), "abc")
        assert outcome.is_fail
        assert outcome.errors == ("Maximum option cannot be lower than minimum.",)

    def test_fail_stops_later_checks(self):
        verifier = StringVerifier().set_min_length(5).set_max_length(2).set_regex(r"^\d+$")
        assert verifier.verify("abc").errors == ("Maximum option cannot be lower than minimum.",)

    def test_length_with_bounds_is_a_fail(self):
        verifier = StringVerifier().set_length(2).set_min_length(1)
        assert verifier.verify("ab").errors == (
            "Maximum and minimum lengths cannot be used together with fixed length option.",
        )

    def test_invalid_bounds(self):
        assert StringVerifier().set_max_length(-1).verify("").errors == ("Maximum option cannot be negative.",)
        assert StringVerifier().set_min_length(1.5).verify("ab").errors == ("Minimum option should be an integer.",)
        assert StringVerifier().set_max_length(2.5).verify("ab").errors == ("Maximum option should be an integer.",)


class TestStringRegex:
    def test_pattern_string(self):
        verifier = StringVerifier().set_regex(r"^\d+$")
        assert verifier.verify("123").is_success
        assert verifier.verify("12a").errors == ("Given string '12a' does not match given RegExp '^\\d+$'.",)

    def test_compiled_pattern_searches(self):
        verifier = StringVerifier().set_regex(re.compile("b+"))
        assert verifier.verify("abbc").is_success

    def test_errors_accumulate_across_checks(self):
        verifier = StringVerifier().set_expected_string("abc").set_max_length(2).set_regex("z")
        assert verifier.verify("xyz").errors == (
            "Given string 'xyz' is not equal to 'abc'.",
            "Given string 'xyz' (3) is longer than given maximum length of 2.",
        )


class TestImmutability:
    def test_builder_does_not_touch_original(self):
        base = StringVerifier()
        constrained = base.set_length(3)
        assert base.verify("ab").is_success
        assert constrained.verify("ab").is_error
        assert "length" not in base.options

    def test_options_are_read_only(self):
        verifier = StringVerifier().set_length(1)
        with pytest.raises(TypeError):
            verifier.options["length"] = 2

    def test_seeding_from_verifier_shares_options(self):
        original = StringVerifier().set_min_length(2)
        copy = StringVerifier(original)
        assert copy.options == original.options
        assert copy.verify("a").is_error
        widened = copy.set_min_length(0)
        assert original.verify("a").is_error
        assert widened.verify("a").is_success

    def test_seeding_from_mapping(self):
        verifier = StringVerifier({"max_length": 1, "regex": "^a"})
        assert verifier.verify("a").is_success
        assert verifier.verify("b").is_error

    def test_seeding_from_other_kind_raises(self):
        with pytest.raises(VerifierConfigurationError):
            StringVerifier(NumberVerifier())

    def test_seeding_from_unsupported_value_raises(self):
        with pytest.raises(VerifierConfigurationError):
            StringVerifier(["length", 2])

    def test_verify_is_idempotent(self):
        verifier = StringVerifier().set_length(3)
        assert verifier.verify("ab") == verifier.verify("ab")


class TestVerifyAndAssert:
    def test_returns_input_on_success(self):
        assert StringVerifier().verify_and_assert("ok") == "ok"

    def test_raises_with_first_failure(self):
        verifier = StringVerifier().set_expected_string("abc").set_max_length(2)
        with pytest.raises(VerificationError) as exc_info:
            verifier.verify_and_assert("xyz")
        assert exc_info.value.errors == ["Given string 'xyz' is not equal to 'abc'."]

    def test_is_valid(self):
        assert StringVerifier().is_valid("a")
        assert not StringVerifier().is_valid(None)
