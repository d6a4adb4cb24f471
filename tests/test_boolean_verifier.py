"""Tests for BooleanVerifier."""

import pytest

from wyntine_verifier import BooleanVerifier, VerificationError


class TestBooleanVerifier:
    def test_accepts_booleans(self):
        verifier = BooleanVerifier()
        assert verifier.verify(True).is_success
        assert verifier.verify(False).is_success

    def test_rejects_truthy_values(self):
        assert BooleanVerifier().verify(1).errors == ("Given input is not a boolean.",)
        assert BooleanVerifier().verify("true").errors == ("Given input is not a boolean.",)

    def test_expected_boolean(self):
        verifier = BooleanVerifier().set_expected_boolean(True)
        assert verifier.verify(True).is_success
        assert verifier.verify(False).errors == ("Given boolean 'False' is not equal to 'True'.",)

    def test_builder_keeps_original(self):
        base = BooleanVerifier()
        base.set_expected_boolean(False)
        assert base.verify(True).is_success

    def test_assert(self):
        with pytest.raises(VerificationError, match="not a boolean"):
            BooleanVerifier().verify_and_assert(None)
