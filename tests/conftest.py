"""Shared test fixtures."""

import pytest

from wyntine_verifier import set_lang


@pytest.fixture(autouse=True)
def english_catalog():
    """Every test starts and ends with the English catalog selected."""
    set_lang("en")
    yield
    set_lang("en")
