"""
Shared fixtures for fuzzy logic tests.
"""

import pytest

from backend.fuzzylogic import FuzzySession


@pytest.fixture
def session():
    """A fresh session; no state is shared between tests."""
    return FuzzySession()
