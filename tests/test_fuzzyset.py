"""
Tests for discrete fuzzy sets and set-valued gates.
"""

import pytest

from backend.fuzzylogic import FuzzySet, FuzzySetGates


@pytest.fixture
def set_a():
    return FuzzySet({"x1": 0.2, "x2": 0.8})


@pytest.fixture
def set_b():
    return FuzzySet({"x1": 0.5, "x2": 0.6})


class TestFuzzySetOperations:
    """Tests for FuzzySet operations."""

    def test_union(self, set_a, set_b):
        """Test union takes the max membership."""
        assert set_a.perform_operation("union", set_b) == FuzzySet({"x1": 0.5, "x2": 0.8})

    def test_intersection(self, set_a, set_b):
        """Test intersection takes the min membership."""
        assert set_a.intersection(set_b) == FuzzySet({"x1": 0.2, "x2": 0.6})

    def test_complement(self):
        """Test complement of each membership."""
        result = FuzzySet({"x1": 0.35, "x2": 0.81}).complement()
        assert result.membership("x1") == pytest.approx(0.65)
        assert result.membership("x2") == pytest.approx(0.19)

    def test_add_caps_at_one(self, set_a, set_b):
        """Test addition is capped at 1.0."""
        result = set_a.add(set_b)
        assert result.membership("x1") == pytest.approx(0.7)
        assert result.membership("x2") == 1.0

    def test_multi(self):
        """Test multiplication of memberships."""
        result = FuzzySet({"x1": 0.4, "x2": 0.6}).multi(FuzzySet({"x1": 0.5, "x2": 0.7}))
        assert result.membership("x1") == pytest.approx(0.2)
        assert result.membership("x2") == pytest.approx(0.42)

    def test_missing_elements_count_as_zero(self, set_a):
        """Test elements absent from the right-hand set."""
        other = FuzzySet({"x1": 0.9})
        assert set_a.union(other) == FuzzySet({"x1": 0.9, "x2": 0.8})
        assert set_a.intersection(other) == FuzzySet({"x1": 0.2, "x2": 0.0})

    def test_left_elements_only(self, set_a):
        """Test elements only in the right-hand set are not added."""
        result = set_a.union(FuzzySet({"x3": 1.0}))
        assert "x3" not in result
        assert len(result) == 2

    def test_binary_requires_other(self, set_a):
        """Test binary operations need a second set."""
        with pytest.raises(ValueError, match="requires another set"):
            set_a.perform_operation("union")

    def test_unknown_operation(self, set_a):
        """Test unknown operation names."""
        with pytest.raises(ValueError, match="Unknown operation"):
            set_a.perform_operation("difference", set_a)

    def test_alpha_cut(self):
        """Test alpha cut keeps memberships at or above alpha."""
        fuzzy_set = FuzzySet({"x1": 0.3, "x2": 0.7, "x3": 0.8, "x4": 0.6})
        assert fuzzy_set.alpha_cut(0.6) == {"x2", "x3", "x4"}

    def test_immutable(self, set_a):
        """Test the element mapping cannot be modified."""
        with pytest.raises(TypeError):
            set_a.elements["x1"] = 1.0
        assert hash(set_a) == hash(FuzzySet({"x2": 0.8, "x1": 0.2}))


class TestFuzzySetGates:
    """Tests for FuzzySetGates."""

    def test_assign_returns_new_instance(self, set_a):
        """Test assign leaves the original unchanged."""
        empty = FuzzySetGates()
        gates = empty.assign("g", set_a)
        assert empty.test_gate("g", "x1") is None
        assert gates.test_gate("g", "x1") == 0.2

    def test_missing_gate_or_element(self, set_a):
        """Test lookups that find nothing."""
        gates = FuzzySetGates().assign("g", set_a)
        assert gates.test_gate("other", "x1") is None
        assert gates.test_gate("g", "x9") is None

    def test_reassign_replaces(self, set_a, set_b):
        """Test the last assignment wins."""
        gates = FuzzySetGates().assign("g", set_a).assign("g", set_b)
        assert gates.test_gate("g", "x2") == 0.6
