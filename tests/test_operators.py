"""
Tests for fuzzy operators and expression nodes.
"""

import pytest

from backend.fuzzylogic import (
    Environment,
    AlphaCut,
    Value,
    Variable,
    add,
    mult,
    complement,
    and_,
    or_,
    xor,
    alpha_cut,
)
from backend.fuzzylogic.logic.operators import (
    OPERATORS,
    fuzzy_add,
    fuzzy_alpha_cut,
    fuzzy_complement,
    get_operator,
)

DEGREES = [0.0, 0.1, 0.25, 0.5, 0.7, 0.9, 1.0]
PAIRS = [(a, b) for a in DEGREES for b in DEGREES]


@pytest.fixture
def env():
    return Environment()


class TestOperatorFunctions:
    """Tests for the pure operator functions."""

    def test_add_saturates(self):
        """Test that addition is capped at 1.0."""
        assert fuzzy_add(0.6, 0.7) == 1.0
        assert fuzzy_add(0.4, 0.5) == pytest.approx(0.9)

    def test_complement_is_not_clamped(self):
        """Test that out-of-range input passes through the complement."""
        assert fuzzy_complement(1.5) == pytest.approx(-0.5)
        assert fuzzy_complement(-0.25) == pytest.approx(1.25)

    def test_alpha_cut_is_inclusive(self):
        """Test that the threshold itself passes the cut."""
        assert fuzzy_alpha_cut(0.6, 0.6) == 0.6
        assert fuzzy_alpha_cut(0.59, 0.6) == 0.0

    def test_registry_covers_all_operators(self):
        """Test operator registry contents and arities."""
        assert set(OPERATORS) == {
            "add", "mult", "complement", "and", "or", "xor", "alpha_cut"
        }
        assert get_operator("complement").arity == 1
        assert get_operator("xor").arity == 2

    def test_unknown_operator(self):
        """Test lookup of an unknown operator."""
        with pytest.raises(ValueError):
            get_operator("nand")


class TestOperatorProperties:
    """Operator laws evaluated through expression trees."""

    @pytest.mark.parametrize("a,b", PAIRS)
    def test_binary_operators(self, env, a, b):
        """Test binary node results against their formulas."""
        assert add(a, b).eval(env) == min(1.0, a + b)
        assert mult(a, b).eval(env) == a * b
        assert and_(a, b).eval(env) == min(a, b)
        assert or_(a, b).eval(env) == max(a, b)
        assert xor(a, b).eval(env) == pytest.approx(abs(a - b))

    @pytest.mark.parametrize("a", DEGREES)
    def test_complement(self, env, a):
        """Test complement against 1 - a."""
        assert complement(a).eval(env) == 1.0 - a

    @pytest.mark.parametrize("a", DEGREES)
    @pytest.mark.parametrize("t", [0.0, 0.3, 0.5, 0.9, 1.0])
    def test_alpha_cut_idempotent(self, env, a, t):
        """Test that cutting twice at the same threshold changes nothing."""
        once = AlphaCut(Value(a), t)
        twice = AlphaCut(once, t)
        assert twice.eval(env) == once.eval(env)

    def test_alpha_cut_below_threshold(self, env):
        """Test a value below the threshold is zeroed."""
        assert AlphaCut(Value(0.5), 0.6).eval(env) == 0.0

    def test_alpha_cut_at_threshold(self, env):
        """Test a value at the threshold is kept."""
        assert AlphaCut(Value(0.6), 0.6).eval(env) == 0.6


class TestExpressionNodes:
    """Tests for expression construction."""

    def test_literals_not_validated_for_range(self, env):
        """Test that out-of-range literals are stored as given."""
        assert Value(1.7).value == 1.7
        assert Value(-2).eval(env) == -2.0

    def test_add_clamps_out_of_range(self, env):
        """Test that only the additive formula clamps."""
        assert add(1.7, 0.5).eval(env) == 1.0
        assert mult(1.5, 2.0).eval(env) == 3.0

    def test_constructors_wrap_operands(self):
        """Test numbers and strings are wrapped in nodes."""
        expr = add("A", 0.3)
        assert expr.left == Variable("A")
        assert expr.right == Value(0.3)

    def test_nodes_are_immutable(self):
        """Test that nodes cannot be modified."""
        node = Value(0.2)
        with pytest.raises(AttributeError):
            node.value = 0.3

    def test_operand_type_checked(self):
        """Test that node operands must be expressions."""
        with pytest.raises(TypeError):
            add(object(), 0.1)
        with pytest.raises(TypeError):
            Value("0.5")

    def test_variables_in_order(self):
        """Test variable collection order and uniqueness."""
        expr = or_(and_("B", "A"), xor("A", complement("C")))
        assert expr.variables() == ["B", "A", "C"]

    def test_str(self):
        """Test readable rendering."""
        assert str(add("A", complement("B"))) == "(A + ~B)"
        assert str(alpha_cut("A", 0.6)) == "alpha_cut(A, 0.6)"

    def test_same_expression_sees_environment_changes(self, env):
        """Test that evaluation reads the environment at call time."""
        expr = add("A", 0.1)
        env.assign("A", 0.2)
        assert expr.eval(env) == pytest.approx(0.3)
        env.assign("A", 0.5)
        assert expr.eval(env) == pytest.approx(0.6)
