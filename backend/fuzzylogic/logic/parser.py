"""
Expression Parser for serialized expressions.

Converts JSON Logic style data, as found in YAML or JSON configuration,
into expression trees, and back:

    {"add": [{"var": "A"}, {"var": "B"}]}   ->  Add(Variable("A"), Variable("B"))
    {"alpha_cut": [{"var": "A"}, 0.6]}      ->  AlphaCut(Variable("A"), 0.6)
    0.4                                     ->  Value(0.4)

There is no textual syntax; expressions are otherwise built in code.
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Dict, List

from ..errors import ExpressionFormatError
from .expression import (
    AlphaCut,
    BinaryExpression,
    Complement,
    Expression,
    NODE_TYPES,
    Value,
    Variable,
)


class LogicParser:
    """
    Parser for JSON Logic expressions.

    Accepts:
    - numbers (literal degrees)
    - bare strings and {"var": name} (variable references)
    - {"add" | "mult" | "and" | "or" | "xor": [a, b]}
    - {"complement": a} or {"complement": [a]}
    - {"alpha_cut": [a, threshold]}
    """

    # Alternative operator spellings
    ALIASES = {
        "!": "complement",
        "not": "complement",
        "+": "add",
        "*": "mult",
        "min": "and",
        "max": "or",
        "alphaCut": "alpha_cut",
        "multi": "mult",
    }

    def parse(self, logic: Any) -> Expression:
        """
        Parse JSON Logic into an expression tree.

        Args:
            logic: The JSON Logic data (or an Expression, passed through).

        Returns:
            The expression tree.

        Raises:
            ExpressionFormatError: If the data does not describe an expression.
        """
        return self._parse(logic, "$")

    def _parse(self, logic: Any, path: str) -> Expression:
        if isinstance(logic, Expression):
            return logic

        if isinstance(logic, bool):
            raise ExpressionFormatError(f"{path}: booleans are not fuzzy values")

        if isinstance(logic, Real):
            return Value(logic)

        if isinstance(logic, str):
            if not logic:
                raise ExpressionFormatError(f"{path}: empty variable name")
            return Variable(logic)

        if not isinstance(logic, dict):
            raise ExpressionFormatError(
                f"{path}: expected number, string or object, got {type(logic).__name__}"
            )

        if len(logic) != 1:
            raise ExpressionFormatError(
                f"{path}: expression object must have exactly one operator, got {sorted(logic)}"
            )

        operator, args = next(iter(logic.items()))
        operator = self.ALIASES.get(operator, operator)
        node_type = NODE_TYPES.get(operator)
        if node_type is None:
            raise ExpressionFormatError(f"{path}: unknown operator '{operator}'")

        op_path = f"{path}.{operator}"

        if node_type is Variable:
            return self._parse_var(args, op_path)

        if node_type is Value:
            if isinstance(args, bool) or not isinstance(args, Real):
                raise ExpressionFormatError(f"{op_path}: expected a number")
            return Value(args)

        if node_type is Complement:
            if isinstance(args, list):
                self._expect_args(args, 1, op_path)
                args = args[0]
            return Complement(self._parse(args, f"{op_path}[0]"))

        if node_type is AlphaCut:
            args = self._expect_args(args, 2, op_path)
            threshold = args[1]
            if isinstance(threshold, bool) or not isinstance(threshold, Real):
                raise ExpressionFormatError(f"{op_path}[1]: threshold must be a number")
            return AlphaCut(self._parse(args[0], f"{op_path}[0]"), threshold)

        args = self._expect_args(args, 2, op_path)
        return node_type(
            self._parse(args[0], f"{op_path}[0]"),
            self._parse(args[1], f"{op_path}[1]"),
        )

    def _parse_var(self, args: Any, path: str) -> Variable:
        """Parse a variable reference; a one-element list is accepted."""
        if isinstance(args, list):
            self._expect_args(args, 1, path)
            args = args[0]
        if not isinstance(args, str) or not args:
            raise ExpressionFormatError(f"{path}: variable name must be a non-empty string")
        return Variable(args)

    def _expect_args(self, args: Any, count: int, path: str) -> List[Any]:
        if not isinstance(args, list) or len(args) != count:
            raise ExpressionFormatError(f"{path}: expected a list of {count} argument(s)")
        return args


def to_logic(expr: Expression) -> Any:
    """Convert an expression tree to JSON Logic."""
    if isinstance(expr, Value):
        return expr.value
    if isinstance(expr, Variable):
        return {"var": expr.name}
    if isinstance(expr, AlphaCut):
        return {"alpha_cut": [to_logic(expr.operand), expr.threshold]}
    if isinstance(expr, Complement):
        return {"complement": to_logic(expr.operand)}
    if isinstance(expr, BinaryExpression):
        return {expr.op: [to_logic(expr.left), to_logic(expr.right)]}
    raise ExpressionFormatError(f"Cannot serialize {expr!r}")


def parse_logic(logic: Any) -> Expression:
    """Parse JSON Logic with a default parser."""
    return LogicParser().parse(logic)


def to_logic_map(expressions: Dict[str, Expression]) -> Dict[str, Any]:
    """Convert a name -> expression mapping to JSON Logic."""
    return {name: to_logic(expr) for name, expr in expressions.items()}
