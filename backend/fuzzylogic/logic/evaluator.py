"""
Expression Evaluator.

Evaluates expression trees against an environment. A single recursive
function dispatches on each node's ``op`` tag; children are evaluated left
to right.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import ExpressionFormatError
from ..log import get_logger
from .expression import Expression
from .operators import OPERATORS, fuzzy_alpha_cut

if TYPE_CHECKING:
    from ..environment import Environment

logger = get_logger(__name__)


class ExpressionEvaluator:
    """
    Evaluator for fuzzy expressions.

    Only variable lookups touch the environment, so this is the one place
    evaluation can fail (with ``VariableNotFound``).
    """

    def evaluate(self, expr: Expression, env: "Environment") -> float:
        """
        Evaluate an expression.

        Args:
            expr: The expression tree.
            env: Environment used to resolve variables.

        Returns:
            The resulting degree.

        Raises:
            VariableNotFound: If a referenced variable is not bound anywhere.
            ExpressionFormatError: If a node carries an unknown tag.
        """
        op = getattr(expr, "op", None)

        if op == "value":
            return expr.value

        if op == "var":
            result = env.resolve(expr.name)
            logger.debug("Resolved %s = %r", expr.name, result)
            return result

        if op == "alpha_cut":
            return fuzzy_alpha_cut(self.evaluate(expr.operand, env), expr.threshold)

        entry = OPERATORS.get(op) if op else None
        if entry is None:
            raise ExpressionFormatError(f"Cannot evaluate node {expr!r}: unknown operator {op!r}")

        if entry.arity == 1:
            return entry.func(self.evaluate(expr.operand, env))

        left = self.evaluate(expr.left, env)
        right = self.evaluate(expr.right, env)
        return entry.func(left, right)
