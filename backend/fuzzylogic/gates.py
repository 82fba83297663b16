"""
Gates and the gate registry.

A gate is a named local scope. Its variables live in the ``Environment``;
the single expression bound to it lives in the ``GateRegistry``. The two are
independent, and only the environment is rolled back by anonymous scopes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from .environment import GLOBAL_SCOPE
from .errors import GateExpressionNotAssigned, ReservedGateNameError
from .log import get_logger
from .logic.evaluator import ExpressionEvaluator
from .logic.expression import Expression
from .logic.parser import to_logic_map

if TYPE_CHECKING:
    from .environment import Environment

logger = get_logger(__name__)


@dataclass(frozen=True)
class Gate:
    """Handle naming a gate."""

    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise TypeError(f"Gate name must be a non-empty string, got {self.name!r}")
        if self.name == GLOBAL_SCOPE:
            raise ReservedGateNameError(self.name)

    def __str__(self) -> str:
        return self.name


GateLike = Union[Gate, str]


def gate_name(gate: GateLike) -> str:
    """Name of a gate given as a ``Gate`` or a non-empty string."""
    if isinstance(gate, Gate):
        return gate.name
    if isinstance(gate, str) and gate:
        return gate
    raise TypeError(f"Expected a Gate or non-empty gate name, got {gate!r}")


class GateRegistry:
    """Maps gate names to their bound expression. Last assignment wins."""

    def __init__(self, evaluator: Optional[ExpressionEvaluator] = None):
        self._expressions: Dict[str, Expression] = {}
        self.evaluator = evaluator or ExpressionEvaluator()

    def assign_expression(self, gate: GateLike, expr: Expression) -> None:
        """Bind ``expr`` to ``gate``, replacing any previous expression."""
        name = gate_name(gate)
        if name == GLOBAL_SCOPE:
            raise ReservedGateNameError(name)
        if not isinstance(expr, Expression):
            raise TypeError(f"Expected an Expression, got {type(expr).__name__}")
        self._expressions[name] = expr
        logger.debug("Gate %s := %s", name, expr)

    def get(self, gate: GateLike) -> Optional[Expression]:
        return self._expressions.get(gate_name(gate))

    def evaluate(self, gate: GateLike, env: "Environment") -> float:
        """
        Evaluate the expression bound to a gate.

        Raises:
            GateExpressionNotAssigned: If the gate has no expression.
            VariableNotFound: If the expression references an unbound variable.
        """
        name = gate_name(gate)
        expr = self.get(name)
        if expr is None:
            raise GateExpressionNotAssigned(name)
        result = self.evaluator.evaluate(expr, env)
        logger.debug("Gate %s evaluated to %r", name, result)
        return result

    def names(self) -> List[str]:
        return list(self._expressions)

    def clear(self) -> None:
        self._expressions.clear()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary of JSON Logic expressions."""
        return to_logic_map(self._expressions)

    def __contains__(self, gate: object) -> bool:
        if isinstance(gate, Gate):
            gate = gate.name
        return gate in self._expressions

    def __len__(self) -> int:
        return len(self._expressions)
