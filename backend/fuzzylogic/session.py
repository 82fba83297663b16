"""
Fuzzy logic session.

``FuzzySession`` is the handle callers own. It ties together one
environment, one gate registry and one scope controller, and exposes the
assignment, scoping and evaluation operations of the engine. There is no
module-level state: two sessions never see each other's bindings.

Example:
    session = FuzzySession()
    with session.gate("g1"):
        session.assign_value("A", 0.5)
        session.assign_value("B", 0.7)
        session.assign_expression("g1", add("A", "B"))
    session.evaluate_gate("g1")  # 1.0
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, ContextManager, Dict, Optional, TypeVar, Union

from .environment import Environment
from .errors import FuzzyLogicError, InvalidAssignmentTarget
from .log import get_logger
from .gates import Gate, GateLike, GateRegistry, gate_name
from .logic.evaluator import ExpressionEvaluator
from .logic.expression import Operand, Variable, as_expression
from .scope import ScopeController

if TYPE_CHECKING:
    from .config import SessionConfig

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class EvaluationResult:
    """Outcome of an evaluation that reports errors instead of raising them."""

    success: bool
    value: Optional[float] = None
    error_kind: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, value: float) -> "EvaluationResult":
        return cls(success=True, value=value)

    @classmethod
    def failed(cls, exc: FuzzyLogicError) -> "EvaluationResult":
        return cls(success=False, error_kind=exc.kind, error=str(exc))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "success": self.success,
            "value": self.value,
            "error_kind": self.error_kind,
            "error": self.error,
        }


class FuzzySession:
    """Owns the mutable state of the engine and exposes its operations."""

    def __init__(self, evaluator: Optional[ExpressionEvaluator] = None):
        self.evaluator = evaluator or ExpressionEvaluator()
        self.env = Environment()
        self.gates = GateRegistry(self.evaluator)
        self.scope = ScopeController(self.env)

    # ------------------------------------------------------------------
    # Construction from configuration
    # ------------------------------------------------------------------

    @classmethod
    def from_config(cls, config: "SessionConfig") -> "FuzzySession":
        """Build a session populated from a configuration."""
        from .config import apply_config
        session = cls()
        apply_config(session, config)
        return session

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "FuzzySession":
        """Build a session from YAML configuration content."""
        from .config import SessionConfig
        return cls.from_config(SessionConfig.from_yaml(yaml_content))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "FuzzySession":
        """Build a session from a YAML configuration file."""
        from .config import SessionConfig
        return cls.from_config(SessionConfig.from_file(Path(path)))

    # ------------------------------------------------------------------
    # Scoping
    # ------------------------------------------------------------------

    @property
    def current_gate(self) -> str:
        return self.scope.current_gate

    def gate(self, gate: GateLike) -> ContextManager[str]:
        """Context manager making ``gate`` the ambient gate."""
        return self.scope.gate(gate)

    def anonymous(self) -> ContextManager[Environment]:
        """Context manager whose environment changes are reverted on exit."""
        return self.scope.anonymous()

    def with_gate(self, gate: GateLike, block: Callable[[], T]) -> T:
        return self.scope.with_gate(gate, block)

    def with_anonymous_scope(self, block: Callable[[], T]) -> T:
        return self.scope.with_anonymous_scope(block)

    # ------------------------------------------------------------------
    # Assignment
    # ------------------------------------------------------------------

    def assign_value(
        self,
        variable: Union[Variable, str],
        expression: Operand,
        gate: Optional[GateLike] = None,
    ) -> float:
        """
        Evaluate ``expression`` now and bind the result to ``variable``.

        Args:
            variable: Target variable (or its name).
            expression: Expression or literal to evaluate.
            gate: Target scope; defaults to the ambient gate. ``"global"``
                writes the global mapping.

        Returns:
            The stored value.

        Raises:
            InvalidAssignmentTarget: If ``variable`` is not a variable or
                ``gate`` is not a gate.
            VariableNotFound: If ``expression`` references an unbound variable.
        """
        if isinstance(variable, Variable):
            name = variable.name
        elif isinstance(variable, str) and variable:
            name = variable
        else:
            raise InvalidAssignmentTarget(variable)

        if gate is None:
            target = self.current_gate
        else:
            try:
                target = gate_name(gate)
            except TypeError:
                raise InvalidAssignmentTarget(gate) from None
        result = self.evaluator.evaluate(as_expression(expression), self.env)
        self.env.assign(name, result, target)
        return result

    def assign_expression(self, gate: GateLike, expression: Operand) -> None:
        """
        Bind ``expression`` to ``gate`` in the registry.

        The gate is expected to be the ambient one; other gates are accepted
        but logged.
        """
        try:
            name = gate_name(gate)
        except TypeError:
            raise InvalidAssignmentTarget(gate) from None
        if name != self.current_gate:
            logger.warning(
                "Assigning expression to gate %s while ambient gate is %s",
                name, self.current_gate,
            )
        self.gates.assign_expression(name, as_expression(expression))

    def assign(self, target: Any, expression: Operand) -> Optional[float]:
        """
        Assign to a variable or a gate depending on the target type.

        Returns the stored value for variables and None for gates.
        """
        if isinstance(target, Gate):
            self.assign_expression(target, expression)
            return None
        if isinstance(target, (Variable, str)):
            return self.assign_value(target, expression)
        raise InvalidAssignmentTarget(target)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def evaluate(self, expression: Operand) -> float:
        """Evaluate an expression against the current environment."""
        return self.evaluator.evaluate(as_expression(expression), self.env)

    def test_gate(self, gate: GateLike, variable: Union[Variable, str]) -> float:
        """Read ``variable`` from ``gate``'s scope, falling back to global."""
        name = variable.name if isinstance(variable, Variable) else variable
        return self.env.test_gate(gate_name(gate), name)

    def evaluate_gate(self, gate: GateLike) -> float:
        """Evaluate the expression bound to ``gate``."""
        return self.gates.evaluate(gate, self.env)

    def try_test_gate(self, gate: GateLike, variable: Union[Variable, str]) -> EvaluationResult:
        """Like ``test_gate`` but returns an ``EvaluationResult``."""
        try:
            return EvaluationResult.ok(self.test_gate(gate, variable))
        except FuzzyLogicError as e:
            return EvaluationResult.failed(e)

    def try_evaluate_gate(self, gate: GateLike) -> EvaluationResult:
        """Like ``evaluate_gate`` but returns an ``EvaluationResult``."""
        try:
            return EvaluationResult.ok(self.evaluate_gate(gate))
        except FuzzyLogicError as e:
            return EvaluationResult.failed(e)

    # ------------------------------------------------------------------
    # Housekeeping
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Clear bindings, gate expressions and ambient gates."""
        self.env.clear()
        self.gates.clear()
        self.scope.reset()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (same layout as the YAML configuration)."""
        data = self.env.to_dict()
        expressions = self.gates.to_dict()
        gates = {}
        for name in list(data["gates"]) + [g for g in self.gates.names() if g not in data["gates"]]:
            entry: Dict[str, Any] = {"variables": data["gates"].get(name, {})}
            if name in expressions:
                entry["expression"] = expressions[name]
            gates[name] = entry
        return {"globals": data["globals"], "gates": gates}
