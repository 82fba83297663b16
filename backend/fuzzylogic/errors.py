"""
Error kinds raised by the fuzzy logic engine.

Every error carries a ``kind`` string so callers that prefer result objects
over exceptions (see ``EvaluationResult``) can report what went wrong
without inspecting the exception type.
"""

from __future__ import annotations

from typing import Any, Optional


class FuzzyLogicError(Exception):
    """Base class for fuzzy logic engine errors."""

    kind = "fuzzy_logic_error"


class VariableNotFound(FuzzyLogicError, KeyError):
    """Raised when no scope holds a binding for a variable name."""

    kind = "variable_not_found"

    def __init__(self, name: str, gate: Optional[str] = None):
        self.name = name
        self.gate = gate
        if gate is None:
            message = f"Variable '{name}' not found in any scope"
        else:
            message = f"Variable '{name}' not found in gate '{gate}' or global scope"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class GateExpressionNotAssigned(FuzzyLogicError, KeyError):
    """Raised when a gate is evaluated before an expression was bound to it."""

    kind = "gate_expression_not_assigned"

    def __init__(self, gate: str):
        self.gate = gate
        super().__init__(f"No expression assigned to gate '{gate}'")

    def __str__(self) -> str:
        return self.args[0]


class InvalidAssignmentTarget(FuzzyLogicError, TypeError):
    """Raised when an assignment target is neither a variable nor a gate."""

    kind = "invalid_assignment_target"

    def __init__(self, target: Any):
        self.target = target
        super().__init__(
            f"Cannot assign to {target!r}: expected a variable or a gate"
        )


class ReservedGateNameError(FuzzyLogicError, ValueError):
    """Raised when the reserved global scope name is used as a gate name."""

    kind = "reserved_gate_name"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"'{name}' is reserved for the global scope")


class ExpressionFormatError(FuzzyLogicError, ValueError):
    """Raised when a serialized expression cannot be decoded."""

    kind = "expression_format_error"


class ConfigurationError(FuzzyLogicError):
    """Raised when a session configuration cannot be loaded."""

    kind = "configuration_error"
