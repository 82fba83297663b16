"""
Fuzzy Logic: an embedded expression language for fuzzy truth degrees.

Expressions are built in code from variables, literals and fuzzy
operators, then evaluated against a session's two-tier environment
(global bindings plus per-gate local scopes). Anonymous scopes roll back
every environment change made inside them.
"""

from .errors import (
    FuzzyLogicError,
    VariableNotFound,
    GateExpressionNotAssigned,
    InvalidAssignmentTarget,
    ReservedGateNameError,
    ExpressionFormatError,
    ConfigurationError,
)
from .logic import (
    Expression,
    Value,
    Variable,
    FuzzyValue,
    FuzzyVariable,
    Add,
    Mult,
    Complement,
    And,
    Or,
    Xor,
    AlphaCut,
    value,
    variable,
    add,
    mult,
    complement,
    and_,
    or_,
    xor,
    alpha_cut,
    ExpressionEvaluator,
    ExpressionAnalyzer,
    LogicParser,
)
from .environment import GLOBAL_SCOPE, Environment, EnvironmentSnapshot
from .gates import Gate, GateRegistry
from .scope import ScopeController
from .session import EvaluationResult, FuzzySession
from .config import SessionConfig, GateConfig, LoggingConfig
from .fuzzyset import FuzzySet, FuzzySetGates
from .log import configure_logging

__version__ = "1.0.0"
__all__ = [
    # Errors
    "FuzzyLogicError",
    "VariableNotFound",
    "GateExpressionNotAssigned",
    "InvalidAssignmentTarget",
    "ReservedGateNameError",
    "ExpressionFormatError",
    "ConfigurationError",
    # Expressions
    "Expression",
    "Value",
    "Variable",
    "FuzzyValue",
    "FuzzyVariable",
    "Add",
    "Mult",
    "Complement",
    "And",
    "Or",
    "Xor",
    "AlphaCut",
    "value",
    "variable",
    "add",
    "mult",
    "complement",
    "and_",
    "or_",
    "xor",
    "alpha_cut",
    "ExpressionEvaluator",
    "ExpressionAnalyzer",
    "LogicParser",
    # State
    "GLOBAL_SCOPE",
    "Environment",
    "EnvironmentSnapshot",
    "Gate",
    "GateRegistry",
    "ScopeController",
    "EvaluationResult",
    "FuzzySession",
    # Configuration
    "SessionConfig",
    "GateConfig",
    "LoggingConfig",
    "configure_logging",
    # Fuzzy sets
    "FuzzySet",
    "FuzzySetGates",
]
