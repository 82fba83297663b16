"""
Expression engine for fuzzy truth degrees.

Provides expression trees, their evaluation and their JSON Logic form.
"""

from .expression import (
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
)
from .evaluator import ExpressionEvaluator
from .parser import LogicParser, parse_logic, to_logic
from .analyzer import ExpressionAnalyzer, AnalysisResult

__all__ = [
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
    "LogicParser",
    "parse_logic",
    "to_logic",
    "ExpressionAnalyzer",
    "AnalysisResult",
]
