"""
Fuzzy operators.

Pure functions over truth degrees. Inputs are not validated or clamped;
only ``fuzzy_add`` saturates, because its formula does.
"""

from __future__ import annotations

from typing import Callable, Dict, NamedTuple


def fuzzy_add(a: float, b: float) -> float:
    """Saturating addition: min(1.0, a + b)."""
    return min(1.0, a + b)


def fuzzy_mult(a: float, b: float) -> float:
    """Product of two degrees."""
    return a * b


def fuzzy_complement(a: float) -> float:
    """Complement: 1.0 - a (not clamped)."""
    return 1.0 - a


def fuzzy_and(a: float, b: float) -> float:
    """Intersection: min(a, b)."""
    return min(a, b)


def fuzzy_or(a: float, b: float) -> float:
    """Union: max(a, b)."""
    return max(a, b)


def fuzzy_xor(a: float, b: float) -> float:
    """Symmetric difference: max(a, b) - min(a, b)."""
    return max(a, b) - min(a, b)


def fuzzy_alpha_cut(a: float, threshold: float) -> float:
    """Keep ``a`` when it reaches ``threshold`` (inclusive), else 0.0."""
    return a if a >= threshold else 0.0


class OperatorSpec(NamedTuple):
    """Registry entry for an operator."""
    arity: int
    func: Callable[..., float]


# Operators by expression tag
OPERATORS: Dict[str, OperatorSpec] = {
    "add": OperatorSpec(2, fuzzy_add),
    "mult": OperatorSpec(2, fuzzy_mult),
    "complement": OperatorSpec(1, fuzzy_complement),
    "and": OperatorSpec(2, fuzzy_and),
    "or": OperatorSpec(2, fuzzy_or),
    "xor": OperatorSpec(2, fuzzy_xor),
    "alpha_cut": OperatorSpec(2, fuzzy_alpha_cut),
}


def get_operator(name: str) -> OperatorSpec:
    """Look up an operator by tag."""
    try:
        return OPERATORS[name]
    except KeyError:
        raise ValueError(f"Unknown operator: {name}") from None
