"""
Discrete fuzzy sets.

A fuzzy set maps element names to membership degrees. Binary operations
walk the elements of the left-hand set; an element missing from the other
set counts as membership 0.0.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional, Set

from .logic.operators import (
    fuzzy_add,
    fuzzy_and,
    fuzzy_complement,
    fuzzy_mult,
    fuzzy_or,
)

BINARY_SET_OPERATIONS: Dict[str, Callable[[float, float], float]] = {
    "union": fuzzy_or,
    "intersection": fuzzy_and,
    "add": fuzzy_add,
    "multi": fuzzy_mult,
}

UNARY_SET_OPERATIONS: Dict[str, Callable[[float], float]] = {
    "complement": fuzzy_complement,
}


@dataclass(frozen=True)
class FuzzySet:
    """Immutable mapping of element -> membership degree."""

    elements: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "elements", MappingProxyType(dict(self.elements)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FuzzySet):
            return NotImplemented
        return dict(self.elements) == dict(other.elements)

    def __hash__(self) -> int:
        return hash(frozenset(self.elements.items()))

    def __len__(self) -> int:
        return len(self.elements)

    def __contains__(self, element: object) -> bool:
        return element in self.elements

    def membership(self, element: str) -> float:
        """Degree of ``element``; 0.0 if it is not in the set."""
        return self.elements.get(element, 0.0)

    def perform_operation(self, operation: str, other: Optional["FuzzySet"] = None) -> "FuzzySet":
        """
        Apply a named set operation.

        Args:
            operation: union, intersection, complement, add or multi.
            other: Right-hand set, required for binary operations.

        Raises:
            ValueError: On an unknown operation or a missing right-hand set.
        """
        if operation in UNARY_SET_OPERATIONS:
            func = UNARY_SET_OPERATIONS[operation]
            return FuzzySet({x: func(v) for x, v in self.elements.items()})

        func = BINARY_SET_OPERATIONS.get(operation)
        if func is None:
            raise ValueError(f"Unknown operation: {operation}")
        if other is None:
            raise ValueError(f"{operation.capitalize()} requires another set")

        return FuzzySet({
            x: func(v, other.elements.get(x, 0.0))
            for x, v in self.elements.items()
        })

    def union(self, other: "FuzzySet") -> "FuzzySet":
        return self.perform_operation("union", other)

    def intersection(self, other: "FuzzySet") -> "FuzzySet":
        return self.perform_operation("intersection", other)

    def complement(self) -> "FuzzySet":
        return self.perform_operation("complement")

    def add(self, other: "FuzzySet") -> "FuzzySet":
        return self.perform_operation("add", other)

    def multi(self, other: "FuzzySet") -> "FuzzySet":
        return self.perform_operation("multi", other)

    def alpha_cut(self, alpha: float) -> Set[str]:
        """Elements whose membership is at least ``alpha``."""
        return {x for x, v in self.elements.items() if v >= alpha}


@dataclass(frozen=True)
class FuzzySetGates:
    """
    Gates holding whole fuzzy sets.

    ``assign`` returns a new instance; the receiver is left unchanged.
    """

    gates: Mapping[str, FuzzySet] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "gates", MappingProxyType(dict(self.gates)))

    def assign(self, name: str, result: FuzzySet) -> "FuzzySetGates":
        updated = dict(self.gates)
        updated[name] = result
        return FuzzySetGates(updated)

    def test_gate(self, gate: str, element: str) -> Optional[float]:
        """Membership of ``element`` in the set held by ``gate``, if any."""
        fuzzy_set = self.gates.get(gate)
        if fuzzy_set is None:
            return None
        return fuzzy_set.elements.get(element)
