"""
Two-tier variable environment.

Holds one flat global mapping and one mapping per gate (local scope).
Two lookup policies coexist:

- ``resolve``: used when evaluating expressions. Every gate scope is
  searched, in creation order, before the global mapping. A name bound in
  any gate therefore shadows the global value for every expression, not
  only for expressions of that gate.
- ``test_gate``: looks only in the named gate, then in global.

Snapshots are deep copies of both tiers and are restored in place.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import VariableNotFound
from .log import get_logger

logger = get_logger(__name__)

GLOBAL_SCOPE = "global"


@dataclass(frozen=True)
class EnvironmentSnapshot:
    """Deep copy of an environment's contents."""

    global_values: Dict[str, float] = field(default_factory=dict)
    scopes: Dict[str, Dict[str, float]] = field(default_factory=dict)

    @property
    def variable_count(self) -> int:
        return len(self.global_values) + sum(len(s) for s in self.scopes.values())


class Environment:
    """
    Mutable store of variable bindings.

    Scope existence is independent of the gate registry: a gate may hold
    variables without an expression and the other way round.
    """

    def __init__(self):
        self._global: Dict[str, float] = {}
        self._scopes: Dict[str, Dict[str, float]] = {}

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def resolve(self, name: str) -> float:
        """
        Resolve a variable for expression evaluation.

        Scans every gate scope first, then the global mapping.

        Raises:
            VariableNotFound: If no scope binds ``name``.
        """
        for scope in self._scopes.values():
            if name in scope:
                return scope[name]

        if name in self._global:
            return self._global[name]

        raise VariableNotFound(name)

    def resolve_scope(self, name: str) -> Optional[str]:
        """Name of the scope ``resolve`` would read ``name`` from, or None."""
        for gate, scope in self._scopes.items():
            if name in scope:
                return gate
        if name in self._global:
            return GLOBAL_SCOPE
        return None

    def test_gate(self, gate: str, name: str) -> float:
        """
        Look up ``name`` in one gate, falling back to global.

        If the gate has no scope at all, only global is consulted. Other
        gates are never searched.

        Raises:
            VariableNotFound: If neither the gate nor global binds ``name``.
        """
        if gate != GLOBAL_SCOPE:
            scope = self._scopes.get(gate)
            if scope is not None and name in scope:
                return scope[name]

        if name in self._global:
            return self._global[name]

        raise VariableNotFound(name, gate)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def assign(self, name: str, value: float, gate: str = GLOBAL_SCOPE) -> None:
        """Bind ``name`` in global or in ``gate``'s scope, creating it if needed."""
        if gate == GLOBAL_SCOPE:
            self._global[name] = value
        else:
            self._scopes.setdefault(gate, {})[name] = value
        logger.debug("Assigned %s = %r in %s", name, value, gate)

    def clear(self) -> None:
        """Remove every binding and every gate scope."""
        self._global.clear()
        self._scopes.clear()

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def snapshot(self) -> EnvironmentSnapshot:
        """Deep copy the global mapping and every gate scope."""
        return EnvironmentSnapshot(
            global_values=copy.deepcopy(self._global),
            scopes=copy.deepcopy(self._scopes),
        )

    def restore(self, snapshot: EnvironmentSnapshot) -> None:
        """
        Replace all contents with ``snapshot``.

        Gates created since the snapshot disappear and modified values
        revert. The snapshot itself is copied again so it can be reused.
        """
        self._global.clear()
        self._global.update(copy.deepcopy(snapshot.global_values))
        self._scopes.clear()
        self._scopes.update(copy.deepcopy(snapshot.scopes))
        logger.debug(
            "Restored environment: %d global, %d gate scope(s)",
            len(self._global), len(self._scopes),
        )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def has_scope(self, gate: str) -> bool:
        return gate in self._scopes

    def scope_names(self) -> List[str]:
        return list(self._scopes)

    def scope(self, gate: str) -> Dict[str, float]:
        """Copy of one gate's bindings (empty if the gate has no scope)."""
        return dict(self._scopes.get(gate, {}))

    def global_values(self) -> Dict[str, float]:
        return dict(self._global)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "globals": dict(self._global),
            "gates": {gate: dict(scope) for gate, scope in self._scopes.items()},
        }

    def __repr__(self) -> str:
        return f"Environment(globals={len(self._global)}, gates={self.scope_names()})"
