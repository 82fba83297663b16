"""
Scope Controller.

Tracks the ambient gate (the default target of assignments) as a stack,
and runs anonymous scopes whose environment changes are rolled back on exit.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, List, TypeVar

from .environment import GLOBAL_SCOPE, Environment
from .errors import ReservedGateNameError
from .log import get_logger
from .gates import GateLike, gate_name

logger = get_logger(__name__)

T = TypeVar("T")


class ScopeController:
    """
    Manages the ambient gate and anonymous scopes for one environment.

    Nested ``gate`` blocks form a stack; only the top is consulted. Both
    kinds of block restore their state in ``finally``, so an exception
    leaving the block does not leak the inner gate or the inner bindings.
    The gate registry is not part of anonymous-scope rollback.
    """

    def __init__(self, env: Environment):
        self.env = env
        self._stack: List[str] = []

    @property
    def current_gate(self) -> str:
        """The ambient gate, or ``"global"`` when no gate block is active."""
        return self._stack[-1] if self._stack else GLOBAL_SCOPE

    @property
    def depth(self) -> int:
        return len(self._stack)

    @contextmanager
    def gate(self, gate: GateLike) -> Iterator[str]:
        """Make ``gate`` the ambient gate for the duration of the block."""
        name = gate_name(gate)
        if name == GLOBAL_SCOPE:
            raise ReservedGateNameError(name)

        depth = len(self._stack)
        logger.debug("Enter gate %s (was %s)", name, self.current_gate)
        self._stack.append(name)
        try:
            yield name
        finally:
            del self._stack[depth:]
            logger.debug("Leave gate %s (back to %s)", name, self.current_gate)

    @contextmanager
    def anonymous(self) -> Iterator[Environment]:
        """Run the block against the environment, then revert every change to it."""
        snapshot = self.env.snapshot()
        logger.debug("Enter anonymous scope (%d binding(s) saved)", snapshot.variable_count)
        try:
            yield self.env
        finally:
            self.env.restore(snapshot)
            logger.debug("Leave anonymous scope")

    def with_gate(self, gate: GateLike, block: Callable[[], T]) -> T:
        """Call ``block`` with ``gate`` as the ambient gate and return its result."""
        with self.gate(gate):
            return block()

    def with_anonymous_scope(self, block: Callable[[], T]) -> T:
        """Call ``block`` inside an anonymous scope and return its result."""
        with self.anonymous():
            return block()

    def reset(self) -> None:
        """Drop every ambient gate."""
        self._stack.clear()
