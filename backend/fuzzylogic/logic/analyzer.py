"""
Expression Analyzer.

Reports the structure of an expression and, given an environment, where
each of its variables would be read from during evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .expression import Expression

if TYPE_CHECKING:
    from ..environment import Environment


@dataclass
class AnalysisResult:
    """Result of expression analysis."""
    node_count: int = 0
    depth: int = 0
    operators: List[str] = field(default_factory=list)
    variables: List[str] = field(default_factory=list)
    resolution: Dict[str, Optional[str]] = field(default_factory=dict)
    unresolved: List[str] = field(default_factory=list)
    cross_gate_reads: List[str] = field(default_factory=list)

    @property
    def evaluable(self) -> bool:
        """True when every variable resolves (only meaningful with an environment)."""
        return not self.unresolved

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "node_count": self.node_count,
            "depth": self.depth,
            "operators": self.operators,
            "variables": self.variables,
            "resolution": self.resolution,
            "unresolved": self.unresolved,
            "cross_gate_reads": self.cross_gate_reads,
        }


class ExpressionAnalyzer:
    """
    Analyzes expressions before evaluation.

    Provides:
    - Node count, depth and operators used
    - Variables referenced, in first-seen order
    - Scope each variable resolves from in a given environment
    - Variables an expression of one gate would read from another gate
    """

    def analyze(
        self,
        expr: Expression,
        env: Optional["Environment"] = None,
        gate: Optional[str] = None,
    ) -> AnalysisResult:
        """
        Analyze an expression.

        Args:
            expr: The expression to analyze.
            env: Optional environment to check variable resolution against.
            gate: Gate the expression belongs to, for cross-gate detection.

        Returns:
            AnalysisResult with analysis details.
        """
        result = AnalysisResult()

        for node in expr.walk():
            result.node_count += 1
            if node.op not in ("value", "var") and node.op not in result.operators:
                result.operators.append(node.op)

        result.depth = self._depth(expr)
        result.variables = expr.variables()

        if env is not None:
            for name in result.variables:
                source = env.resolve_scope(name)
                result.resolution[name] = source
                if source is None:
                    result.unresolved.append(name)
                elif source != "global" and source != gate:
                    # Read from an unrelated gate's scope
                    result.cross_gate_reads.append(name)

        return result

    def _depth(self, expr: Expression) -> int:
        children = expr.children()
        if not children:
            return 1
        return 1 + max(self._depth(child) for child in children)
