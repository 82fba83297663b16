"""
Expression tree for fuzzy truth degrees.

Nodes are immutable dataclasses tagged with an ``op`` string. Evaluation
lives in ``ExpressionEvaluator``, which dispatches on that tag; ``eval`` on a
node is a shortcut for it.

Example:
    expr = add(variable("A"), variable("B"))
    expr.eval(env)  # min(1.0, A + B)
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING, Any, ClassVar, Dict, List, Tuple, Union

if TYPE_CHECKING:
    from ..environment import Environment


class Expression:
    """Base class for expression nodes."""

    op: ClassVar[str] = ""

    def eval(self, env: "Environment") -> float:
        """Evaluate this expression against an environment."""
        from .evaluator import ExpressionEvaluator
        return ExpressionEvaluator().evaluate(self, env)

    def children(self) -> Tuple["Expression", ...]:
        """Direct sub-expressions, left to right."""
        return ()

    def walk(self):
        """Yield this node and every descendant, depth first."""
        yield self
        for child in self.children():
            yield from child.walk()

    def variables(self) -> List[str]:
        """Names of the variables referenced, in first-seen order."""
        names: List[str] = []
        for node in self.walk():
            if isinstance(node, Variable) and node.name not in names:
                names.append(node.name)
        return names

    def to_logic(self) -> Any:
        """Convert to the JSON Logic form read by ``LogicParser``."""
        from .parser import to_logic
        return to_logic(self)


def _check_operand(owner: str, operand: Any) -> None:
    if not isinstance(operand, Expression):
        raise TypeError(
            f"{owner} operand must be an Expression, got {type(operand).__name__}"
        )


@dataclass(frozen=True)
class Value(Expression):
    """A literal degree, stored as given."""

    value: float
    op: ClassVar[str] = "value"

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, Real):
            raise TypeError(f"Value expects a number, got {self.value!r}")
        object.__setattr__(self, "value", float(self.value))

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class Variable(Expression):
    """A named reference resolved against the environment at evaluation time."""

    name: str
    op: ClassVar[str] = "var"

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise TypeError(f"Variable name must be a non-empty string, got {self.name!r}")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class UnaryExpression(Expression):
    """Node with a single operand."""

    operand: Expression

    def __post_init__(self):
        _check_operand(type(self).__name__, self.operand)

    def children(self) -> Tuple[Expression, ...]:
        return (self.operand,)


@dataclass(frozen=True)
class BinaryExpression(Expression):
    """Node with a left and a right operand."""

    left: Expression
    right: Expression

    symbol: ClassVar[str] = "?"

    def __post_init__(self):
        _check_operand(type(self).__name__, self.left)
        _check_operand(type(self).__name__, self.right)

    def children(self) -> Tuple[Expression, ...]:
        return (self.left, self.right)

    def __str__(self) -> str:
        return f"({self.left} {self.symbol} {self.right})"


@dataclass(frozen=True)
class Add(BinaryExpression):
    op: ClassVar[str] = "add"
    symbol: ClassVar[str] = "+"


@dataclass(frozen=True)
class Mult(BinaryExpression):
    op: ClassVar[str] = "mult"
    symbol: ClassVar[str] = "*"


@dataclass(frozen=True)
class And(BinaryExpression):
    op: ClassVar[str] = "and"
    symbol: ClassVar[str] = "&"


@dataclass(frozen=True)
class Or(BinaryExpression):
    op: ClassVar[str] = "or"
    symbol: ClassVar[str] = "|"


@dataclass(frozen=True)
class Xor(BinaryExpression):
    op: ClassVar[str] = "xor"
    symbol: ClassVar[str] = "^"


@dataclass(frozen=True)
class Complement(UnaryExpression):
    op: ClassVar[str] = "complement"

    def __str__(self) -> str:
        return f"~{self.operand}"


@dataclass(frozen=True)
class AlphaCut(UnaryExpression):
    """Zero out the operand when it falls below ``threshold``."""

    threshold: float = 0.0
    op: ClassVar[str] = "alpha_cut"

    def __post_init__(self):
        super().__post_init__()
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, Real):
            raise TypeError(f"AlphaCut threshold must be a number, got {self.threshold!r}")
        object.__setattr__(self, "threshold", float(self.threshold))

    def __str__(self) -> str:
        return f"alpha_cut({self.operand}, {self.threshold!r})"


# Names used by the original DSL
FuzzyValue = Value
FuzzyVariable = Variable

Operand = Union[Expression, float, int, str]

NODE_TYPES: Dict[str, type] = {
    cls.op: cls
    for cls in (Value, Variable, Add, Mult, Complement, And, Or, Xor, AlphaCut)
}


def as_expression(operand: Operand) -> Expression:
    """Wrap numbers in ``Value`` and strings in ``Variable``."""
    if isinstance(operand, Expression):
        return operand
    if isinstance(operand, str):
        return Variable(operand)
    if isinstance(operand, Real) and not isinstance(operand, bool):
        return Value(operand)
    raise TypeError(f"Cannot use {operand!r} as an expression")


def value(v: float) -> Value:
    return Value(v)


def variable(name: str) -> Variable:
    return Variable(name)


def add(a: Operand, b: Operand) -> Add:
    return Add(as_expression(a), as_expression(b))


def mult(a: Operand, b: Operand) -> Mult:
    return Mult(as_expression(a), as_expression(b))


def complement(a: Operand) -> Complement:
    return Complement(as_expression(a))


def and_(a: Operand, b: Operand) -> And:
    return And(as_expression(a), as_expression(b))


def or_(a: Operand, b: Operand) -> Or:
    return Or(as_expression(a), as_expression(b))


def xor(a: Operand, b: Operand) -> Xor:
    return Xor(as_expression(a), as_expression(b))


def alpha_cut(a: Operand, threshold: float) -> AlphaCut:
    return AlphaCut(as_expression(a), threshold)
