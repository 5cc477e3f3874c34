"""
Expression catalog: comparisons, boolean connectives, function calls,
map and list literals, and identity/labels accessors
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .ast_nodes import CypherASTNode, Expression, to_expression
from .escape import escape_property


@dataclass(eq=False)
class ComparisonOp(Expression):
    """Comparison operation (a = b, a < b, a IS NULL, etc.)"""
    left: CypherASTNode
    operator: str
    right: Optional[CypherASTNode] = None

    def render(self, env) -> str:
        left = self.left.render(env)
        if self.right is None:
            return f"{left} {self.operator}"
        return f"{left} {self.operator} {self.right.render(env)}"


@dataclass(eq=False)
class BooleanOp(Expression):
    """AND / OR / XOR over one or more operands"""
    operator: str
    operands: List[CypherASTNode]

    def __post_init__(self):
        self.operands = [op for op in self.operands if op is not None]
        if not self.operands:
            raise ValueError(f"{self.operator} requires at least one operand")

    def render(self, env) -> str:
        if len(self.operands) == 1:
            return self.operands[0].render(env)
        rendered = f" {self.operator} ".join(op.render(env) for op in self.operands)
        return f"({rendered})"


@dataclass(eq=False)
class UnaryOp(Expression):
    """Unary operation (NOT a)"""
    operator: str
    operand: CypherASTNode

    def render(self, env) -> str:
        return f"{self.operator} ({self.operand.render(env)})"


@dataclass(eq=False)
class FunctionCall(Expression):
    """Function invocation"""
    name: str
    arguments: List[CypherASTNode] = field(default_factory=list)
    distinct: bool = False

    def render(self, env) -> str:
        args = ", ".join(arg.render(env) for arg in self.arguments)
        if self.distinct:
            args = f"DISTINCT {args}"
        return f"{self.name}({args})"


@dataclass(eq=False)
class IdentityAccessor(Expression):
    """Internal identity of a node or relationship: id(n)"""
    variable: CypherASTNode

    def render(self, env) -> str:
        return f"id({self.variable.render(env)})"


@dataclass(eq=False)
class LabelsAccessor(Expression):
    """Labels of a node: labels(n)"""
    variable: CypherASTNode

    def render(self, env) -> str:
        return f"labels({self.variable.render(env)})"


@dataclass(eq=False)
class MapExpression(Expression):
    """Map literal {key: value, ...}; plain values become parameters"""
    items: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.items = {key: to_expression(value) for key, value in self.items.items()}

    def render(self, env) -> str:
        entries = ", ".join(f"{escape_property(k)}: {v.render(env)}" for k, v in self.items.items())
        return "{" + entries + "}"


@dataclass(eq=False)
class ListExpression(Expression):
    """List literal [a, b, c]; plain values become parameters"""
    elements: List[Any] = field(default_factory=list)

    def __post_init__(self):
        self.elements = [to_expression(e) for e in self.elements]

    def render(self, env) -> str:
        return "[" + ", ".join(e.render(env) for e in self.elements) + "]"


# Helpers for expression construction

def _compare(left: Any, operator: str, right: Any) -> ComparisonOp:
    return ComparisonOp(to_expression(left), operator, to_expression(right))


def eq(left: Any, right: Any) -> ComparisonOp:
    return _compare(left, "=", right)


def neq(left: Any, right: Any) -> ComparisonOp:
    return _compare(left, "<>", right)


def gt(left: Any, right: Any) -> ComparisonOp:
    return _compare(left, ">", right)


def gte(left: Any, right: Any) -> ComparisonOp:
    return _compare(left, ">=", right)


def lt(left: Any, right: Any) -> ComparisonOp:
    return _compare(left, "<", right)


def lte(left: Any, right: Any) -> ComparisonOp:
    return _compare(left, "<=", right)


def in_(left: Any, right: Any) -> ComparisonOp:
    return _compare(left, "IN", right)


def contains(left: Any, right: Any) -> ComparisonOp:
    return _compare(left, "CONTAINS", right)


def starts_with(left: Any, right: Any) -> ComparisonOp:
    return _compare(left, "STARTS WITH", right)


def ends_with(left: Any, right: Any) -> ComparisonOp:
    return _compare(left, "ENDS WITH", right)


def matches(left: Any, right: Any) -> ComparisonOp:
    """Regular expression match (=~)"""
    return _compare(left, "=~", right)


def is_null(expr: CypherASTNode) -> ComparisonOp:
    return ComparisonOp(expr, "IS NULL")


def is_not_null(expr: CypherASTNode) -> ComparisonOp:
    return ComparisonOp(expr, "IS NOT NULL")


def and_(*operands: Optional[CypherASTNode]) -> BooleanOp:
    """Conjunction; None operands are skipped so optional filters compose"""
    return BooleanOp("AND", list(operands))


def or_(*operands: Optional[CypherASTNode]) -> BooleanOp:
    return BooleanOp("OR", list(operands))


def xor(*operands: Optional[CypherASTNode]) -> BooleanOp:
    return BooleanOp("XOR", list(operands))


def not_(operand: CypherASTNode) -> UnaryOp:
    return UnaryOp("NOT", operand)


def count(expr: CypherASTNode, distinct: bool = False) -> FunctionCall:
    return FunctionCall("count", [expr], distinct=distinct)


def collect(expr: CypherASTNode, distinct: bool = False) -> FunctionCall:
    return FunctionCall("collect", [expr], distinct=distinct)


def coalesce(*exprs: Any) -> FunctionCall:
    return FunctionCall("coalesce", [to_expression(e) for e in exprs])


def id_of(variable: CypherASTNode) -> IdentityAccessor:
    return IdentityAccessor(variable)


def labels_of(variable: CypherASTNode) -> LabelsAccessor:
    return LabelsAccessor(variable)


def node_summary(variable: CypherASTNode, *keys: str) -> MapExpression:
    """
    Map of a node's identity, labels and selected properties:
    ``{id: id(this0), labels: labels(this0), name: this0.name}``
    """
    items: Dict[str, Any] = {"id": IdentityAccessor(variable), "labels": LabelsAccessor(variable)}
    for key in keys:
        items[key] = variable.property(key)
    return MapExpression(items)
