"""
Clause catalog: MATCH, CREATE, MERGE, SET, WITH, RETURN and clause concatenation

Fluent methods never mutate a clause; they return an updated copy.
"""

from dataclasses import dataclass, field, replace
from typing import Any, List, Optional, Sequence, Union

from .ast_nodes import CypherASTNode, SortOrder, to_expression
from .expressions import and_
from .projection import Projection
from .references import Literal, PropertyRef


def _as_list(value: Union[CypherASTNode, Sequence[CypherASTNode]]) -> List[CypherASTNode]:
    if isinstance(value, CypherASTNode):
        return [value]
    return list(value)


def _to_count(value: Union[int, CypherASTNode]) -> CypherASTNode:
    if isinstance(value, CypherASTNode):
        return value
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"SKIP/LIMIT require a non-negative integer, got {value!r}")
    return Literal(value)


def _to_order(order: Union[str, SortOrder]) -> SortOrder:
    if isinstance(order, str):
        return SortOrder(order.upper())
    return order


class Clause(CypherASTNode):
    """Base class for clauses"""

    def return_(self, *columns: Any, distinct: bool = False) -> 'Concat':
        """Follow this clause with RETURN"""
        return self.concat(ReturnClause(Projection(columns), distinct=distinct))

    def with_(self, *columns: Any, distinct: bool = False) -> 'Concat':
        """Follow this clause with WITH"""
        return self.concat(WithClause(Projection(columns), distinct=distinct))

    def concat(self, *clauses: 'Clause') -> 'Concat':
        return Concat([self, *clauses])


@dataclass(eq=False)
class SortItem:
    """Item in ORDER BY clause"""
    expression: CypherASTNode
    order: SortOrder = SortOrder.ASC

    def render(self, env) -> str:
        return f"{self.expression.render(env)} {self.order.value}"


@dataclass(eq=False)
class SetItem:
    """Item in SET clause: n.prop = value"""
    target: PropertyRef
    value: Any

    def __post_init__(self):
        self.value = to_expression(self.value)

    def render(self, env) -> str:
        return f"{self.target.render(env)} = {self.value.render(env)}"


def _where(env, predicate: Optional[CypherASTNode]) -> str:
    if predicate is None:
        return ""
    return f"{env.config.clause_separator}WHERE {predicate.render(env)}"


@dataclass(eq=False)
class MatchClause(Clause):
    """MATCH clause"""
    patterns: List[CypherASTNode]
    optional: bool = False
    predicate: Optional[CypherASTNode] = None

    def __post_init__(self):
        self.patterns = _as_list(self.patterns)
        if not self.patterns:
            raise ValueError("MATCH requires at least one pattern")

    def where(self, predicate: CypherASTNode) -> 'MatchClause':
        """Add a predicate; repeated calls are combined with AND"""
        return replace(self, predicate=and_(self.predicate, predicate))

    def render(self, env) -> str:
        keyword = "OPTIONAL MATCH" if self.optional else "MATCH"
        patterns = ", ".join(p.render(env) for p in self.patterns)
        return f"{keyword} {patterns}{_where(env, self.predicate)}"


@dataclass(eq=False)
class OptionalMatchClause(MatchClause):
    """OPTIONAL MATCH clause"""
    optional: bool = True


@dataclass(eq=False)
class CreateClause(Clause):
    """CREATE clause"""
    patterns: List[CypherASTNode]
    set_items: List[SetItem] = field(default_factory=list)

    def __post_init__(self):
        self.patterns = _as_list(self.patterns)
        if not self.patterns:
            raise ValueError("CREATE requires at least one pattern")

    def set(self, target: PropertyRef, value: Any) -> 'CreateClause':
        return replace(self, set_items=[*self.set_items, SetItem(target, value)])

    def render(self, env) -> str:
        patterns = ", ".join(p.render(env) for p in self.patterns)
        result = f"CREATE {patterns}"
        if self.set_items:
            items = ", ".join(item.render(env) for item in self.set_items)
            result += f"{env.config.clause_separator}SET {items}"
        return result


@dataclass(eq=False)
class MergeClause(Clause):
    """MERGE clause"""
    pattern: CypherASTNode
    on_create: List[SetItem] = field(default_factory=list)
    on_match: List[SetItem] = field(default_factory=list)

    def on_create_set(self, target: PropertyRef, value: Any) -> 'MergeClause':
        return replace(self, on_create=[*self.on_create, SetItem(target, value)])

    def on_match_set(self, target: PropertyRef, value: Any) -> 'MergeClause':
        return replace(self, on_match=[*self.on_match, SetItem(target, value)])

    def render(self, env) -> str:
        sep = env.config.clause_separator
        result = f"MERGE {self.pattern.render(env)}"
        if self.on_create:
            result += sep + "ON CREATE SET " + ", ".join(i.render(env) for i in self.on_create)
        if self.on_match:
            result += sep + "ON MATCH SET " + ", ".join(i.render(env) for i in self.on_match)
        return result


@dataclass(eq=False)
class SetClause(Clause):
    """SET clause"""
    items: List[SetItem]

    def __post_init__(self):
        if not self.items:
            raise ValueError("SET requires at least one item")

    def render(self, env) -> str:
        return "SET " + ", ".join(item.render(env) for item in self.items)


@dataclass(eq=False)
class ReturnClause(Clause):
    """RETURN clause"""
    projection: Projection
    distinct: bool = False
    order_items: List[SortItem] = field(default_factory=list)
    skip_value: Optional[CypherASTNode] = None
    limit_value: Optional[CypherASTNode] = None

    keyword = "RETURN"

    def __post_init__(self):
        if not isinstance(self.projection, Projection):
            self.projection = Projection(_as_list(self.projection))
        if self.projection.is_empty():
            raise ValueError(f"{self.keyword} requires at least one column or *")

    def order_by(self, expression: CypherASTNode, order: Union[str, SortOrder] = SortOrder.ASC):
        return replace(self, order_items=[*self.order_items, SortItem(expression, _to_order(order))])

    def skip(self, value: Union[int, CypherASTNode]):
        return replace(self, skip_value=_to_count(value))

    def limit(self, value: Union[int, CypherASTNode]):
        return replace(self, limit_value=_to_count(value))

    def _render_body(self, env) -> str:
        sep = env.config.clause_separator
        distinct = " DISTINCT" if self.distinct else ""
        result = f"{self.keyword}{distinct} {self.projection.render(env)}"
        if self.order_items:
            result += sep + "ORDER BY " + ", ".join(i.render(env) for i in self.order_items)
        if self.skip_value is not None:
            result += f"{sep}SKIP {self.skip_value.render(env)}"
        if self.limit_value is not None:
            result += f"{sep}LIMIT {self.limit_value.render(env)}"
        return result

    def render(self, env) -> str:
        return self._render_body(env)


@dataclass(eq=False)
class WithClause(ReturnClause):
    """WITH clause for query chaining"""
    predicate: Optional[CypherASTNode] = None

    keyword = "WITH"

    def where(self, predicate: CypherASTNode) -> 'WithClause':
        return replace(self, predicate=and_(self.predicate, predicate))

    def render(self, env) -> str:
        return self._render_body(env) + _where(env, self.predicate)


@dataclass(eq=False)
class Concat(Clause):
    """Sequence of clauses rendered one after another"""
    clauses: List[CypherASTNode] = field(default_factory=list)

    def concat(self, *clauses: CypherASTNode) -> 'Concat':
        return Concat([*self.clauses, *clauses])

    def render(self, env) -> str:
        rendered = (clause.render(env) for clause in self.clauses)
        return env.config.clause_separator.join(text for text in rendered if text)
