"""
Type predicate expressions: x IS :: INTEGER, x IS NOT :: LIST<STRING> NOT NULL
"""

from dataclasses import dataclass, replace
from typing import List, Sequence, Union

from .ast_nodes import CypherASTNode, Expression


class CypherTypes:
    """Base value types usable in type predicates"""
    ANY = "ANY"
    BOOLEAN = "BOOLEAN"
    DATE = "DATE"
    DURATION = "DURATION"
    FLOAT = "FLOAT"
    INTEGER = "INTEGER"
    LOCAL_DATETIME = "LOCAL DATETIME"
    LOCAL_TIME = "LOCAL TIME"
    MAP = "MAP"
    NODE = "NODE"
    NOTHING = "NOTHING"
    NULL = "NULL"
    PATH = "PATH"
    POINT = "POINT"
    PROPERTY_VALUE = "PROPERTY VALUE"
    RELATIONSHIP = "RELATIONSHIP"
    STRING = "STRING"
    ZONED_DATETIME = "ZONED DATETIME"
    ZONED_TIME = "ZONED TIME"

    @classmethod
    def values(cls) -> List[str]:
        return [v for k, v in vars(cls).items() if k.isupper()]


@dataclass(frozen=True)
class ListType:
    """LIST<...> type"""
    item: 'CypherType'

    def __post_init__(self):
        _check_type(self.item)

    def render(self) -> str:
        return f"LIST<{_render_type(self.item)}>"


CypherType = Union[str, ListType]


def list_of(item: CypherType) -> ListType:
    return ListType(item)


def _check_type(type_: CypherType) -> None:
    if isinstance(type_, ListType):
        return
    if type_ not in CypherTypes.values():
        raise ValueError(f"Unknown Cypher type: {type_!r}")


def _render_type(type_: CypherType) -> str:
    if isinstance(type_, ListType):
        return type_.render()
    return type_


@dataclass(eq=False)
class IsType(Expression):
    """Type predicate; all listed types share the same nullability"""
    expression: CypherASTNode
    types: Sequence[CypherType]
    negate: bool = False
    non_nullable: bool = False

    def __post_init__(self):
        if isinstance(self.types, (str, ListType)):
            self.types = [self.types]
        self.types = list(self.types)
        if not self.types:
            raise ValueError("IsType requires at least one type")
        for type_ in self.types:
            _check_type(type_)

    def not_null(self) -> 'IsType':
        return replace(self, non_nullable=True)

    def render(self, env) -> str:
        keyword = "IS NOT" if self.negate else "IS"
        suffix = " NOT NULL" if self.non_nullable else ""
        types = " | ".join(f"{_render_type(t)}{suffix}" for t in self.types)
        return f"{self.expression.render(env)} {keyword} :: {types}"


def is_type(expr: CypherASTNode, types: Union[CypherType, Sequence[CypherType]]) -> IsType:
    return IsType(expr, types)


def is_not_type(expr: CypherASTNode, types: Union[CypherType, Sequence[CypherType]]) -> IsType:
    return IsType(expr, types, negate=True)
