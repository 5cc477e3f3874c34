"""
Projection columns for RETURN and WITH

Columns are explicit variants: a PlainColumn renders its expression, an
AliasedColumn renders ``expr AS alias`` where the alias is either a plain name
or a Variable.
"""

from dataclasses import dataclass
from typing import Any, List, Sequence, Union

from .ast_nodes import CypherASTNode
from .escape import escape_identifier
from .references import Variable


@dataclass(eq=False)
class PlainColumn:
    expression: CypherASTNode

    def render(self, env) -> str:
        return self.expression.render(env)


@dataclass(eq=False)
class AliasedColumn:
    expression: CypherASTNode
    alias: Union[str, Variable]

    def __post_init__(self):
        if not isinstance(self.alias, (str, Variable)):
            raise TypeError(f"Alias must be a string or a Variable, got {type(self.alias).__name__}")

    def render(self, env) -> str:
        if isinstance(self.alias, Variable):
            alias = self.alias.render(env)
        else:
            alias = escape_identifier(self.alias)
        return f"{self.expression.render(env)} AS {alias}"


Column = Union[PlainColumn, AliasedColumn]


def to_column(item: Any) -> Column:
    """Convert a column argument: Column as-is, AST node -> PlainColumn"""
    if isinstance(item, (PlainColumn, AliasedColumn)):
        return item
    if isinstance(item, CypherASTNode):
        return PlainColumn(item)
    raise TypeError(f"Cannot project {type(item).__name__}; use PlainColumn or AliasedColumn")


class Projection(CypherASTNode):
    """Comma separated list of columns, optionally starting with *"""

    def __init__(self, columns: Sequence[Any] = ()):
        self.star = False
        self.columns: List[Column] = []
        self.add_columns(columns)

    def add_columns(self, columns: Sequence[Any]) -> None:
        for item in columns:
            if isinstance(item, str) and item == "*":
                self.star = True
            else:
                self.columns.append(to_column(item))

    def is_empty(self) -> bool:
        return not self.star and not self.columns

    def render(self, env) -> str:
        rendered = [column.render(env) for column in self.columns]
        # A single star goes first
        if self.star:
            rendered.insert(0, "*")
        return ", ".join(rendered)
