"""
AST Node protocol for Cypher query construction
Every compilable construct renders itself against an Environment
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .build import BuildResult
    from .config import CompilerConfig
    from .environment import Environment, ExtraParams


class Direction(Enum):
    """Relationship direction"""
    OUTGOING = "right"
    INCOMING = "left"
    BOTH = "undirected"


class SortOrder(Enum):
    """Sort order for ORDER BY"""
    ASC = "ASC"
    DESC = "DESC"


class CypherASTNode(ABC):
    """Base class for all AST nodes"""

    @abstractmethod
    def render(self, env: 'Environment') -> str:
        """Render this node, registering names and parameters in env"""

    def build(self, prefix: Optional[str] = None,
              extra_params: Optional['ExtraParams'] = None,
              config: Optional['CompilerConfig'] = None) -> 'BuildResult':
        """Compile this node as the root of a query"""
        from .build import build
        return build(self, prefix=prefix, extra_params=extra_params, config=config)


class Expression(CypherASTNode):
    """Base expression node"""
    pass


def to_expression(value: Any) -> CypherASTNode:
    """Return value unchanged if it is an AST node, otherwise wrap it in a Param"""
    if isinstance(value, CypherASTNode):
        return value
    from .references import Param
    return Param(value)
