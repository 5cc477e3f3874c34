"""
cypher-builder

Build Cypher queries from Python objects. Trees of patterns, expressions and
clauses compile into query text plus a parameter dict.
"""

from .ast_nodes import CypherASTNode, Direction, Expression, SortOrder
from .build import BuildResult, build
from .clauses import (
    Clause,
    Concat,
    CreateClause,
    MatchClause,
    MergeClause,
    OptionalMatchClause,
    ReturnClause,
    SetClause,
    SetItem,
    SortItem,
    WithClause,
)
from .config import CompilerConfig
from .environment import Environment
from .errors import (
    AmbiguousParameterBindingError,
    CypherBuilderError,
    IncompletePatternError,
    InvalidQuantifierError,
    NameCollisionError,
    PatternUsageError,
    UnboundParameterError,
)
from .expressions import (
    BooleanOp,
    ComparisonOp,
    FunctionCall,
    IdentityAccessor,
    LabelsAccessor,
    ListExpression,
    MapExpression,
    UnaryOp,
    and_,
    coalesce,
    collect,
    contains,
    count,
    ends_with,
    eq,
    gt,
    gte,
    id_of,
    in_,
    is_not_null,
    is_null,
    labels_of,
    lt,
    lte,
    matches,
    neq,
    node_summary,
    not_,
    or_,
    starts_with,
    xor,
)
from .pattern import PartialPattern, PathAssign, PathLength, Pattern
from .projection import AliasedColumn, PlainColumn, Projection
from .references import (
    Literal,
    NamedNode,
    NamedParam,
    NamedRelationship,
    NamedVariable,
    NodeRef,
    Param,
    PathVariable,
    PropertyRef,
    RelationshipRef,
    Variable,
)
from .type_predicates import CypherTypes, IsType, ListType, is_not_type, is_type, list_of

__version__ = "0.1.0"

__all__ = [
    "AliasedColumn", "AmbiguousParameterBindingError", "BooleanOp", "BuildResult",
    "Clause", "ComparisonOp", "CompilerConfig", "Concat", "CreateClause",
    "CypherASTNode", "CypherBuilderError", "CypherTypes", "Direction", "Environment",
    "Expression", "FunctionCall", "IdentityAccessor", "IncompletePatternError",
    "InvalidQuantifierError", "IsType", "LabelsAccessor", "ListExpression", "ListType",
    "Literal", "MapExpression", "MatchClause", "MergeClause", "NameCollisionError",
    "NamedNode", "NamedParam", "NamedRelationship", "NamedVariable", "NodeRef",
    "OptionalMatchClause", "Param", "PartialPattern", "PathAssign", "PathLength",
    "PathVariable", "Pattern", "PatternUsageError", "PlainColumn", "Projection",
    "PropertyRef", "RelationshipRef", "ReturnClause", "SetClause", "SetItem",
    "SortItem", "SortOrder", "UnaryOp", "UnboundParameterError", "Variable", "WithClause",
    "and_", "build", "coalesce", "collect", "contains", "count", "ends_with", "eq",
    "gt", "gte", "id_of", "in_", "is_not_null", "is_not_type", "is_null", "is_type",
    "labels_of", "list_of", "lt", "lte", "matches", "neq", "node_summary", "not_",
    "or_", "starts_with", "xor",
]
