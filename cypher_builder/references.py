"""
Variable and parameter references
References are identity objects: two references render the same name in a
build only when they are the same object.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Union

from . import config
from .ast_nodes import Expression
from .escape import escape_property, format_literal


def _normalize_labels(labels: Union[str, List[str], Tuple[str, ...], None]) -> Tuple[str, ...]:
    if labels is None:
        return ()
    if isinstance(labels, str):
        return (labels,)
    return tuple(labels)


def _check_name(name: Any) -> None:
    if not isinstance(name, str) or not name:
        raise ValueError(f"Explicit names must be non-empty strings, got {name!r}")


@dataclass(eq=False)
class Variable(Expression):
    """Generic variable reference (var0, var1, ...)"""
    kind = 'variable'
    tag = config.VARIABLE_TAG

    name: Optional[str] = None

    def __post_init__(self):
        if self.name is not None:
            _check_name(self.name)

    def render(self, env) -> str:
        return env.name_of(self)

    def property(self, *keys: str) -> 'PropertyRef':
        """Access a (possibly nested) property: ``var.property("a", "b")`` -> ``var0.a.b``"""
        return PropertyRef(self, keys)


@dataclass(eq=False)
class NodeRef(Variable):
    """Reference to a node"""
    tag = config.NODE_TAG

    labels: Tuple[str, ...] = ()

    def __post_init__(self):
        super().__post_init__()
        self.labels = _normalize_labels(self.labels)


@dataclass(eq=False)
class RelationshipRef(Variable):
    """Reference to a relationship"""
    tag = config.RELATIONSHIP_TAG

    type: Optional[str] = None


@dataclass(eq=False)
class PathVariable(Variable):
    """Variable bound to a whole path"""
    tag = config.PATH_TAG


@dataclass(eq=False)
class NamedVariable(Variable):
    """Variable with an explicit name"""
    name: str = None

    def __post_init__(self):
        _check_name(self.name)


@dataclass(eq=False)
class NamedNode(NodeRef):
    """Node reference with an explicit name"""
    name: str = None

    def __post_init__(self):
        _check_name(self.name)
        self.labels = _normalize_labels(self.labels)


@dataclass(eq=False)
class NamedRelationship(RelationshipRef):
    """Relationship reference with an explicit name"""
    name: str = None

    def __post_init__(self):
        _check_name(self.name)


@dataclass(eq=False)
class PropertyRef(Expression):
    """Property access (n.name)"""
    variable: Expression
    keys: Tuple[str, ...]

    def __post_init__(self):
        self.keys = tuple(self.keys)
        if not self.keys:
            raise ValueError("PropertyRef requires at least one key")

    def render(self, env) -> str:
        path = ".".join(escape_property(k) for k in self.keys)
        return f"{self.variable.render(env)}.{path}"

    def property(self, *keys: str) -> 'PropertyRef':
        return PropertyRef(self.variable, self.keys + tuple(keys))


# Marker for a named parameter whose value is supplied outside the tree
_UNSET = object()


@dataclass(eq=False)
class Param(Expression):
    """Query parameter ($param0) carrying its value"""
    kind = 'parameter'

    value: Any = None
    name: Optional[str] = None

    def __post_init__(self):
        if self.name is not None:
            _check_name(self.name)

    @property
    def has_value(self) -> bool:
        return self.value is not _UNSET

    def render(self, env) -> str:
        if not self.has_value:
            return f"${env.name_of(self)}"
        return f"${env.record_parameter(self, self.value)}"


class NamedParam(Param):
    """
    Parameter with an explicit name

    A NamedParam built without a value only renders its placeholder; the value
    is expected to come from the extra parameters passed to build().
    """

    def __init__(self, name: str, value: Any = _UNSET):
        _check_name(name)
        super().__init__(value=value, name=name)


@dataclass(eq=False)
class Literal(Expression):
    """Inline literal value"""
    value: Any

    def render(self, env) -> str:
        return format_literal(self.value)
