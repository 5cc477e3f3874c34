"""
Graph pattern construction and compilation

Patterns are built with a persistent builder: every step returns a new handle.
Only a Pattern (ending on a node) renders; a PartialPattern, which ends on a
relationship still waiting for its ``to(...)`` call, refuses to.

    person = NodeRef(labels=["Person"])
    movie = NodeRef(labels=["Movie"])
    pattern = Pattern(person).related(RelationshipRef(type="ACTED_IN")).with_direction("left").to(movie)
    # (this0:Person)<-[this1:ACTED_IN]-(this2:Movie)
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple, Union

from .ast_nodes import CypherASTNode, Direction, to_expression
from .errors import IncompletePatternError, InvalidQuantifierError, PatternUsageError
from .escape import escape_label, escape_property, escape_type
from .references import NodeRef, RelationshipRef, Variable


@dataclass(frozen=True)
class PathLength:
    """
    Variable-length quantifier of a relationship

    ``exact`` renders ``*N``; ``min``/``max`` render ``*min..max`` with either
    bound optional; no bounds at all renders ``*``.
    """
    exact: Optional[int] = None
    min: Optional[int] = None
    max: Optional[int] = None

    def __post_init__(self):
        for bound in (self.exact, self.min, self.max):
            if bound is None:
                continue
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise InvalidQuantifierError(f"Length bounds must be integers, got {bound!r}")
            if bound < 0:
                raise InvalidQuantifierError(f"Length bounds must not be negative, got {bound}")
        if self.exact is not None and (self.min is not None or self.max is not None):
            raise InvalidQuantifierError("An exact length cannot be combined with min/max bounds")
        if self.min is not None and self.max is not None and self.min > self.max:
            raise InvalidQuantifierError(
                f"Minimum length {self.min} is greater than maximum length {self.max}"
            )

    @classmethod
    def parse(cls, value: Any) -> 'PathLength':
        """Build a PathLength from an int, a {min, max} mapping, "*"/"any" or a PathLength"""
        if isinstance(value, PathLength):
            return value
        if isinstance(value, str):
            if value in ("*", "any"):
                return cls()
            raise InvalidQuantifierError(f"Unknown length quantifier: {value!r}")
        if isinstance(value, Mapping):
            unknown = set(value) - {"min", "max"}
            if unknown:
                raise InvalidQuantifierError(f"Unknown length keys: {sorted(unknown)}")
            return cls(min=value.get("min"), max=value.get("max"))
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(exact=value)
        raise InvalidQuantifierError(f"Unsupported length quantifier: {value!r}")

    def render(self) -> str:
        if self.exact is not None:
            return f"*{self.exact}"
        if self.min is None and self.max is None:
            return "*"
        low = "" if self.min is None else str(self.min)
        high = "" if self.max is None else str(self.max)
        return f"*{low}..{high}"


def _to_properties(properties: Optional[Mapping]) -> Optional[Dict[str, CypherASTNode]]:
    if properties is None:
        return None
    result = {}
    for key, value in properties.items():
        if not isinstance(key, str):
            raise TypeError(f"Property keys must be strings, got {key!r}")
        result[key] = to_expression(value)
    return result


def _render_properties(properties: Optional[Dict[str, CypherASTNode]], env) -> str:
    if not properties:
        return ""
    entries = [f"{escape_property(key)}: {value.render(env)}" for key, value in properties.items()]
    return "{" + ", ".join(entries) + "}"


def _join_annotation(body: str, properties: str) -> str:
    if not properties:
        return body
    return f"{body} {properties}" if body else properties


def _to_direction(direction: Union[str, Direction]) -> Direction:
    if isinstance(direction, Direction):
        return direction
    try:
        return Direction(direction)
    except ValueError:
        raise ValueError(
            f"Invalid direction {direction!r}, expected one of: left, right, undirected"
        ) from None


@dataclass(frozen=True)
class NodeElement:
    """Node position in a pattern"""
    variable: Variable
    labels: Optional[Tuple[str, ...]] = None
    properties: Optional[Dict[str, CypherASTNode]] = None
    with_variable: bool = True
    with_labels: bool = True

    @classmethod
    def create(cls, node: Optional[Variable] = None, labels=None,
               properties: Optional[Mapping] = None) -> 'NodeElement':
        if node is None:
            node = NodeRef()
        if not isinstance(node, Variable):
            raise TypeError(f"Pattern nodes must be variables, got {type(node).__name__}")
        if isinstance(labels, str):
            labels = (labels,)
        elif labels is not None:
            labels = tuple(labels)
        return cls(variable=node, labels=labels, properties=_to_properties(properties))

    def effective_labels(self) -> Tuple[str, ...]:
        if self.labels is not None:
            return self.labels
        return getattr(self.variable, 'labels', ())

    def render(self, env, annotate: bool) -> str:
        body = env.name_of(self.variable) if self.with_variable else ""
        properties = ""
        if annotate:
            if self.with_labels:
                body += "".join(f":{escape_label(label)}" for label in self.effective_labels())
            properties = _render_properties(self.properties, env)
        return f"({_join_annotation(body, properties)})"


@dataclass(frozen=True)
class RelationshipElement:
    """Relationship position in a pattern"""
    variable: Variable
    type: Optional[str] = None
    direction: Direction = Direction.OUTGOING
    length: Optional[PathLength] = None
    properties: Optional[Dict[str, CypherASTNode]] = None
    with_variable: bool = True
    with_type: bool = True

    @classmethod
    def create(cls, relationship: Optional[Variable] = None,
               rel_type: Optional[str] = None) -> 'RelationshipElement':
        if relationship is None:
            relationship = RelationshipRef()
        if not isinstance(relationship, Variable):
            raise TypeError(
                f"Pattern relationships must be variables, got {type(relationship).__name__}"
            )
        return cls(variable=relationship, type=rel_type)

    def effective_type(self) -> Optional[str]:
        if self.type is not None:
            return self.type
        return getattr(self.variable, 'type', None)

    def render(self, env, annotate: bool) -> str:
        body = env.name_of(self.variable) if self.with_variable else ""
        properties = ""
        rel_type = self.effective_type()
        if annotate and self.with_type and rel_type:
            body += f":{escape_type(rel_type)}"
        if self.length is not None:
            body += self.length.render()
        if annotate:
            properties = _render_properties(self.properties, env)
        inner = f"[{_join_annotation(body, properties)}]"

        if self.direction == Direction.INCOMING:
            return f"<-{inner}-"
        if self.direction == Direction.OUTGOING:
            return f"-{inner}->"
        return f"-{inner}-"


class _PatternChain(CypherASTNode):
    """Shared storage for Pattern and PartialPattern"""

    def __init__(self, elements: Tuple[Union[NodeElement, RelationshipElement], ...]):
        self._elements = tuple(elements)

    @property
    def elements(self) -> Tuple[Union[NodeElement, RelationshipElement], ...]:
        return self._elements

    @classmethod
    def _from_elements(cls, elements):
        return cls(elements)

    def _with_last(self, **changes):
        last = replace(self._elements[-1], **changes)
        return self._from_elements(self._elements[:-1] + (last,))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._elements)!r})"


class Pattern(_PatternChain):
    """
    Complete pattern: alternating nodes and relationships, starting and ending
    on a node. Modifiers apply to the last node.
    """

    def __init__(self, node: Optional[Variable] = None, labels=None,
                 properties: Optional[Mapping] = None, *, _elements=None):
        if _elements is None:
            _elements = (NodeElement.create(node, labels, properties),)
        super().__init__(_elements)

    @classmethod
    def _from_elements(cls, elements) -> 'Pattern':
        return cls(_elements=tuple(elements))

    def related(self, relationship: Optional[Variable] = None,
                type: Optional[str] = None) -> 'PartialPattern':
        """Start a relationship from the last node"""
        element = RelationshipElement.create(relationship, type)
        return PartialPattern(self._elements + (element,))

    def to(self, *args, **kwargs):
        raise PatternUsageError("to() requires a pending relationship, call related() first")

    def without_variable(self) -> 'Pattern':
        return self._with_last(with_variable=False)

    def without_labels(self) -> 'Pattern':
        return self._with_last(with_labels=False)

    def with_properties(self, properties: Mapping) -> 'Pattern':
        return self._with_last(properties=_to_properties(properties))

    def render(self, env) -> str:
        seen = set()
        parts = []
        for element in self._elements:
            # Only the first named occurrence of a variable carries labels/type/properties
            annotate = element.variable not in seen
            if element.with_variable:
                seen.add(element.variable)
            parts.append(element.render(env, annotate))
        return "".join(parts)


class PartialPattern(_PatternChain):
    """Pattern ending on a relationship; completed with to()"""

    def with_direction(self, direction: Union[str, Direction]) -> 'PartialPattern':
        return self._with_last(direction=_to_direction(direction))

    def with_length(self, length: Any) -> 'PartialPattern':
        """Set the length quantifier: 3, {"min": 2, "max": 10}, {"min": 2} or "*" """
        return self._with_last(length=PathLength.parse(length))

    def without_variable(self) -> 'PartialPattern':
        return self._with_last(with_variable=False)

    def without_type(self) -> 'PartialPattern':
        return self._with_last(with_type=False)

    def with_properties(self, properties: Mapping) -> 'PartialPattern':
        return self._with_last(properties=_to_properties(properties))

    def to(self, node: Optional[Variable] = None, labels=None,
           properties: Optional[Mapping] = None) -> Pattern:
        """Close the pending relationship on a node"""
        element = NodeElement.create(node, labels, properties)
        return Pattern._from_elements(self._elements + (element,))

    def render(self, env) -> str:
        raise IncompletePatternError(
            "Pattern ends on a relationship, call to() before rendering"
        )


@dataclass(eq=False)
class PathAssign(CypherASTNode):
    """Named path: p = (a)-[r]->(b)"""
    path: Variable
    pattern: Pattern

    def render(self, env) -> str:
        return f"{self.path.render(env)} = {self.pattern.render(env)}"
