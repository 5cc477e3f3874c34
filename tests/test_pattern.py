"""
Comprehensive test suite for pattern compilation
"""

import unittest

import pytest

from cypher_builder import (
    Direction,
    IncompletePatternError,
    InvalidQuantifierError,
    Literal,
    NamedNode,
    NodeRef,
    Param,
    PartialPattern,
    PathAssign,
    PathLength,
    PathVariable,
    Pattern,
    PatternUsageError,
    RelationshipRef,
)


def render(node, prefix=None):
    return node.build(prefix=prefix).text


class TestPatternRendering(unittest.TestCase):
    """Test node and relationship rendering"""

    def setUp(self):
        self.person = NodeRef(labels=['Person'])
        self.movie = NodeRef(labels=['Movie'])
        self.acted_in = RelationshipRef(type='ACTED_IN')

    def test_single_node(self):
        """Single node with label"""
        self.assertEqual(render(Pattern(self.person)), '(this0:Person)')

    def test_anonymous_node_without_labels(self):
        """Node without labels renders only its name"""
        self.assertEqual(render(Pattern()), '(this0)')

    def test_multiple_labels(self):
        """Labels are chained"""
        node = NodeRef(labels=['Person', 'Actor'])
        self.assertEqual(render(Pattern(node)), '(this0:Person:Actor)')

    def test_label_escaping(self):
        """Labels with spaces are backtick-quoted"""
        node = NodeRef(labels=['Movie Star'])
        self.assertEqual(render(Pattern(node)), '(this0:`Movie Star`)')

    def test_outgoing_relationship(self):
        """Default direction is right"""
        pattern = Pattern(self.person).related(self.acted_in).to(self.movie)
        self.assertEqual(render(pattern), '(this0:Person)-[this1:ACTED_IN]->(this2:Movie)')

    def test_incoming_relationship(self):
        """Left direction"""
        pattern = Pattern(self.person).related(self.acted_in).with_direction('left').to(self.movie)
        self.assertEqual(render(pattern), '(this0:Person)<-[this1:ACTED_IN]-(this2:Movie)')

    def test_undirected_relationship(self):
        """Undirected relationship has no arrowheads"""
        pattern = Pattern(self.person).related(self.acted_in).with_direction('undirected').to(self.movie)
        self.assertEqual(render(pattern), '(this0:Person)-[this1:ACTED_IN]-(this2:Movie)')

    def test_direction_enum(self):
        """Direction enum is accepted"""
        pattern = Pattern(self.person).related(self.acted_in).with_direction(Direction.INCOMING).to(self.movie)
        self.assertIn('<-[this1:ACTED_IN]-', render(pattern))

    def test_invalid_direction(self):
        """Unknown direction strings fail"""
        with self.assertRaises(ValueError):
            Pattern(self.person).related(self.acted_in).with_direction('sideways')

    def test_long_chain(self):
        """Names follow left-to-right render order"""
        pattern = (
            Pattern(NodeRef()).related(RelationshipRef()).to(NodeRef())
            .related(RelationshipRef()).to(NodeRef())
        )
        self.assertEqual(render(pattern), '(this0)-[this1]->(this2)-[this3]->(this4)')

    def test_anonymous_steps(self):
        """related() and to() create references when none are given"""
        pattern = Pattern(self.person).related(type='KNOWS').to(labels=['Person'])
        self.assertEqual(render(pattern), '(this0:Person)-[this1:KNOWS]->(this2:Person)')

    def test_label_override(self):
        """Labels given to the pattern replace the node's labels"""
        pattern = Pattern(self.person, labels=['Director'])
        self.assertEqual(render(pattern), '(this0:Director)')

    def test_named_node(self):
        """Explicit names are kept and not prefixed"""
        pattern = Pattern(NamedNode('m', labels='Movie'))
        self.assertEqual(render(pattern, prefix='q_'), '(m:Movie)')


class TestPatternModifiers(unittest.TestCase):
    """Test suppression flags and property blocks"""

    def setUp(self):
        self.a = NodeRef(labels=['Person'])
        self.b = NodeRef(labels=['Movie'])
        self.rel = RelationshipRef(type='ACTED_IN')

    def test_node_without_variable(self):
        """Variable suppressed on a node"""
        self.assertEqual(render(Pattern(self.a).without_variable()), '(:Person)')

    def test_node_without_labels(self):
        """Labels suppressed on a node"""
        self.assertEqual(render(Pattern(self.a).without_labels()), '(this0)')

    def test_node_without_variable_and_labels(self):
        """Fully suppressed node renders empty parentheses"""
        self.assertEqual(render(Pattern(self.a).without_variable().without_labels()), '()')

    def test_relationship_without_variable(self):
        """Relationship variable suppressed; numbering skips nothing"""
        pattern = Pattern(self.a).related(self.rel).without_variable().to(self.b)
        self.assertEqual(render(pattern), '(this0:Person)-[:ACTED_IN]->(this1:Movie)')

    def test_relationship_without_type(self):
        """Relationship type suppressed"""
        pattern = Pattern(self.a).related(self.rel).without_type().to(self.b)
        self.assertEqual(render(pattern), '(this0:Person)-[this1]->(this2:Movie)')

    def test_empty_relationship(self):
        """Relationship without variable or type"""
        pattern = Pattern(self.a).related(self.rel).without_variable().without_type().to(self.b)
        self.assertEqual(render(pattern), '(this0:Person)-[]->(this1:Movie)')

    def test_modifier_applies_to_last_node(self):
        """Pattern-level modifiers change only the last node"""
        pattern = Pattern(self.a).related(self.rel).to(self.b).without_labels()
        self.assertEqual(render(pattern), '(this0:Person)-[this1:ACTED_IN]->(this2)')

    def test_node_properties(self):
        """Plain property values become parameters"""
        result = Pattern(self.a).with_properties({'name': 'Keanu', 'born': 1964}).build()
        self.assertEqual(result.text, '(this0:Person {name: $param0, born: $param1})')
        self.assertEqual(result.params, {'param0': 'Keanu', 'param1': 1964})

    def test_node_properties_without_variable(self):
        """Property block without a name or labels"""
        pattern = Pattern(self.a).without_variable().without_labels().with_properties({'name': Param('x')})
        self.assertEqual(render(pattern), '({name: $param0})')

    def test_literal_property(self):
        """Literal values render inline"""
        pattern = Pattern(self.a).with_properties({'active': Literal(True)})
        self.assertEqual(render(pattern), '(this0:Person {active: true})')

    def test_relationship_properties(self):
        """Relationship property block follows type and length"""
        pattern = (
            Pattern(self.a).related(self.rel).with_length(2)
            .with_properties({'role': Param('Neo')}).to(self.b)
        )
        result = pattern.build()
        self.assertEqual(result.text, '(this0:Person)-[this1:ACTED_IN*2 {role: $param0}]->(this2:Movie)')
        self.assertEqual(result.params, {'param0': 'Neo'})

    def test_property_key_escaping(self):
        """Property keys that are not identifiers are escaped"""
        pattern = Pattern(self.a).with_properties({'first name': Literal('Tom')})
        self.assertEqual(render(pattern), "(this0:Person {`first name`: 'Tom'})")

    def test_builder_steps_do_not_mutate(self):
        """Every builder step returns a new pattern"""
        base = Pattern(self.a)
        base.without_labels()
        partial = base.related(self.rel)
        partial.with_direction('left')
        self.assertEqual(render(base), '(this0:Person)')
        self.assertEqual(render(partial.to(self.b)), '(this0:Person)-[this1:ACTED_IN]->(this2:Movie)')


class TestPathLength(unittest.TestCase):
    """Test variable-length quantifiers"""

    def _render_length(self, length):
        pattern = Pattern(NodeRef()).related(RelationshipRef()).without_variable().with_length(length).to(NodeRef())
        return render(pattern)

    def test_exact(self):
        self.assertEqual(self._render_length(3), '(this0)-[*3]->(this1)')

    def test_min_max(self):
        self.assertEqual(self._render_length({'min': 2, 'max': 10}), '(this0)-[*2..10]->(this1)')

    def test_min_only(self):
        self.assertEqual(self._render_length({'min': 2}), '(this0)-[*2..]->(this1)')

    def test_max_only(self):
        self.assertEqual(self._render_length({'max': 4}), '(this0)-[*..4]->(this1)')

    def test_any(self):
        self.assertEqual(self._render_length('*'), '(this0)-[*]->(this1)')
        self.assertEqual(self._render_length('any'), '(this0)-[*]->(this1)')

    def test_length_after_type(self):
        """Quantifier follows the relationship type"""
        pattern = Pattern().related(RelationshipRef(type='KNOWS')).with_length({'min': 1, 'max': 3}).to()
        self.assertEqual(render(pattern), '(this0)-[this1:KNOWS*1..3]->(this2)')

    def test_min_greater_than_max(self):
        """Invalid bounds fail when configured, not when rendered"""
        partial = Pattern(NodeRef()).related(RelationshipRef())
        with self.assertRaises(InvalidQuantifierError):
            partial.with_length({'min': 5, 'max': 2})

    def test_negative_length(self):
        with self.assertRaises(InvalidQuantifierError):
            PathLength.parse(-1)

    def test_unknown_quantifier(self):
        with self.assertRaises(InvalidQuantifierError):
            PathLength.parse('some')
        with self.assertRaises(InvalidQuantifierError):
            PathLength.parse({'minimum': 1})
        with self.assertRaises(InvalidQuantifierError):
            PathLength.parse(True)

    def test_exact_with_bounds(self):
        with self.assertRaises(InvalidQuantifierError):
            PathLength(exact=2, min=1)


class TestCycles(unittest.TestCase):
    """Test variables reused inside one pattern"""

    def test_cycle_annotates_first_occurrence_only(self):
        """The closing node renders bare"""
        n = NodeRef(labels=['Person'])
        pattern = (
            Pattern(n, properties={'name': 'Tom'})
            .related(RelationshipRef(type='KNOWS')).to(NodeRef(labels=['Person']))
            .related(RelationshipRef(type='KNOWS')).to(n, properties={'name': 'Tom'})
        )
        result = pattern.build()
        self.assertEqual(
            result.text,
            '(this0:Person {name: $param0})-[this1:KNOWS]->(this2:Person)-[this3:KNOWS]->(this0)'
        )
        self.assertEqual(result.params, {'param0': 'Tom'})

    def test_same_name_at_every_position(self):
        """Reused variables render the same identifier"""
        n = NodeRef()
        pattern = Pattern(n).related().to(n)
        self.assertEqual(render(pattern, prefix='x_'), '(x_this0)-[x_this1]->(x_this0)')

    def test_first_named_occurrence_carries_labels(self):
        """An unnamed occurrence does not take the labels away from the named one"""
        n = NodeRef(labels=['Person'])
        pattern = Pattern(n).without_variable().related().to(n)
        self.assertEqual(render(pattern), '(:Person)-[this0]->(this1:Person)')


class TestPatternErrors(unittest.TestCase):
    """Test builder misuse"""

    def test_dangling_relationship_refuses_to_render(self):
        """A partial pattern cannot be built"""
        partial = Pattern(NodeRef()).related(RelationshipRef())
        self.assertIsInstance(partial, PartialPattern)
        with self.assertRaises(IncompletePatternError):
            partial.build()

    def test_to_without_related(self):
        """to() on a complete pattern fails"""
        with self.assertRaises(PatternUsageError):
            Pattern(NodeRef()).to(NodeRef())

    def test_non_variable_node(self):
        with self.assertRaises(TypeError):
            Pattern('n')


def test_path_assign():
    path = PathVariable()
    pattern = Pattern(NodeRef()).related().to()
    assert render(PathAssign(path, pattern)) == 'p0 = (this1)-[this2]->(this3)'


def test_nested_partial_in_path_assign_fails():
    with pytest.raises(IncompletePatternError):
        PathAssign(PathVariable(), Pattern().related()).build()
