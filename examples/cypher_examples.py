"""
Examples demonstrating the query builder
Run these to see the Cypher text and parameters each tree compiles to
"""

from cypher_builder import (
    AliasedColumn,
    CreateClause,
    MatchClause,
    NamedParam,
    NodeRef,
    Pattern,
    RelationshipRef,
    ReturnClause,
    Projection,
    eq,
    gt,
    id_of,
    labels_of,
)


def print_build(title: str, query, **kwargs):
    """Helper to show a compiled query"""
    print(f"\n{'='*80}")
    print(f"Example: {title}")
    print(f"{'='*80}")

    try:
        text, params = query.build(**kwargs)
        print(f"\nCypher:")
        print(text)
        print(f"\nParameters: {params}")
    except Exception as e:
        print(f"\nError: {e}")


def main():
    """Run all examples"""
    person = NodeRef(labels=["Person"])
    friend = NodeRef(labels=["Person"])
    movie = NodeRef(labels=["Movie"])

    # Example 1: Simple MATCH
    print_build(
        "Simple Node Match",
        MatchClause(Pattern(person)).return_(person.property("name"), person.property("age"))
    )

    # Example 2: Relationship traversal
    knows = RelationshipRef(type="KNOWS")
    print_build(
        "Relationship Traversal",
        MatchClause(Pattern(person).related(knows).to(friend))
        .where(gt(person.property("age"), 25))
        .return_(
            AliasedColumn(person.property("name"), "person"),
            AliasedColumn(friend.property("name"), "friend"),
        )
    )

    # Example 3: Variable-length path
    print_build(
        "Variable-Length Path (Friends of Friends)",
        MatchClause(
            Pattern(person, properties={"name": "Alice"})
            .related(RelationshipRef(type="KNOWS")).with_length({"min": 1, "max": 2})
            .to(friend)
        ).return_(friend)
    )

    # Example 4: Incoming relationship with identity and labels
    print_build(
        "Incoming Relationship",
        MatchClause(
            Pattern(person).related(RelationshipRef(type="ACTED_IN")).with_direction("left").to(movie)
        ).return_(AliasedColumn(id_of(person), "id"), AliasedColumn(labels_of(person), "labels"))
    )

    # Example 5: Externally supplied parameter
    print_build(
        "External Parameter",
        MatchClause(Pattern(movie))
        .where(eq(movie.property("title"), NamedParam("title")))
        .concat(ReturnClause(Projection([movie])).limit(10)),
        extra_params={"title": "The Matrix"},
    )

    # Example 6: Two fragments glued together with prefixes
    fragment = CreateClause(Pattern(movie, properties={"title": "Up"}))
    for prefix in ("q1_", "q2_"):
        print_build(f"Prefixed fragment {prefix}", fragment, prefix=prefix)

    # Example 7: Dangling relationship
    print_build("Incomplete Pattern", Pattern(person).related(knows))


if __name__ == "__main__":
    main()
