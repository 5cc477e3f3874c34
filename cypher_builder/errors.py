"""
Exception hierarchy for query compilation
All errors are raised synchronously at the point of detection
"""


class CypherBuilderError(Exception):
    """Base class for all cypher_builder errors"""
    pass


class NameCollisionError(CypherBuilderError, ValueError):
    """An explicit name is already bound to a different identity"""

    def __init__(self, name: str, kind: str = 'variable'):
        self.name = name
        self.kind = kind
        super().__init__(f"{kind.capitalize()} name '{name}' is already bound to a different {kind}")


class AmbiguousParameterBindingError(CypherBuilderError, ValueError):
    """The same parameter was recorded twice with different values"""

    def __init__(self, name: str, previous, value):
        self.name = name
        self.previous = previous
        self.value = value
        super().__init__(
            f"Parameter '${name}' already bound to {previous!r}, cannot rebind to {value!r}"
        )


class IncompletePatternError(CypherBuilderError):
    """A pattern ending on a dangling relationship was rendered"""
    pass


class InvalidQuantifierError(CypherBuilderError, ValueError):
    """A relationship length quantifier has invalid bounds"""
    pass


class PatternUsageError(CypherBuilderError):
    """A pattern builder step was called out of order"""
    pass


class UnboundParameterError(CypherBuilderError):
    """A parameter placeholder was rendered but no value was supplied for it"""

    def __init__(self, names):
        self.names = sorted(names)
        listed = ", ".join(f"${name}" for name in self.names)
        super().__init__(f"No value supplied for parameter(s) {listed}; pass them in extra_params")
