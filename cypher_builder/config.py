"""
Compilation settings shared by every render call of a build
"""

from dataclasses import dataclass


# Generated-name tags per reference class
VARIABLE_TAG = "var"
NODE_TAG = "this"
RELATIONSHIP_TAG = "this"
PATH_TAG = "p"
PARAMETER_TAG = "param"


@dataclass(frozen=True)
class CompilerConfig:
    """Rendering options for a single build"""
    clause_separator: str = "\n"
    parameter_tag: str = PARAMETER_TAG

    def __post_init__(self):
        if not self.parameter_tag.isidentifier():
            raise ValueError(f"Invalid parameter tag: {self.parameter_tag!r}")


DEFAULT_CONFIG = CompilerConfig()
