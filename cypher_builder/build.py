"""
Build entry point: compile an AST into query text and parameters
"""

import logging
from typing import Any, Dict, NamedTuple, Optional

from .ast_nodes import CypherASTNode
from .config import CompilerConfig
from .environment import Environment, ExtraParams

logger = logging.getLogger(__name__)


class BuildResult(NamedTuple):
    """Compiled query text and its parameters"""
    text: str
    params: Dict[str, Any]


def build(root: CypherASTNode, prefix: Optional[str] = None,
          extra_params: Optional[ExtraParams] = None,
          config: Optional[CompilerConfig] = None) -> BuildResult:
    """
    Compile an AST into Cypher

    Args:
        root: Root node of the tree, usually a clause
        prefix: Prepended to every generated (not explicitly named) identifier
        extra_params: Parameters to include even if the tree never references them
        config: Rendering options

    Returns:
        BuildResult(text, params)
    """
    if not isinstance(root, CypherASTNode):
        raise TypeError(f"Cannot build {type(root).__name__}, expected a CypherASTNode")

    env = Environment(prefix=prefix or '', config=config)
    text = root.render(env)
    params = env.finalize(extra_params)

    logger.debug(f"Compiled Cypher ({len(params)} parameters):\n{text}")
    return BuildResult(text=text, params=params)
