"""
Identifier allocation for variables and parameters
One allocator exists per identifier class (variables or parameters) per build
"""

from typing import Any, Dict

from .errors import NameCollisionError


class NamingAllocator:
    """Hands out collision-free identifiers for a single identifier class"""

    def __init__(self, prefix: str = '', kind: str = 'variable'):
        self.prefix = prefix
        self.kind = kind
        self.counter = 0
        self._owners: Dict[str, Any] = {}

    def allocate(self, identity: Any, tag: str) -> str:
        """
        Allocate a name for an identity

        Args:
            identity: Variable or parameter object; its ``name`` attribute is
                used verbatim when set
            tag: Class tag used for generated names (``this``, ``var``, ``param``)

        Returns:
            The allocated name
        """
        explicit = getattr(identity, 'name', None)
        if explicit is not None:
            return self._claim(explicit, identity)

        name = self._next_generated(tag)
        self._owners[name] = identity
        return name

    def _claim(self, name: str, identity: Any) -> str:
        # Explicit names never get the prefix
        owner = self._owners.get(name)
        if owner is not None and owner is not identity:
            raise NameCollisionError(name, self.kind)
        self._owners[name] = identity
        return name

    def _next_generated(self, tag: str) -> str:
        while True:
            name = f"{self.prefix}{tag}{self.counter}"
            self.counter += 1
            if name not in self._owners:
                return name
