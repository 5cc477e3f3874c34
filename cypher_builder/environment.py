"""
Compilation environment threaded through every render call
Memoizes the names given to variables and parameters and collects parameter values
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional, Set, Tuple, Union

from .config import CompilerConfig, DEFAULT_CONFIG
from .errors import AmbiguousParameterBindingError, NameCollisionError, UnboundParameterError
from .naming import NamingAllocator


ExtraParams = Union[Mapping, Iterable[Tuple[str, Any]]]


class Environment:
    """Per-build naming and parameter context"""

    def __init__(self, prefix: str = '', config: Optional[CompilerConfig] = None):
        if not isinstance(prefix, str):
            raise TypeError(f"Prefix must be a string, got {type(prefix).__name__}")
        self.config = config or DEFAULT_CONFIG
        self._allocators = {
            'variable': NamingAllocator(prefix, 'variable'),
            'parameter': NamingAllocator(prefix, 'parameter'),
        }
        self._names: Dict[Any, str] = {}
        self._bindings: Dict[Any, Any] = {}
        self._params: Dict[str, Any] = {}
        # Parameter placeholders rendered without a value of their own
        self._unbound: Set[str] = set()

    def name_of(self, identity: Any) -> str:
        """Return the name of a variable or parameter, allocating it on first use"""
        name = self._names.get(identity)
        if name is not None:
            return name

        kind = getattr(identity, 'kind', 'variable')
        if kind == 'parameter':
            tag = self.config.parameter_tag
        else:
            tag = identity.tag
        name = self._allocators[kind].allocate(identity, tag)
        self._names[identity] = name
        if kind == 'parameter' and not getattr(identity, 'has_value', True):
            self._unbound.add(name)
        return name

    def record_parameter(self, identity: Any, value: Any) -> str:
        """
        Bind a value to a parameter and return its name

        Raises:
            AmbiguousParameterBindingError: if the parameter is already bound
                to a different value in this environment
        """
        name = self.name_of(identity)
        if identity in self._bindings:
            previous = self._bindings[identity]
            if previous is value:
                return name
            # 1, 1.0 and True compare equal but are different parameter values
            if type(previous) is not type(value) or previous != value:
                raise AmbiguousParameterBindingError(name, previous, value)
            return name

        self._bindings[identity] = value
        self._params[name] = value
        return name

    def finalize(self, extra_params: Optional[ExtraParams] = None) -> Dict[str, Any]:
        """
        Return the collected parameters merged with caller-supplied extras

        Args:
            extra_params: Mapping or iterable of (name, value) pairs added even
                when the tree never references them

        Raises:
            NameCollisionError: if an extra name is already a parameter name
            UnboundParameterError: if a rendered placeholder has no value in
                the collected parameters or the extras
        """
        params = dict(self._params)
        if extra_params is not None:
            items = extra_params.items() if isinstance(extra_params, Mapping) else extra_params
            for name, value in items:
                if name in params:
                    raise NameCollisionError(name, 'parameter')
                params[name] = value

        missing = self._unbound - params.keys()
        if missing:
            raise UnboundParameterError(missing)
        return params
