"""
Escaping of identifiers and formatting of inline literals
"""

import math
import re
from typing import Any

_PLAIN_IDENTIFIER = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')


def escape_identifier(name: str) -> str:
    """Backtick-quote a label, type or property key unless it is a plain identifier"""
    if _PLAIN_IDENTIFIER.fullmatch(name):
        return name
    escaped = name.replace('`', '``')
    return f"`{escaped}`"


escape_label = escape_identifier
escape_type = escape_identifier
escape_property = escape_identifier


def format_literal(value: Any) -> str:
    """Render a Python value as an inline Cypher literal"""
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"{value!r} has no Cypher literal form, pass it as a parameter")
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        escaped = value.replace('\\', '\\\\').replace("'", "\\'")
        return f"'{escaped}'"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_literal(v) for v in value) + "]"
    if isinstance(value, dict):
        entries = ", ".join(f"{escape_property(str(k))}: {format_literal(v)}" for k, v in value.items())
        return "{" + entries + "}"
    raise TypeError(f"Cannot render {type(value).__name__} as a Cypher literal")
