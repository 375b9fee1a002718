"""Shared types for the dictionary resolution engine.

A *dictionary* is an arbitrarily nested structure of mappings and
sequences whose leaves are template strings, formatter callables or
opaque values. Every node is addressed by a dot-delimited *path*.
"""

from typing import Any, Callable, Dict, Mapping, Union

# Leaf or container; containers recurse, anything else is atomic.
Entry = Any

Dictionary = Mapping[Any, Entry]

Resolver = Callable[..., Any]

# Flat mapping from full dot-path to a resolver for that node.
ResolverDict = Dict[str, Resolver]

# lookup(path, *args) -> resolved value
Lookup = Callable[..., Any]

PathKey = Union[str, int]

PATH_SEPARATOR = "."


def join_path(prefix: str, key: PathKey) -> str:
    """Append a key to a dot-delimited path.

    Keys are not escaped: a literal key such as ``"to.usd"`` produces the
    same path as two nested keys ``to`` and ``usd``.

    Args:
        prefix: Path of the parent node ("" for the root).
        key: Mapping key or sequence index of the child.

    Returns:
        Full dot-delimited path of the child.
    """
    return f"{prefix}{PATH_SEPARATOR}{key}" if prefix else str(key)
