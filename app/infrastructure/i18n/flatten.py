"""Flattening of nested dictionaries into dot-path resolver mappings."""

from collections.abc import Mapping
from functools import partial
from typing import Any, Dict, Iterator, Tuple

from infrastructure.i18n.models import Dictionary, Entry, ResolverDict, join_path
from infrastructure.i18n.resolution import resolved
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def is_container(value: Entry) -> bool:
    """Return True for entries whose children are walked (mappings and lists)."""
    return isinstance(value, (Mapping, list, tuple))


def iter_children(value: Entry) -> Iterator[Tuple[Any, Entry]]:
    """Yield ``(key, child)`` pairs of a container.

    Sequences yield their numeric positions as keys, so ``users[0]`` is
    addressed exactly like a mapping key ``0``.
    """
    if isinstance(value, Mapping):
        yield from value.items()
    else:
        yield from enumerate(value)


def _walk(
    node: Entry,
    prefix: str,
    depth: int,
    resolvers: ResolverDict,
    depths: Dict[str, int],
) -> None:
    for key, child in iter_children(node):
        path = join_path(prefix, key)
        if path in resolvers:
            # "a.b" as a literal key collides with a nested a -> b; the
            # entry reached through more nesting keeps the path
            logger.debug("duplicate_dictionary_path", path=path)
        if path not in resolvers or depth >= depths[path]:
            resolvers[path] = partial(resolved, child)
            depths[path] = depth
        if is_container(child):
            _walk(child, path, depth + 1, resolvers, depths)


def resolver_dict(dictionary: Dictionary) -> ResolverDict:
    """Build a flat mapping of dot-paths to resolver functions.

    Every reachable node gets a resolver, containers included: the resolver
    for ``"data.currency"`` returns the ``currency`` mapping itself. Paths
    past a leaf or beyond a sequence's length are simply absent, so callers
    check ``path in resolvers`` (or use ``.get``) before invoking.

    The input is never copied or mutated; container resolvers hand back the
    original objects.

    Args:
        dictionary: Nested dictionary to flatten.

    Returns:
        ResolverDict keyed by full dot-path.

    Example:
        >>> resolvers = resolver_dict({"a": {"b": [10, 20]}})
        >>> resolvers["a.b.1"]()
        20
        >>> "a.b.5" in resolvers
        False
    """
    resolvers: ResolverDict = {}
    _walk(dictionary, "", 0, resolvers, {})
    logger.debug("resolver_dict_built", path_count=len(resolvers))
    return resolvers
