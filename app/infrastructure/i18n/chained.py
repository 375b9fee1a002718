"""Shape-mirroring tree of callables with late-bound lookup.

``chained_resolver`` freezes the *shape* of a dictionary (keys, nesting,
sequence positions) into a tree of ``ChainedNode`` objects. Calling any
node forwards its full dot-path to a lookup function, so the data behind
the tree can be swapped (e.g. on locale change) without rebuilding it::

    resolvers = resolver_dict(en)
    t = chained_resolver(en, lambda path, *args: resolvers[path](*args))
    t.data.currency.name()           # "dollar"
    t.data.currency["to.usd"]()      # item access for any key
    t.numbers[1]()                   # sequence indexes and numeric keys
"""

from typing import Any, Dict, Iterator

from infrastructure.i18n.flatten import is_container, iter_children
from infrastructure.i18n.models import Dictionary, Lookup, PathKey, join_path


class ChainedNode:
    """A callable node of a chained resolver tree.

    Children are reachable by attribute (``node.currency``) and by item
    (``node["class"]``, ``node[0]``). Item access works for every key,
    including Python keywords and names clashing with the node slots.

    Attributes are stored in slots with leading underscores so they never
    shadow dictionary keys.
    """

    __slots__ = ("_path", "_lookup", "_children")

    def __init__(self, path: str, lookup: Lookup):
        self._path = path
        self._lookup = lookup
        self._children: Dict[str, "ChainedNode"] = {}

    def __call__(self, *args: Any) -> Any:
        """Resolve this node through the lookup; errors propagate unchanged."""
        return self._lookup(self._path, *args)

    def __getattr__(self, name: str) -> "ChainedNode":
        if name.startswith("__") or name in ChainedNode.__slots__:
            raise AttributeError(name)
        try:
            return self._children[name]
        except KeyError:
            raise AttributeError(
                f"'{self._path or '<root>'}' has no child '{name}'"
            ) from None

    def __getitem__(self, key: PathKey) -> "ChainedNode":
        try:
            return self._children[str(key)]
        except KeyError:
            raise KeyError(key) from None

    def __contains__(self, key: object) -> bool:
        return str(key) in self._children

    def __iter__(self) -> Iterator[str]:
        return iter(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __bool__(self) -> bool:
        # Nodes are callables; a leaf with no children is still truthy
        return True

    def __dir__(self):
        return list(self._children)

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"ChainedNode(path={self._path!r}, children={len(self._children)})"


def _build(shape: Any, node: ChainedNode, lookup: Lookup) -> None:
    for key, child_shape in iter_children(shape):
        child = ChainedNode(join_path(node._path, key), lookup)
        node._children[str(key)] = child
        if is_container(child_shape):
            _build(child_shape, child, lookup)


def chained_resolver(shape: Dictionary, lookup: Lookup) -> ChainedNode:
    """Build a chained resolver tree mirroring ``shape``.

    The shape dictionary is walked exactly once, here. Its values are never
    read again; only ``lookup`` decides what each node resolves to.

    Args:
        shape: Dictionary whose keys, nesting and sequence positions define
            the tree.
        lookup: ``lookup(path, *args)`` invoked with a node's full dot-path
            and the call arguments.

    Returns:
        Root ChainedNode (path ``""``).
    """
    root = ChainedNode("", lookup)
    _build(shape, root, lookup)
    return root
