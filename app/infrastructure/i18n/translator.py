"""Translator function bound to a swappable ResolverDict source."""

from typing import Any, Callable, Optional

from infrastructure.i18n.models import ResolverDict
from infrastructure.logging import get_module_logger

logger = get_module_logger()

Translate = Callable[..., Any]


def translator(source: Callable[[], Optional[ResolverDict]]) -> Translate:
    """Create ``t(path, *args)`` reading the current ResolverDict from ``source``.

    ``source`` is called on every translation, so passing a ``Signal`` or
    ``Resource`` makes effects that call ``t`` re-run when the ResolverDict
    changes (e.g. after a locale switch).

    Args:
        source: Zero-argument callable returning the current ResolverDict,
            or None while nothing is loaded.

    Returns:
        Function resolving ``path`` with ``args``. Returns None when the
        source has no ResolverDict or the path is absent.

    Example:
        t = translator(lambda: resolvers)
        t("hello", {"name": "Sam"})  # "Hi Sam!"
    """

    def t(path: str, *args: Any) -> Any:
        resolvers = source()
        resolver = resolvers.get(path) if resolvers is not None else None
        if resolver is None:
            logger.debug(
                "translation_not_found",
                path=path,
                loaded=resolvers is not None,
            )
            return None
        return resolver(*args)

    return t
