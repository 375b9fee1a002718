"""Translation service tying the cache, reactive state and resolvers together.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

import inspect
from typing import Any, List, Optional

from infrastructure.i18n.cache import SimpleCache
from infrastructure.i18n.chained import ChainedNode, chained_resolver
from infrastructure.i18n.models import Dictionary, ResolverDict
from infrastructure.i18n.reactive import Resource, Signal
from infrastructure.i18n.translator import translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationService:
    """Current-locale state with a translator and a chained dictionary.

    The service owns a ``Signal`` holding the current locale and a
    ``Resource`` holding the matching ResolverDict, fetched from the locale
    cache. Both ``t`` and ``dict`` read that resource on every call, so they
    follow locale switches without being rebuilt, and effects calling them
    re-run when the new dictionary lands.

    Usage:
        service = create_translation_service()

        service.t("hello", {"name": "Sam"})
        service.dict.data.currency.name()
        service.dict.data["class"]()

        await service.set_locale("pl")

    Attributes:
        cache: SimpleCache of ResolverDicts keyed by locale.
        resolvers: Resource with the current ResolverDict.
        t: Translator function ``t(path, *args)``.
        dict: Chained resolver mirroring the default locale's dictionary.
    """

    def __init__(
        self,
        cache: SimpleCache[str, ResolverDict],
        shape: Dictionary,
        default_locale: str,
    ):
        """Initialize translation service.

        Args:
            cache: Locale cache; ``default_locale`` must resolve synchronously
                (seeded or produced without awaiting).
            shape: Dictionary defining the structure of ``dict``.
            default_locale: Locale active at startup.

        Raises:
            ValueError: If the default locale is only available asynchronously.
        """
        initial = cache.get(default_locale)
        if inspect.isawaitable(initial):
            raise ValueError(
                f"Default locale {default_locale} must be available synchronously"
            )

        self.cache = cache
        self._locale = Signal(default_locale)
        self.resolvers: Resource[str, ResolverDict] = Resource(
            self._locale, self._fetch, initial_value=initial
        )
        self.t = translator(self.resolvers)
        self.dict: ChainedNode = chained_resolver(shape, self._lookup)
        logger.info("initialized_translation_service", default_locale=default_locale)

    @property
    def locale(self) -> str:
        """Current locale (tracked when read inside an effect)."""
        return self._locale()

    async def set_locale(self, locale: str) -> Optional[ResolverDict]:
        """Switch the current locale and wait for its ResolverDict.

        Args:
            locale: Locale to switch to.

        Returns:
            The ResolverDict now in use.

        Raises:
            Exception: Whatever producing the locale raised. The previous
                locale and ResolverDict stay active in that case.
        """
        previous = self._locale.peek()
        logger.info("switching_locale", locale=locale, previous=previous)
        try:
            self._locale.set(locale)
            return await self.resolvers.wait()
        except Exception as e:
            logger.error("locale_switch_failed", locale=locale, error=str(e))
            self._locale.set(previous)
            raise

    def loaded_locales(self) -> List[str]:
        """Locales currently held (or being produced) by the cache."""
        return list(self.cache.cache)

    def _fetch(self, locale: str, current: Optional[ResolverDict]) -> Any:
        resolvers = self.cache.get(locale)
        if resolvers is None:
            return current
        if inspect.isawaitable(resolvers):
            return self._await_or_keep(resolvers, current)
        return resolvers

    @staticmethod
    async def _await_or_keep(pending, current: Optional[ResolverDict]):
        resolvers = await pending
        return resolvers if resolvers is not None else current

    def _lookup(self, path: str, *args: Any) -> Any:
        resolvers = self.resolvers()
        if resolvers is None or path not in resolvers:
            raise KeyError(f"No resolver for path '{path}' in locale {self._locale.peek()}")
        return resolvers[path](*args)
