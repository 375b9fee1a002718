"""Factory functions for creating i18n components.

Provides convenience functions for wiring the loader, locale cache and
translation service with default configurations from settings.
"""

import asyncio
from pathlib import Path
from typing import Optional

from infrastructure.configuration import settings
from infrastructure.i18n.cache import SimpleCache
from infrastructure.i18n.flatten import resolver_dict
from infrastructure.i18n.loader import DictionaryLoader, YAMLDictionaryLoader
from infrastructure.i18n.models import ResolverDict
from infrastructure.i18n.service import TranslationService
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def default_translations_dir() -> Path:
    """Return the configured translations directory, or the bundled one."""
    if settings.i18n.translations_dir is not None:
        return settings.i18n.translations_dir
    # This file is at .../app/infrastructure/i18n/factory.py
    app_root = Path(__file__).resolve().parents[2]
    return app_root / "locales"


def create_locale_cache(
    loader: DictionaryLoader,
    default_locale: Optional[str] = None,
    async_loading: Optional[bool] = None,
) -> SimpleCache[str, ResolverDict]:
    """Create a locale cache backed by ``loader``.

    The default locale is loaded and seeded synchronously. Other locales are
    produced on first request, in a worker thread when async loading is
    enabled (``get`` then returns a future and must be called while an
    event loop is running).

    Args:
        loader: Source of raw locale dictionaries.
        default_locale: Locale to seed (default: settings.i18n.default_locale).
        async_loading: Produce in a worker thread
            (default: settings.i18n.async_loading).

    Returns:
        SimpleCache mapping locale -> ResolverDict.
    """
    default_locale = default_locale or settings.i18n.default_locale
    if async_loading is None:
        async_loading = settings.i18n.async_loading

    def build(locale: str) -> ResolverDict:
        return resolver_dict(loader.load(locale))

    def produce(locale: str):
        if async_loading:
            return asyncio.to_thread(build, locale)
        return build(locale)

    cache: SimpleCache[str, ResolverDict] = SimpleCache(produce)
    cache.cache[default_locale] = build(default_locale)

    logger.info(
        "locale_cache_created",
        default_locale=default_locale,
        async_loading=async_loading,
    )
    return cache


def create_translation_service(
    translations_dir: Optional[Path] = None,
    default_locale: Optional[str] = None,
    use_cache: Optional[bool] = None,
    async_loading: Optional[bool] = None,
) -> TranslationService:
    """Create and configure a TranslationService.

    Args:
        translations_dir: Path to YAML dictionaries (default: settings or app/locales)
        default_locale: Locale active at startup (default: settings.i18n.default_locale)
        use_cache: Whether the loader caches parsed YAML (default: settings.i18n.use_cache)
        async_loading: Whether other locales load in a worker thread
            (default: settings.i18n.async_loading)

    Returns:
        TranslationService: Configured service

    Raises:
        ValueError: If translations_dir does not exist
        FileNotFoundError: If the default locale has no dictionary files

    Usage:
        # Use defaults (bundled app/locales, settings for the rest)
        service = create_translation_service()

        # Custom directory and default locale
        service = create_translation_service(Path("/custom/locales"), default_locale="pl")
    """
    translations_dir = translations_dir or default_translations_dir()
    default_locale = default_locale or settings.i18n.default_locale
    if use_cache is None:
        use_cache = settings.i18n.use_cache

    loader = YAMLDictionaryLoader(translations_dir=translations_dir, use_cache=use_cache)
    cache = create_locale_cache(loader, default_locale, async_loading)
    shape = loader.load(default_locale)

    logger.info(
        "translation_service_created",
        translations_dir=str(translations_dir),
        available_locales=loader.available_locales(),
    )
    return TranslationService(cache, shape, default_locale)
