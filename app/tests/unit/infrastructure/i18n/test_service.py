"""Tests for infrastructure.i18n.service and factory modules."""

import asyncio
from pathlib import Path

import pytest

from infrastructure.i18n import (
    SimpleCache,
    TranslationService,
    YAMLDictionaryLoader,
    create_effect,
    create_locale_cache,
    create_translation_service,
    resolver_dict,
)
from infrastructure.i18n.factory import default_translations_dir


class TestTranslationService:
    """Tests for TranslationService over an in-memory cache."""

    @pytest.fixture
    def service(self, en_dict, pl_dict):
        """Service with en seeded and pl produced on demand."""
        dictionaries = {"en": en_dict, "pl": pl_dict}
        cache = SimpleCache(lambda locale: resolver_dict(dictionaries[locale]))
        cache.cache["en"] = resolver_dict(en_dict)
        return TranslationService(cache, en_dict, "en")

    def test_initial_locale(self, service):
        """The default locale is active immediately."""
        assert service.locale == "en"
        assert service.t("numbers.2") == "two"
        assert service.dict.data.currency.name() == "dollar"

    @pytest.mark.asyncio
    async def test_set_locale(self, service, pl_dict):
        """set_locale() switches both t and dict."""
        await service.set_locale("pl")

        assert service.locale == "pl"
        assert service.t("hello", {"name": "Tester"}) == "Cześć Tester!"
        assert service.dict.data.currency["to.usd"]() == 0.27
        assert service.dict.data["class"]() is pl_dict["data"]["class"]
        assert service.loaded_locales() == ["en", "pl"]

    @pytest.mark.asyncio
    async def test_effects_follow_locale(self, service):
        """Effects reading the chained dictionary re-run on switch."""
        captured = []
        effect = create_effect(
            lambda: captured.append(service.dict.data.currency.iso())
        )

        await service.set_locale("pl")

        assert captured == ["USD", "PLN"]
        effect.dispose()

    def test_missing_path_in_chained_lookup(self, en_dict):
        """Chained lookups of paths absent from the current locale raise KeyError."""
        cache = SimpleCache(lambda locale: {})
        cache.cache["en"] = resolver_dict({"hello": "Hi"})
        service = TranslationService(cache, en_dict, "en")

        with pytest.raises(KeyError):
            service.dict.data.currency.name()

    @pytest.mark.asyncio
    async def test_failed_switch_keeps_previous_locale(self, service):
        """A locale that cannot be produced leaves the previous one active."""
        with pytest.raises(KeyError):
            await service.set_locale("de")

        assert service.locale == "en"
        assert service.t("numbers.1") == "one"

    @pytest.mark.asyncio
    async def test_async_default_locale_rejected(self, en_dict):
        """The default locale must be available synchronously."""

        async def produce(locale):
            return resolver_dict(en_dict)

        cache = SimpleCache(produce)
        with pytest.raises(ValueError):
            TranslationService(cache, en_dict, "en")
        await cache.aget("en")


class TestFactory:
    """Tests for the i18n factory functions."""

    def test_create_locale_cache_seeds_default(self, yaml_loader):
        """create_locale_cache() seeds the default locale."""
        cache = create_locale_cache(yaml_loader, default_locale="en", async_loading=False)

        assert list(cache.cache) == ["en"]
        assert cache.get("en")["data.currency.name"]() == "dollar"
        assert cache.get("pl")["data.currency.name"]() == "złoty"

    @pytest.mark.asyncio
    async def test_create_locale_cache_async(self, yaml_loader):
        """Async loading produces other locales as futures."""
        cache = create_locale_cache(yaml_loader, default_locale="en", async_loading=True)

        pending = cache.get("pl")

        assert isinstance(pending, asyncio.Future)
        resolvers = await pending
        assert resolvers["numbers.2"]() == "dwa"

    def test_create_translation_service(self, temp_translations_dir):
        """create_translation_service() wires loader, cache and service."""
        service = create_translation_service(
            temp_translations_dir, default_locale="en", async_loading=False
        )

        assert service.t("hello", {"name": "Sam"}) == "Hello Sam!"
        assert service.dict.data.invoice.total({"amount": 5}) == "Total: 5"

    @pytest.mark.asyncio
    async def test_create_translation_service_async_switch(self, temp_translations_dir):
        """Async loading switches locales once the worker finishes."""
        service = create_translation_service(
            temp_translations_dir, default_locale="en", async_loading=True
        )

        await service.set_locale("pl")

        assert service.t("hello", {"name": "Sam"}) == "Cześć Sam!"
        assert service.dict.numbers[1]() == "jeden"

    def test_create_translation_service_missing_dir(self, tmp_path):
        """create_translation_service() rejects missing directories."""
        with pytest.raises(ValueError):
            create_translation_service(tmp_path / "missing", default_locale="en")

    def test_bundled_locales(self):
        """The bundled locale files load for every locale."""
        translations_dir = default_translations_dir()
        assert translations_dir == Path(__file__).resolve().parents[4] / "locales"

        loader = YAMLDictionaryLoader(translations_dir)
        assert loader.available_locales() == ["en", "pl"]
        en = resolver_dict(loader.load("en"))
        pl = resolver_dict(loader.load("pl"))
        assert en["data.currency.to.usd"]() == 1
        assert pl["data.users.2.name"]() == "Tester"
