"""Internationalization infrastructure settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Locale dictionary configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale available synchronously at startup (default: "en")
        I18N_TRANSLATIONS_DIR: Directory holding YAML dictionaries
            (default: the bundled app/locales directory)
        I18N_USE_CACHE: Cache parsed YAML dictionaries in the loader (default: True)
        I18N_ASYNC_LOADING: Load non-default locales in a worker thread (default: False)

    Example:
        ```python
        from infrastructure.configuration import settings

        default_locale = settings.i18n.default_locale
        if settings.i18n.async_loading:
            # Locales other than the default resolve to futures...
        ```
    """

    default_locale: str = Field(
        default="en",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale that is loaded eagerly and seeded into the cache",
    )
    translations_dir: Optional[Path] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory containing <locale>.yml or <domain>.<locale>.yml files",
    )
    use_cache: bool = Field(
        default=True,
        alias="I18N_USE_CACHE",
        description="Keep parsed YAML dictionaries in memory",
    )
    async_loading: bool = Field(
        default=False,
        alias="I18N_ASYNC_LOADING",
        description="Produce non-default locales asynchronously via a worker thread",
    )
