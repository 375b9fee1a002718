"""Infrastructure configuration module - public API.

This module provides centralized configuration management using Pydantic
BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Locale dictionary settings class (for testing)

Example:
    ```python
    from infrastructure.configuration import settings

    default_locale = settings.i18n.default_locale
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.i18n import I18nSettings

__all__ = ["Settings", "I18nSettings", "settings"]
