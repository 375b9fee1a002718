"""Infrastructure modules for the application.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Dictionary resolution, locale cache and translation service
"""

from infrastructure.configuration import settings
from infrastructure.logging import configure_logging, get_module_logger

__all__ = [
    "settings",
    "configure_logging",
    "get_module_logger",
]
