"""Dictionary loading interface and implementations.

Defines the contract for loading locale dictionaries and provides a
YAML-based loader.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, List

import yaml

from infrastructure.logging import get_module_logger

logger = get_module_logger()


def merge_deep(base: Dict[Any, Any], override: Mapping) -> Dict[Any, Any]:
    """Recursively merge ``override`` into ``base`` in place.

    Nested mappings are merged key by key; any other value in ``override``
    replaces the one in ``base``.

    Returns:
        ``base``, for chaining.
    """
    for key, value in override.items():
        current = base.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            merge_deep(current, value)
        else:
            base[key] = value
    return base


class DictionaryLoader(ABC):
    """Abstract base for locale dictionary loaders.

    Implementations must define how to find and parse the nested
    dictionary for a locale.
    """

    @abstractmethod
    def load(self, locale: str) -> Dict[Any, Any]:
        """Load the dictionary for a specific locale.

        Args:
            locale: Locale identifier (e.g., "en", "pl", "fr-FR").

        Returns:
            Nested dictionary for the locale.

        Raises:
            FileNotFoundError: If no dictionary exists for the locale.
            ValueError: If the dictionary format is invalid.
        """

    @abstractmethod
    def available_locales(self) -> List[str]:
        """List locales this loader can load."""


class YAMLDictionaryLoader(DictionaryLoader):
    """Loader for YAML dictionary files.

    Expects files named ``<locale>.yml`` or ``<domain>.<locale>.yml`` in the
    translations directory. All files of a locale are deep-merged in sorted
    filename order.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        use_cache: Whether parsed dictionaries are kept in memory.
        cache: Loaded dictionaries (locale -> dictionary).
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize YAML dictionary loader.

        Args:
            translations_dir: Path to directory with YAML dictionary files.
            use_cache: Whether to cache loaded dictionaries in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, Dict[Any, Any]] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def _files_for(self, locale: str) -> List[Path]:
        return sorted(
            path
            for path in self.translations_dir.glob("*.yml")
            if path.stem.split(".")[-1] == locale
        )

    def load(self, locale: str) -> Dict[Any, Any]:
        """Load and merge every YAML file of a locale.

        Args:
            locale: Locale to load.

        Returns:
            Nested dictionary for the locale.

        Raises:
            FileNotFoundError: If no YAML files found for locale.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and locale in self.cache:
            logger.debug("loaded_from_cache", locale=locale)
            return self.cache[locale]

        yaml_files = self._files_for(locale)
        if not yaml_files:
            raise FileNotFoundError(
                f"No dictionary files found for locale {locale} in {self.translations_dir}"
            )

        dictionary: Dict[Any, Any] = {}
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

            if data is None:
                continue
            if not isinstance(data, dict):
                logger.warning(
                    "invalid_yaml_format", file=str(yaml_file), expected="dict"
                )
                continue
            merge_deep(dictionary, data)

        logger.info(
            "loaded_dictionary",
            locale=locale,
            file_count=len(yaml_files),
            top_level_keys=len(dictionary),
        )

        if self.use_cache:
            self.cache[locale] = dictionary

        return dictionary

    def available_locales(self) -> List[str]:
        """Detect locales from the ``*.yml`` file names.

        Returns:
            Sorted list of locale identifiers.
        """
        return sorted(
            {path.stem.split(".")[-1] for path in self.translations_dir.glob("*.yml")}
        )

    def clear_cache(self) -> None:
        """Clear all cached dictionaries."""
        self.cache.clear()
        logger.info("cleared_dictionary_cache")
