"""Feature-level fixtures for i18n system tests.

Provides dictionaries, resolvers and YAML files for resolution and locale
switching scenarios.
"""

import pytest

from infrastructure.i18n import YAMLDictionaryLoader, resolver_dict
from tests.factories.i18n import (
    make_en_dictionary,
    make_pl_dictionary,
    write_locale_file,
)


@pytest.fixture
def en_dict():
    """English dictionary."""
    return make_en_dictionary()


@pytest.fixture
def pl_dict():
    """Polish dictionary with the same shape as en_dict."""
    return make_pl_dictionary()


@pytest.fixture
def en_resolvers(en_dict):
    """ResolverDict for the English dictionary."""
    return resolver_dict(en_dict)


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML dictionary files.

    Returns a directory structure like:
    - common.en.yml
    - common.pl.yml
    - billing.en.yml
    - billing.pl.yml
    """
    write_locale_file(
        tmp_path,
        "en",
        {
            "hello": "Hello {{name}}!",
            "numbers": {1: "one", 2: "two"},
            "data": {"currency": {"name": "dollar", "to.usd": 1}},
        },
        domain="common",
    )
    write_locale_file(
        tmp_path,
        "pl",
        {
            "hello": "Cześć {{name}}!",
            "numbers": {1: "jeden", 2: "dwa"},
            "data": {"currency": {"name": "złoty", "to.usd": 0.27}},
        },
        domain="common",
    )
    write_locale_file(
        tmp_path,
        "en",
        {"data": {"invoice": {"total": "Total: {{amount}}"}}},
        domain="billing",
    )
    write_locale_file(
        tmp_path,
        "pl",
        {"data": {"invoice": {"total": "Razem: {{amount}}"}}},
        domain="billing",
    )
    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLDictionaryLoader for temporary translations directory."""
    return YAMLDictionaryLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLDictionaryLoader with caching enabled."""
    return YAMLDictionaryLoader(temp_translations_dir, use_cache=True)
