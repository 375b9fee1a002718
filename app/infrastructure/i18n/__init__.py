"""i18n system - dictionary resolution and locale switching.

Turns nested locale dictionaries (template strings, formatter functions,
nested mappings, lists and opaque values) into dot-path resolvers, and lets
consumers keep a single chained dictionary or translator while the locale
behind it changes.

Main components:
- resolution: resolved() for a single dictionary entry
- flatten: resolver_dict() building path -> resolver mappings
- chained: chained_resolver() mirroring a dictionary as a tree of callables
- cache: SimpleCache of ResolverDicts per locale
- translator: translator() bound to the current ResolverDict
- reactive: Signal, Effect and Resource cells driving locale switches
- loader: DictionaryLoader and YAMLDictionaryLoader
- service: TranslationService facade
"""

from infrastructure.i18n.cache import SimpleCache
from infrastructure.i18n.chained import ChainedNode, chained_resolver
from infrastructure.i18n.factory import create_locale_cache, create_translation_service
from infrastructure.i18n.flatten import resolver_dict
from infrastructure.i18n.loader import DictionaryLoader, YAMLDictionaryLoader
from infrastructure.i18n.models import Dictionary, Lookup, Resolver, ResolverDict
from infrastructure.i18n.reactive import Effect, Resource, Signal, create_effect
from infrastructure.i18n.resolution import resolved
from infrastructure.i18n.service import TranslationService
from infrastructure.i18n.translator import translator

__all__ = [
    "ChainedNode",
    "Dictionary",
    "DictionaryLoader",
    "Effect",
    "Lookup",
    "Resolver",
    "ResolverDict",
    "Resource",
    "Signal",
    "SimpleCache",
    "TranslationService",
    "YAMLDictionaryLoader",
    "chained_resolver",
    "create_effect",
    "create_locale_cache",
    "create_translation_service",
    "resolved",
    "resolver_dict",
    "translator",
]
