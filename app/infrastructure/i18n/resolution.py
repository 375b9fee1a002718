"""Resolution of a single dictionary entry into a concrete value."""

import re
from collections.abc import Mapping
from typing import Any

from infrastructure.i18n.models import Entry

# {{identifier}} with no surrounding whitespace; anything else is literal text
PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")


def is_formatter(entry: Entry) -> bool:
    """Return True if the entry is a formatter function.

    Classes are callable but count as opaque values, like their instances.
    """
    return callable(entry) and not isinstance(entry, type)


def _interpolate(template: str, variables: Mapping) -> str:
    def replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name in variables:
            return str(variables[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replace, template)


def resolved(entry: Entry, *args: Any) -> Any:
    """Resolve one dictionary entry with optional caller arguments.

    - Formatter functions are called with ``*args`` and their result is
      returned unchanged.
    - Strings have every ``{{name}}`` placeholder replaced by
      ``str(args[0][name])`` when the first argument is a mapping holding
      that name. Unknown placeholders, or a missing/non-mapping first
      argument, leave the text untouched.
    - Any other entry (numbers, booleans, None, containers, class
      instances) is returned as-is and the arguments are ignored.

    Args:
        entry: Dictionary entry to resolve.
        *args: Arguments for formatter functions, or a substitution mapping
            for template strings.

    Returns:
        The resolved value.

    Example:
        >>> resolved("Hi {{name}}!", {"name": "Sam"})
        'Hi Sam!'
    """
    if isinstance(entry, str):
        if args and isinstance(args[0], Mapping):
            return _interpolate(entry, args[0])
        return entry

    if is_formatter(entry):
        return entry(*args)

    return entry
