"""
Text helpers for turning model values into filename segments.
"""

import math
import re
from typing import Any

from slugify import slugify
from unidecode import unidecode

# Characters dropped (not replaced) in strict mode
STRICT_DISALLOWED_REGEX = re.compile(r"[^A-Za-z0-9\s-]")


def to_text(value: Any) -> str:
    """Convert a model value to its display text.

    Booleans render lowercase, integral floats drop the fractional part and
    lists are joined with commas.

    Examples:
        >>> to_text(True)
        'true'
        >>> to_text(3.0)
        '3'
        >>> to_text(["a", 2])
        'a,2'
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if value.is_integer():
            return str(int(value))
        return str(value)
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else to_text(item) for item in value)
    return str(value)


def transliterate(text: str) -> str:
    """Replace non-ASCII characters with their closest ASCII equivalents."""
    return unidecode(text)


def slugify_strict(text: str) -> str:
    """Slugify in lowercase strict mode.

    Characters outside ``[A-Za-z0-9]``, whitespace and hyphens are removed,
    then whitespace and hyphen runs collapse into single hyphens with no
    leading or trailing separator.

    Examples:
        >>> slugify_strict("Hello, World!")
        'hello-world'
        >>> slugify_strict("v1.2 -- final")
        'v12-final'
    """
    return slugify(STRICT_DISALLOWED_REGEX.sub("", text), lowercase=True)
