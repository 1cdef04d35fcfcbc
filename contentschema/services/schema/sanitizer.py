"""
Pruning of empty values from content models.

``prune`` returns a pruned copy and never touches its argument; ``sanitize``
applies the same rules to a model in place, down to nested dicts and lists,
so references held into the model see the pruned values.

Rules, per mapping key:
    - A dict or list value is dropped when it has no entries or when every
      entry is falsy; otherwise it is pruned recursively and dropped if
      nothing is left.
    - A scalar value is dropped when falsy, unless it is a boolean.

Dicts and lists are never falsy as entries. Lists keep their length: entries
are pruned in place but never removed, and a list only survives while at
least one entry still carries content.
"""

import math
from collections.abc import Mapping, MutableMapping
from typing import Any

from contentschema.types import ContentModel


def is_falsy(value: Any) -> bool:
    """Whether a value counts as empty. Containers never do."""
    if isinstance(value, (dict, list, tuple)):
        return False
    if isinstance(value, float) and math.isnan(value):
        return True
    return not value


def prune(model: Mapping[str, Any]) -> tuple[ContentModel, bool]:
    """Return a pruned copy of ``model`` and whether it still has any key.

    Examples:
        >>> prune({"a": "", "b": False, "c": {"d": ""}, "e": "x"})
        ({'b': False, 'e': 'x'}, True)
    """
    pruned: ContentModel = {}
    for key, value in model.items():
        kept, has_content = _prune_value(value)
        if has_content:
            pruned[key] = kept
    return pruned, bool(pruned)


def sanitize(model: MutableMapping[str, Any]) -> bool:
    """Remove empty values from ``model`` in place.

    Nested dicts and lists are pruned in place too. List entries emptied by
    pruning are cleared, not removed. Tuples are replaced by pruned lists.

    Args:
        model: Model to prune

    Returns:
        True if the model still has at least one key
    """
    for key in list(model):
        value, has_content = _sanitize_value(model[key])
        if has_content:
            model[key] = value
        else:
            del model[key]
    return bool(model)


def _sanitize_value(value: Any) -> tuple[Any, bool]:
    if isinstance(value, MutableMapping):
        if not value or all(is_falsy(item) for item in value.values()):
            return value, False
        return value, sanitize(value)

    if isinstance(value, list):
        if not value or all(is_falsy(item) for item in value):
            return value, False
        has_content = False
        for index, item in enumerate(value):
            kept, item_has_content = _sanitize_value(item)
            if not item_has_content and isinstance(kept, (MutableMapping, list)):
                kept.clear()
            value[index] = kept
            has_content = has_content or item_has_content
        return value, has_content

    return _prune_value(value)


def _prune_value(value: Any) -> tuple[Any, bool]:
    if isinstance(value, Mapping):
        if not value or all(is_falsy(item) for item in value.values()):
            return {}, False
        return prune(value)

    if isinstance(value, (list, tuple)):
        if not value or all(is_falsy(item) for item in value):
            return [], False
        return _prune_list(value)

    return value, not is_falsy(value) or isinstance(value, bool)


def _prune_list(items: list[Any] | tuple[Any, ...]) -> tuple[list[Any], bool]:
    pruned = []
    has_content = False
    for item in items:
        kept, item_has_content = _prune_value(item)
        pruned.append(kept)
        has_content = has_content or item_has_content
    return pruned, has_content
