"""
Model construction from field schemas.

This module builds content models from an ordered list of field definitions
and optional existing content, filling in defaults for anything missing.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from contentschema.models import FieldDefinition, FieldType
from contentschema.types import Clock, ContentModel
from contentschema.utils.dates import today


def create_model(
    fields: Sequence[FieldDefinition],
    content: Mapping[str, Any] | None = None,
    *,
    clock: Clock | None = None,
) -> ContentModel:
    """Create a model from a list of fields and corresponding values.

    Fields are processed in schema order. A present key is used verbatim even
    when its value is falsy; absent keys get the field default. List fields
    keep non-empty sequences (object items are rebuilt recursively) and fall
    back to a single default item otherwise.

    Args:
        fields: Field definitions of the schema
        content: Existing values keyed by field name; never mutated. Anything
            other than a mapping, such as a scalar list item, counts as empty
        clock: Source of the current time for date defaults

    Returns:
        A newly allocated model

    Examples:
        >>> create_model([FieldDefinition(name="draft", type="boolean")])
        {'draft': False}
        >>> create_model([FieldDefinition(name="tags", list=True)], {"tags": []})
        {'tags': ['']}
    """
    if not isinstance(content, Mapping):
        content = {}
    model: ContentModel = {}

    for field in fields:
        if field.is_list:
            items = content.get(field.name)
            if isinstance(items, (list, tuple)) and len(items) > 0:
                model[field.name] = [
                    create_model(field.fields or [], item, clock=clock) if field.is_object else item
                    for item in items
                ]
            else:
                model[field.name] = [get_default_value(field, clock=clock)]
        elif field.name in content:
            model[field.name] = content[field.name]
        else:
            model[field.name] = get_default_value(field, clock=clock)

    return model


def get_default_value(field: FieldDefinition, *, clock: Clock | None = None) -> Any:
    """Return the default value of a single field.

    An explicit ``default`` wins and is returned as is, without copying.
    Otherwise the default depends on the type: a fully defaulted nested model
    for objects, ``False`` for booleans, today's date for dates and an empty
    string for everything else.
    """
    if field.has_default:
        return field.default

    match field.type:
        case FieldType.OBJECT.value:
            return create_model(field.fields or [], {}, clock=clock)
        case FieldType.BOOLEAN.value:
            return False
        case FieldType.DATE.value:
            return today(clock)
        case _:
            return ""
