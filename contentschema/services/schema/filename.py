"""
Filename generation from patterns.

This module renders filenames from patterns such as
``{year}-{month}-{day}-{fields.title}.md``. Date placeholders are filled from
the clock; every other placeholder names a schema field whose model value is
transliterated and slugified.
"""

import re
from collections.abc import Iterator, Mapping
from typing import Any, NamedTuple

from contentschema.exceptions import FieldNotFoundError, ValueNotFoundError
from contentschema.models import ContentEntry
from contentschema.settings import settings
from contentschema.types import Clock
from contentschema.utils.dates import date_tokens
from contentschema.utils.logger import logger
from contentschema.utils.slug import slugify_strict, to_text, transliterate

FIELDS_PREFIX = "fields."

# name[0][1] -> ("name", "[0][1]")
INDEXED_SEGMENT_REGEX = re.compile(r"(?P<name>[^\[\]]*)(?P<indexes>(?:\[\d+\])+)")
INDEX_REGEX = re.compile(r"\[(\d+)\]")


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class PatternToken(NamedTuple):
    """Piece of a pattern: literal text or the reference inside a ``{...}`` placeholder."""

    text: str
    is_placeholder: bool = False


def iter_pattern_tokens(pattern: str) -> Iterator[PatternToken]:
    """Split a pattern into literal text and placeholders, left to right.

    A placeholder runs from ``{`` to the next ``}`` and must not be empty.
    Braces do not nest: ``{a{b}`` is a single placeholder ``a{b``. An empty
    ``{}`` and a ``{`` without a closing brace are literal text.

    Examples:
        >>> list(iter_pattern_tokens("post-{slug}.md"))
        [PatternToken(text='post-', is_placeholder=False), PatternToken(text='slug', is_placeholder=True), PatternToken(text='.md', is_placeholder=False)]
    """
    literal_start = 0
    position = 0
    while True:
        start = pattern.find("{", position)
        if start == -1:
            break
        end = pattern.find("}", start + 1)
        if end == -1:
            break
        if end == start + 1:
            position = start + 1
            continue

        if start > literal_start:
            yield PatternToken(pattern[literal_start:start])
        yield PatternToken(pattern[start + 1 : end], is_placeholder=True)
        literal_start = position = end + 1

    if literal_start < len(pattern):
        yield PatternToken(pattern[literal_start:])


def resolve_model_value(model: Any, path: str) -> Any:
    """Get a value from a model by dotted path with optional list indexes.

    Returns MISSING as soon as a segment cannot be followed.

    Examples:
        >>> resolve_model_value({"a": {"b": [{"c": 1}]}}, "a.b[0].c")
        1
        >>> resolve_model_value({"a": {}}, "a.b[0].c")
        MISSING
    """
    value = model
    for part in path.split("."):
        match = INDEXED_SEGMENT_REGEX.fullmatch(part)
        if match:
            value = _get_key(value, match["name"])
            for index in INDEX_REGEX.findall(match["indexes"]):
                value = _get_index(value, int(index))
        else:
            value = _get_key(value, part)
        if value is MISSING:
            return MISSING
    return value


def replace_date_placeholders(pattern: str, clock: Clock | None = None) -> str:
    """Replace {year}, {month}, {day}, {hour}, {minute} and {second}.

    All values come from a single reading of the clock.
    """
    for name, value in date_tokens(clock).items():
        pattern = pattern.replace(f"{{{name}}}", value)
    return pattern


def resolve_placeholder(reference: str, schema: ContentEntry, model: Mapping[str, Any]) -> str:
    """Render one field placeholder.

    The reference, minus any ``fields.`` prefix, must be the name of a
    top-level schema field. With the prefix the name is then read from the
    model as a dotted path with list indexes; without it ``model[name]`` is
    read directly.

    Raises:
        FieldNotFoundError: If the referenced field is not in the schema
        ValueNotFoundError: If the model has no value for the field
    """
    if reference.startswith(FIELDS_PREFIX):
        key = reference.removeprefix(FIELDS_PREFIX)
        value = resolve_model_value(model, key)
    else:
        key = reference
        value = model.get(key, MISSING)

    if schema.get_field(key) is None:
        logger.warning(f"Filename placeholder '{{{reference}}}' names unknown field '{key}'")
        raise FieldNotFoundError(key)

    if value is MISSING or value is None:
        logger.warning(f"Filename placeholder '{{{reference}}}' has no value in the model")
        raise ValueNotFoundError(key)

    return slugify_strict(transliterate(to_text(value)))


def generate_filename(
    pattern: str,
    schema: ContentEntry,
    model: Mapping[str, Any],
    *,
    clock: Clock | None = None,
) -> str:
    """Generate a filename from a pattern, a schema and a model.

    Args:
        pattern: Pattern with placeholders
        schema: Content schema the model was built from
        model: Content model providing field values
        clock: Source of the current time for date placeholders

    Returns:
        Generated filename

    Raises:
        FieldNotFoundError: If a placeholder names a field missing from the schema
        ValueNotFoundError: If a referenced field has no value in the model

    Examples:
        >>> generate_filename("{fields.title}.md", schema, {"title": "Café Déjà Vu"})
        'cafe-deja-vu.md'
        >>> generate_filename("{year}-{month}-{day}-{title}.md", schema, {"title": "Hello"})
        '2024-03-07-hello.md'
    """
    pattern = replace_date_placeholders(pattern, clock)

    return "".join(
        resolve_placeholder(token.text, schema, model) if token.is_placeholder else token.text
        for token in iter_pattern_tokens(pattern)
    )


def preview_filename(
    entry: ContentEntry,
    model: Mapping[str, Any],
    *,
    pattern: str | None = None,
    clock: Clock | None = None,
) -> str:
    """Generate the filename for a new file of ``entry``.

    Uses ``pattern`` if given, then the entry's own filename pattern, then
    the configured default pattern.
    """
    pattern = pattern or entry.filename or settings.default_filename_pattern
    return generate_filename(pattern, entry, model, clock=clock)


def _get_key(value: Any, key: str) -> Any:
    if isinstance(value, Mapping) and key in value:
        return value[key]
    return MISSING


def _get_index(value: Any, index: int) -> Any:
    if isinstance(value, (list, tuple, str)) and index < len(value):
        return value[index]
    return MISSING
