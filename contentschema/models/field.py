"""
Field definition models for contentschema.

This module provides the model describing one field of a content schema.
Object fields nest further field definitions, forming a tree.
"""

import enum
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FieldType(str, enum.Enum):
    """Field types with dedicated handling. Other type names are accepted as strings."""

    OBJECT = "object"
    BOOLEAN = "boolean"
    DATE = "date"
    STRING = "string"


class FieldDefinition(BaseModel):
    """Definition of a single schema field.

    Attributes:
        name: Field name, unique among its siblings
        type: Type tag; see FieldType for the tags with special defaults
        is_list: Whether the field holds a sequence of values (``list`` in config)
        fields: Nested field definitions, only for object fields
        default: Literal default overriding the type-based default

    Examples:
        FieldDefinition(name="title")

        FieldDefinition(name="tags", type="string", list=True)

        FieldDefinition.model_validate(
            {"name": "author", "type": "object", "fields": [{"name": "name"}]}
        )
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str
    type: str = FieldType.STRING.value
    is_list: bool = Field(default=False, alias="list")
    fields: list["FieldDefinition"] | None = None
    default: Any = None

    @model_validator(mode="after")
    def check_nested_fields(self) -> Self:
        """Require nested fields on object fields and only there."""
        if self.is_object:
            if not self.fields:
                raise ValueError(f"Object field '{self.name}' requires nested fields")
        elif self.fields is not None:
            raise ValueError(f"Field '{self.name}' of type '{self.type}' cannot have nested fields")
        return self

    @property
    def is_object(self) -> bool:
        return self.type == FieldType.OBJECT.value

    @property
    def has_default(self) -> bool:
        """Whether a default was given, including an explicit ``None``."""
        return "default" in self.model_fields_set
