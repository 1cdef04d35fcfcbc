"""
Content configuration models for contentschema.

A content configuration is the ordered list of schema entries the host
application supplies, each optionally bound to a path prefix.
"""

from pydantic import BaseModel, ConfigDict

from .field import FieldDefinition


class ContentEntry(BaseModel):
    """Schema entry of a content configuration.

    Attributes:
        name: Unique name of the entry
        label: Display label
        type: Entry kind, e.g. "collection" or "file"
        path: Path prefix of the files this schema applies to
        filename: Filename pattern for new files, e.g. "{year}-{month}-{day}-{title}.md"
        fields: Ordered field definitions
    """

    model_config = ConfigDict(extra="allow")

    name: str
    label: str | None = None
    type: str = "collection"
    path: str | None = None
    filename: str | None = None
    fields: list[FieldDefinition] = []

    def get_field(self, name: str) -> FieldDefinition | None:
        """Return the top-level field called ``name``, if any."""
        return next((field for field in self.fields if field.name == name), None)


class ContentConfig(BaseModel):
    """Content configuration: the ordered schema entries."""

    model_config = ConfigDict(extra="allow")

    content: list[ContentEntry] = []
