"""
Exceptions for contentschema.

This module provides the exceptions raised by the package. Each exception is
designed to be clear about what went wrong and carry the offending name.
"""

from typing import Self


class ContentSchemaError(Exception):
    """Base exception for all contentschema errors."""

    def with_context(self, detail: str) -> Self:
        """Add context information to the exception.

        Args:
            detail: Additional details about the error

        Returns:
            Self with updated message
        """
        self.args = (detail,)
        return self


class ConfigError(ContentSchemaError):
    """Error related to loading the content configuration."""

    pass


class FilenameError(ContentSchemaError):
    """Base exception for filename generation errors."""

    pass


class FieldNotFoundError(FilenameError):
    """Raised when a filename placeholder names a field missing from the schema."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Field '{field_name}' not found in schema")


class ValueNotFoundError(FilenameError):
    """Raised when a schema field has no value in the model."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Field '{field_name}' not found in model")
