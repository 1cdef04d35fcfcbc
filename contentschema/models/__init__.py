"""
Models for contentschema.
"""

from .config import ContentConfig, ContentEntry
from .field import FieldDefinition, FieldType

__all__ = ["ContentConfig", "ContentEntry", "FieldDefinition", "FieldType"]
