"""
contentschema - content models, schema lookup and filename patterns for
configuration-driven content authoring.
"""

from .exceptions import (
    ConfigError,
    ContentSchemaError,
    FieldNotFoundError,
    FilenameError,
    ValueNotFoundError,
)
from .models import ContentConfig, ContentEntry, FieldDefinition, FieldType
from .services.schema import (
    create_model,
    generate_filename,
    get_default_value,
    get_schema_by_name,
    get_schema_by_path,
    preview_filename,
    prune,
    sanitize,
)
from .utils.config_loader import load_content_config

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ContentConfig",
    "ContentEntry",
    "ContentSchemaError",
    "FieldDefinition",
    "FieldNotFoundError",
    "FieldType",
    "FilenameError",
    "ValueNotFoundError",
    "create_model",
    "generate_filename",
    "get_default_value",
    "get_schema_by_name",
    "get_schema_by_path",
    "load_content_config",
    "preview_filename",
    "prune",
    "sanitize",
]
