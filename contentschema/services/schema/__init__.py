"""
Schema services: model construction, pruning, schema lookup and filename generation.
"""

from .filename import generate_filename, iter_pattern_tokens, preview_filename, resolve_model_value
from .model_builder import create_model, get_default_value
from .resolver import get_schema_by_name, get_schema_by_path, normalize_path
from .sanitizer import prune, sanitize

__all__ = [
    "create_model",
    "generate_filename",
    "get_default_value",
    "get_schema_by_name",
    "get_schema_by_path",
    "iter_pattern_tokens",
    "normalize_path",
    "preview_filename",
    "prune",
    "resolve_model_value",
    "sanitize",
]
