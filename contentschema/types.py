"""Common type definitions for contentschema.

This module provides type aliases for commonly used types across the package,
improving type safety and reducing repetition.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any

# Content records
type ContentModel = dict[str, Any]
type RawContent = dict[str, Any]

# Returns the current local date and time
type Clock = Callable[[], datetime]
