"""
Loading of content configurations from files.

Supports JSON (``.json``) and TOML (``.toml``) files shaped like
``{"content": [{"name": ..., "path": ..., "fields": [...]}]}``.
"""

import json
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from contentschema.exceptions import ConfigError
from contentschema.models import ContentConfig
from contentschema.utils.logger import logger


def _read_json(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _read_toml(path: Path) -> Any:
    with open(path, "rb") as f:
        return tomllib.load(f)


READERS = {".json": _read_json, ".toml": _read_toml}


def load_content_config(file_path: str | Path) -> ContentConfig:
    """
    Load a content configuration from a JSON or TOML file.

    Args:
        file_path: Path to the configuration file.

    Returns:
        The validated content configuration.

    Raises:
        ConfigError: If the file is missing, has an unsupported suffix,
            cannot be parsed or does not describe a valid configuration.
    """
    path = Path(file_path)
    if not path.is_file():
        raise ConfigError(f"Content config file not found: {path}")

    reader = READERS.get(path.suffix.lower())
    if reader is None:
        raise ConfigError(f"Unsupported content config format '{path.suffix}': {path}")

    try:
        data = reader(path)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot parse content config {path}: {e}") from e

    try:
        config = ContentConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid content config {path}: {e}") from e

    logger.debug(f"Loaded {len(config.content)} content schemas from {path}")
    return config
