#!/usr/bin/env python3
"""contentschema CLI - build content models and filenames from a content config.

Reads the content configuration from a JSON or TOML file and writes results
to stdout. Domain errors are logged and exit with status 1.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from contentschema.exceptions import ContentSchemaError
from contentschema.models import ContentConfig, ContentEntry
from contentschema.services.schema import (
    create_model,
    get_schema_by_name,
    get_schema_by_path,
    preview_filename,
    sanitize,
)
from contentschema.settings import settings
from contentschema.types import ContentModel, RawContent
from contentschema.utils.config_loader import load_content_config
from contentschema.utils.logger import logger, setup_logging


def read_content(path: str | None) -> RawContent:
    """Read raw content from a JSON file, or ``-`` for stdin."""
    if path is None:
        return {}
    try:
        if path == "-":
            data = json.load(sys.stdin)
        else:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ContentSchemaError(f"Cannot read content from {path}: {e}") from e
    if not isinstance(data, dict):
        raise ContentSchemaError(f"Content in {path} must be a JSON object")
    return data


def select_entry(config: ContentConfig, path: str | None, name: str | None) -> ContentEntry:
    """Pick the schema entry by file path or by name."""
    entry = get_schema_by_path(config, path) if path else get_schema_by_name(config, name or "")
    if entry is None:
        raise ContentSchemaError(f"No content schema found for {path or name!r}")
    return entry


def build_model(entry: ContentEntry, content_file: str | None, strip: bool = False) -> ContentModel:
    """Build the model of ``entry`` from a content file, optionally pruned."""
    model = create_model(entry.fields, read_content(content_file))
    if strip:
        sanitize(model)
    return model


def print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def add_entry_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the mutually exclusive --path/--name schema selectors."""
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--path", type=str, help="File path used to find the deepest matching schema")
    group.add_argument("--name", type=str, help="Name of the schema")


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="contentschema", description="Content models, schema lookup and filename patterns"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=settings.config_file,
        help=f"Content config file, JSON or TOML (default: {settings.config_file})",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # resolve command
    resolve_parser = subparsers.add_parser("resolve", help="Show the schema matching a file path")
    resolve_parser.add_argument("path", help="File path to resolve")

    # model command
    model_parser = subparsers.add_parser("model", help="Build a content model")
    add_entry_arguments(model_parser)
    model_parser.add_argument("--content", type=str, default=None, help="JSON content file, - for stdin")
    model_parser.add_argument(
        "--sanitize", action="store_true", help="Remove empty values from the model"
    )

    # filename command
    filename_parser = subparsers.add_parser("filename", help="Generate a filename for content")
    add_entry_arguments(filename_parser)
    filename_parser.add_argument("--content", type=str, required=True, help="JSON content file, - for stdin")
    filename_parser.add_argument(
        "--pattern", type=str, default=None, help="Filename pattern (default: schema or settings pattern)"
    )

    args = parser.parse_args(argv)
    setup_logging(settings)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        config = load_content_config(args.config)

        if args.command == "resolve":
            entry = get_schema_by_path(config, args.path)
            if entry is None:
                logger.error(f"No content schema matches path '{args.path}'")
                sys.exit(1)
            print_json(entry.model_dump(by_alias=True, exclude_unset=True))
        elif args.command == "model":
            entry = select_entry(config, args.path, args.name)
            print_json(build_model(entry, args.content, args.sanitize))
        elif args.command == "filename":
            entry = select_entry(config, args.path, args.name)
            model = build_model(entry, args.content)
            print(preview_filename(entry, model, pattern=args.pattern))
    except ContentSchemaError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
