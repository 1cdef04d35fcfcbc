"""Shared fixtures for contentschema tests."""

from datetime import datetime

import pytest

from contentschema.models import ContentConfig, ContentEntry, FieldDefinition
from contentschema.types import Clock

FIXED_NOW = datetime(2024, 3, 7, 9, 5, 1)


@pytest.fixture
def fixed_clock() -> Clock:
    """Clock pinned to 2024-03-07 09:05:01."""
    return lambda: FIXED_NOW


@pytest.fixture
def post_fields() -> list[FieldDefinition]:
    """Field list of a blog post schema covering every default branch."""
    return [
        FieldDefinition.model_validate(field)
        for field in [
            {"name": "title", "type": "string"},
            {"name": "draft", "type": "boolean"},
            {"name": "date", "type": "date"},
            {"name": "rating", "type": "number"},
            {"name": "layout", "default": "post"},
            {
                "name": "author",
                "type": "object",
                "fields": [
                    {"name": "name"},
                    {"name": "active", "type": "boolean"},
                ],
            },
            {"name": "tags", "list": True},
            {
                "name": "links",
                "type": "object",
                "list": True,
                "fields": [{"name": "label"}, {"name": "url"}],
            },
        ]
    ]


@pytest.fixture
def post_schema(post_fields: list[FieldDefinition]) -> ContentEntry:
    """Blog post content schema."""
    return ContentEntry(name="posts", path="content/posts", fields=post_fields)


@pytest.fixture
def content_config() -> ContentConfig:
    """Content configuration with nested paths and a pathless entry."""
    return ContentConfig.model_validate(
        {
            "content": [
                {"name": "content", "path": "/content/", "fields": [{"name": "title"}]},
                {"name": "posts", "path": "content/posts", "fields": [{"name": "title"}]},
                {"name": "drafts", "path": "content/posts/drafts", "fields": [{"name": "title"}]},
                {"name": "posts-copy", "path": "content//posts/", "fields": [{"name": "body"}]},
                {"name": "settings", "type": "file", "fields": [{"name": "site"}]},
            ]
        }
    )
