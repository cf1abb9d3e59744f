"""Utilities for reading the blog from Notion."""

from .client import NotionClient  # noqa: F401
from .blocks import Block, TextRun, map_notion_blocks  # noqa: F401
from .properties import (
    join_rich_plain_text,
    read_property,
    rich_text_or,
    title_or,
)  # noqa: F401
from .schema import PropertyCheck, inspect_schema  # noqa: F401
