from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Callable, NamedTuple, Optional, TypeVar

from dotenv import load_dotenv

load_dotenv()

N = TypeVar("N", int, float)


def _env_number(name: str, default: N, cast: Callable[[str], N]) -> N:
    """Numeric env value; unset, blank or malformed values keep the default."""
    raw = (os.getenv(name) or "").strip()
    try:
        return cast(raw) if raw else default
    except ValueError:
        return default


def _env_name(name: str, default: str) -> str:
    # Property names may contain spaces but never be blank
    return (os.getenv(name) or "").strip() or default


def _flag(key: str, default: str = "0") -> bool:
    raw = os.getenv(key, default)
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class PropertyNames(NamedTuple):
    """Names of the Notion database properties the blog reads."""

    published: str = "Published"
    slug: str = "Slug"
    post: str = "Post"
    meta_title: str = "Meta Title"
    meta_description: str = "Meta Description"


@dataclass
class Config:
    notion_token: Optional[str] = None
    notion_database_id: Optional[str] = None

    # Pinned so property/block payload shapes stay stable across SDK upgrades
    notion_version: str = "2022-06-28"
    notion_timeout: float = 30.0
    notion_max_retries: int = 3
    # Attach nested children (toggles, nested lists) under each block
    notion_fetch_children: bool = False

    published_property: str = "Published"
    slug_property: str = "Slug"
    post_property: str = "Post"
    meta_title_property: str = "Meta Title"
    meta_description_property: str = "Meta Description"

    # Dev mode lists draft (unpublished) posts too
    is_dev: bool = False
    log_level: str = "INFO"

    def property_names(self) -> PropertyNames:
        return PropertyNames(
            published=self.published_property,
            slug=self.slug_property,
            post=self.post_property,
            meta_title=self.meta_title_property,
            meta_description=self.meta_description_property,
        )


REQUIRED_KEYS = [
    "NOTION_TOKEN",
    "NOTION_DATABASE_ID",
]


def load_config() -> Config:
    cfg = Config(
        notion_token=os.getenv("NOTION_TOKEN"),
        notion_database_id=os.getenv("NOTION_DATABASE_ID"),
        notion_version=os.getenv("NOTION_VERSION", "2022-06-28"),
        notion_timeout=_env_number("NOTION_TIMEOUT", 30.0, float),
        notion_max_retries=max(_env_number("NOTION_MAX_RETRIES", 3, int), 1),
        notion_fetch_children=_flag("NOTION_FETCH_CHILDREN", "0"),
        published_property=_env_name("PUBLISHED_PROPERTY", "Published"),
        slug_property=_env_name("SLUG_PROPERTY", "Slug"),
        post_property=_env_name("POST_PROPERTY", "Post"),
        meta_title_property=_env_name("META_TITLE_PROPERTY", "Meta Title"),
        meta_description_property=_env_name("META_DESCRIPTION_PROPERTY", "Meta Description"),
        is_dev=_flag("BLOG_DEV", "0"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
    return cfg


def validate_config(cfg: Config) -> list[str]:
    missing: list[str] = []
    if not cfg.notion_token:
        missing.append("NOTION_TOKEN")
    if not cfg.notion_database_id:
        missing.append("NOTION_DATABASE_ID")
    return missing
