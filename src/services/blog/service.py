"""Blog listing and post retrieval on top of the Notion client."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Protocol

from notion_client.helpers import is_full_block, is_full_page

from core.config import Config, PropertyNames
from core.envelope import Envelope, ErrorKind, GENERIC_FAILURE_REASON, failure, success
from integrations.notion.blocks import Block, map_notion_blocks
from integrations.notion.client import NotionClient
from integrations.notion.properties import Checkbox, read_property, rich_text_or, title_or

from .results import BlogPost, PostMeta, PostParams, PostProps, PostSummary

__all__ = ["Blog", "BlogBackend", "PublishedPropertyError"]

logger = logging.getLogger(__name__)


class BlogBackend(Protocol):
    def get_posts(self) -> Envelope[Dict[str, Any]]: ...

    def get_post(self, page_id: str) -> Envelope[Dict[str, Any]]: ...

    def get_blocks(self, page_id: str) -> Envelope[Dict[str, Any]]: ...


class PublishedPropertyError(Exception):
    """The configured published property is not a checkbox."""


class Blog:
    """Adapts Notion pages into ``PostSummary`` / ``BlogPost`` values.

    Both public methods always return an envelope. Backend failures are
    passed through unchanged; anything else becomes a generic ``UNKNOWN``
    failure whose cause is only logged.
    """

    def __init__(
        self,
        notion: BlogBackend,
        *,
        properties: Optional[PropertyNames] = None,
        is_dev: bool = False,
        block_mapper: Callable[[List[Dict[str, Any]]], List[Block]] = map_notion_blocks,
    ) -> None:
        self.notion = notion
        self.properties = properties or PropertyNames()
        self.is_dev = is_dev
        self.block_mapper = block_mapper

    @classmethod
    def from_config(cls, cfg: Config) -> "Blog":
        return cls(
            NotionClient.from_config(cfg),
            properties=cfg.property_names(),
            is_dev=cfg.is_dev,
        )

    def _is_listed(self, page: Dict[str, Any]) -> bool:
        published = read_property(page, self.properties.published)
        if not isinstance(published, Checkbox):
            logger.error(
                "Published attribute must be a checkbox, is %s instead. Check the value of PUBLISHED_PROPERTY. page=%s",
                getattr(published, "type", "missing"),
                page.get("id"),
            )
            raise PublishedPropertyError("Published attribute is not a checkbox")
        return True if self.is_dev else published.checked

    def _summarize(self, page: Dict[str, Any]) -> PostSummary:
        title = title_or(read_property(page, self.properties.post), "")
        slug = rich_text_or(read_property(page, self.properties.slug), "")
        return PostSummary(params=PostParams(slug=slug), props=PostProps(id=page["id"], title=title))

    def get_posts_paths(self) -> Envelope[List[PostSummary]]:
        try:
            response = self.notion.get_posts()
            if not response.ok:
                return response

            pages = [p for p in response.data.get("results", []) if isinstance(p, dict) and is_full_page(p)]
            pages = [p for p in pages if self._is_listed(p)]
            logger.debug("listed pages=%s dev=%s", len(pages), self.is_dev)

            paths = [self._summarize(p) for p in pages]
            logger.debug("returning paths=%s", [p.params.slug for p in paths])
            return success(paths)
        except Exception:
            logger.exception("Failed to get posts paths")
            return failure(GENERIC_FAILURE_REASON, ErrorKind.UNKNOWN)

    def get_post(self, page_id: str) -> Envelope[BlogPost]:
        try:
            post_response = self.notion.get_post(page_id)
            if not post_response.ok:
                return post_response

            page = post_response.data
            if not isinstance(page, dict) or not is_full_page(page):
                logger.error("Failed to read blog post id=%s", page_id)
                return failure(GENERIC_FAILURE_REASON, ErrorKind.UNKNOWN)

            blocks_response = self.notion.get_blocks(page_id)
            if not blocks_response.ok:
                return blocks_response

            blocks = [b for b in blocks_response.data.get("results", []) if isinstance(b, dict) and is_full_block(b)]
            logger.debug("post id=%s blocks=%s", page_id, len(blocks))

            title = title_or(read_property(page, self.properties.post), "")
            meta_title = rich_text_or(read_property(page, self.properties.meta_title), title)
            meta_description = rich_text_or(read_property(page, self.properties.meta_description), "")

            post = BlogPost(
                id=page["id"],
                title=title,
                meta=PostMeta(title=meta_title, description=meta_description),
                blocks=self.block_mapper(blocks),
            )
            return success(post)
        except Exception:
            logger.exception("Failed to get blog post id=%s", page_id)
            return failure(GENERIC_FAILURE_REASON, ErrorKind.UNKNOWN)
