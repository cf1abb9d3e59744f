"""Map raw Notion blocks to the renderer-facing ``Block`` tree.

Supported:
- paragraph, heading_1/2/3, quote, toggle -> text blocks
- callout -> text block with emoji icon
- to_do -> text block with checked flag
- code -> text block with language
- divider
- image (file or external) -> url + caption
- bookmark/embed/video -> url + caption
Consecutive bulleted/numbered list items are grouped under a synthetic
``bulleted_list`` / ``numbered_list`` parent. Other block types are skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

__all__ = ["TextRun", "Block", "map_notion_blocks", "map_rich_text"]

logger = logging.getLogger(__name__)

TEXT_TYPES = {
    "paragraph",
    "heading_1",
    "heading_2",
    "heading_3",
    "quote",
    "toggle",
    "callout",
    "to_do",
    "code",
}
MEDIA_TYPES = {"image", "bookmark", "embed", "video"}
LIST_GROUPS = {
    "bulleted_list_item": "bulleted_list",
    "numbered_list_item": "numbered_list",
}


@dataclass(frozen=True)
class TextRun:
    text: str
    href: Optional[str] = None
    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    code: bool = False
    color: str = "default"


@dataclass(frozen=True)
class Block:
    type: str
    id: Optional[str] = None
    rich_text: List[TextRun] = field(default_factory=list)
    children: List["Block"] = field(default_factory=list)
    url: Optional[str] = None
    caption: List[TextRun] = field(default_factory=list)
    language: Optional[str] = None
    checked: Optional[bool] = None
    icon: Optional[str] = None


def map_rich_text(runs: Any) -> List[TextRun]:
    out: List[TextRun] = []
    if not isinstance(runs, list):
        return out
    for run in runs:
        if not isinstance(run, dict):
            continue
        ann = run.get("annotations") or {}
        out.append(
            TextRun(
                text=str(run.get("plain_text") or ""),
                href=run.get("href"),
                bold=bool(ann.get("bold", False)),
                italic=bool(ann.get("italic", False)),
                strikethrough=bool(ann.get("strikethrough", False)),
                underline=bool(ann.get("underline", False)),
                code=bool(ann.get("code", False)),
                color=str(ann.get("color") or "default"),
            )
        )
    return out


def _media_url(value: Dict[str, Any]) -> Optional[str]:
    # image/video carry {"type": "file"|"external", ...}; bookmark/embed a bare url
    if value.get("url"):
        return str(value["url"])
    for key in ("external", "file"):
        src = value.get(key)
        if isinstance(src, dict) and src.get("url"):
            return str(src["url"])
    return None


def _map_one(raw: Dict[str, Any]) -> Optional[Block]:
    btype = raw.get("type")
    value = raw.get(btype) if isinstance(btype, str) else None
    if not isinstance(value, dict):
        value = {}
    children = map_notion_blocks(raw.get("children") or [])
    bid = raw.get("id")

    if btype == "divider":
        return Block(type="divider", id=bid)
    if btype in TEXT_TYPES:
        icon = None
        if btype == "callout":
            ic = value.get("icon")
            if isinstance(ic, dict) and ic.get("type") == "emoji":
                icon = ic.get("emoji")
        return Block(
            type=btype,
            id=bid,
            rich_text=map_rich_text(value.get("rich_text")),
            children=children,
            language=value.get("language") if btype == "code" else None,
            checked=bool(value.get("checked")) if btype == "to_do" else None,
            icon=icon,
        )
    if btype in LIST_GROUPS:
        return Block(
            type=btype,
            id=bid,
            rich_text=map_rich_text(value.get("rich_text")),
            children=children,
        )
    if btype in MEDIA_TYPES:
        url = _media_url(value)
        if not url:
            logger.debug("skip %s block %s without url", btype, bid)
            return None
        return Block(type=btype, id=bid, url=url, caption=map_rich_text(value.get("caption")))
    logger.debug("skip unsupported block type=%s id=%s", btype, bid)
    return None


def map_notion_blocks(raw_blocks: Iterable[Dict[str, Any]]) -> List[Block]:
    blocks: List[Block] = []
    # open list run: (group type, items gathered so far)
    pending: Optional[str] = None
    items: List[Block] = []

    def _close() -> None:
        nonlocal pending, items
        if pending:
            blocks.append(Block(type=pending, children=items))
        pending, items = None, []

    for raw in raw_blocks or []:
        if not isinstance(raw, dict):
            continue
        block = _map_one(raw)
        if block is None:
            continue
        group = LIST_GROUPS.get(block.type)
        if group != pending:
            _close()
            pending = group
        if group:
            items.append(block)
        else:
            blocks.append(block)
    _close()
    return blocks
