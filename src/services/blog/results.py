"""Structured results returned to the rendering layer."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from integrations.notion.blocks import Block

__all__ = ["PostParams", "PostProps", "PostSummary", "PostMeta", "BlogPost"]


@dataclass(frozen=True)
class PostParams:
    slug: str


@dataclass(frozen=True)
class PostProps:
    id: str
    title: str


@dataclass(frozen=True)
class PostSummary:
    params: PostParams
    props: PostProps

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PostMeta:
    title: str
    description: str


@dataclass(frozen=True)
class BlogPost:
    id: str
    title: str
    meta: PostMeta
    blocks: List[Block] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
