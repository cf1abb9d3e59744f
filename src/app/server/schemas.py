"""Pydantic response models for the blog API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

__all__ = [
    "TextRunResponse",
    "BlockResponse",
    "PostParamsResponse",
    "PostPropsResponse",
    "PostSummaryResponse",
    "PostCollectionResponse",
    "PostMetaResponse",
    "BlogPostResponse",
]


class TextRunResponse(BaseModel):
    text: str
    href: Optional[str] = None
    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    code: bool = False
    color: str = "default"


class BlockResponse(BaseModel):
    type: str
    id: Optional[str] = None
    rich_text: List[TextRunResponse] = Field(default_factory=list)
    children: List["BlockResponse"] = Field(default_factory=list)
    url: Optional[str] = None
    caption: List[TextRunResponse] = Field(default_factory=list)
    language: Optional[str] = None
    checked: Optional[bool] = None
    icon: Optional[str] = None


BlockResponse.model_rebuild()


class PostParamsResponse(BaseModel):
    slug: str


class PostPropsResponse(BaseModel):
    id: str
    title: str


class PostSummaryResponse(BaseModel):
    params: PostParamsResponse
    props: PostPropsResponse


class PostCollectionResponse(BaseModel):
    items: List[PostSummaryResponse]


class PostMetaResponse(BaseModel):
    title: str
    description: str


class BlogPostResponse(BaseModel):
    id: str
    title: str
    meta: PostMetaResponse
    blocks: List[BlockResponse] = Field(default_factory=list)
