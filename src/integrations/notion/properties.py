"""Typed access to the dynamic property map of a Notion page.

Notion does not guarantee that a configured property exists, nor that it has
the type the blog expects. ``read_property`` therefore never returns the raw
payload: it returns one of the variants below and callers pick the fallback
that fits the field.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Union

__all__ = [
    "Checkbox",
    "RichText",
    "Title",
    "Missing",
    "OtherType",
    "PropertyValue",
    "read_property",
    "join_rich_plain_text",
    "rich_text_or",
    "title_or",
]


@dataclass(frozen=True)
class Checkbox:
    checked: bool


@dataclass(frozen=True)
class RichText:
    runs: List[Dict[str, Any]]


@dataclass(frozen=True)
class Title:
    runs: List[Dict[str, Any]]


@dataclass(frozen=True)
class Missing:
    name: str


@dataclass(frozen=True)
class OtherType:
    name: str
    type: str


PropertyValue = Union[Checkbox, RichText, Title, Missing, OtherType]


def _runs(value: Any) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [x for x in value if isinstance(x, dict)]


def read_property(page: Dict[str, Any], name: str) -> PropertyValue:
    props = page.get("properties")
    if not isinstance(props, dict):
        return Missing(name)
    meta = props.get(name)
    if not isinstance(meta, dict):
        return Missing(name)
    ptype = meta.get("type")
    if ptype == "checkbox":
        return Checkbox(bool(meta.get("checkbox")))
    if ptype == "rich_text":
        return RichText(_runs(meta.get("rich_text")))
    if ptype == "title":
        return Title(_runs(meta.get("title")))
    return OtherType(name, str(ptype))


def join_rich_plain_text(runs: List[Dict[str, Any]]) -> str:
    # Single-space join; inline formatting boundaries are not preserved
    return " ".join(str(r.get("plain_text") or "") for r in runs)


def rich_text_or(value: PropertyValue, default: str) -> str:
    if isinstance(value, RichText):
        return join_rich_plain_text(value.runs)
    return default


def title_or(value: PropertyValue, default: str) -> str:
    if isinstance(value, Title):
        return join_rich_plain_text(value.runs)
    return default
