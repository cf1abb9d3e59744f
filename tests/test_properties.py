import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from integrations.notion.properties import (
    Checkbox,
    Missing,
    OtherType,
    RichText,
    Title,
    join_rich_plain_text,
    read_property,
    rich_text_or,
    title_or,
)

from notion_payloads import rich


def _page(**props):
    return {"object": "page", "id": "p", "properties": props}


def test_join_rich_plain_text_uses_single_space() -> None:
    assert join_rich_plain_text(rich("Hello", "world")) == "Hello world"


def test_join_rich_plain_text_empty() -> None:
    assert join_rich_plain_text([]) == ""


def test_read_checkbox() -> None:
    pg = _page(Published={"type": "checkbox", "checkbox": True})
    assert read_property(pg, "Published") == Checkbox(True)


def test_read_rich_text_and_title() -> None:
    pg = _page(
        Slug={"type": "rich_text", "rich_text": rich("a")},
        Post={"type": "title", "title": rich("b")},
    )
    assert isinstance(read_property(pg, "Slug"), RichText)
    assert isinstance(read_property(pg, "Post"), Title)


def test_read_missing_and_other_type() -> None:
    pg = _page(Count={"type": "number", "number": 1})
    assert read_property(pg, "Slug") == Missing("Slug")
    assert read_property(pg, "Count") == OtherType("Count", "number")
    assert read_property({"object": "page"}, "Slug") == Missing("Slug")


def test_fallbacks_apply_on_type_mismatch() -> None:
    pg = _page(
        Slug={"type": "title", "title": rich("wrong")},
        Post={"type": "rich_text", "rich_text": rich("wrong")},
    )
    assert rich_text_or(read_property(pg, "Slug"), "") == ""
    assert title_or(read_property(pg, "Post"), "fallback") == "fallback"


def test_non_dict_runs_are_ignored() -> None:
    pg = _page(Slug={"type": "rich_text", "rich_text": [None, {"plain_text": "ok"}]})
    assert rich_text_or(read_property(pg, "Slug"), "") == "ok"
