import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from core.envelope import ErrorKind, failure, success  # type: ignore
from services.blog import Blog, PostSummary  # type: ignore

from notion_payloads import page, partial_page, rich


class DummyNotion:
    def __init__(self, pages=None, posts_response=None):
        self.pages = pages or []
        self.posts_response = posts_response
        self.calls: list[str] = []

    def get_posts(self):
        self.calls.append("get_posts")
        if self.posts_response is not None:
            return self.posts_response
        return success({"results": self.pages})

    def get_post(self, page_id: str):  # noqa: ARG002
        raise AssertionError("listing must not fetch single pages")

    def get_blocks(self, page_id: str):  # noqa: ARG002
        raise AssertionError("listing must not fetch blocks")


def _slugs(res):
    return [p.params.slug for p in res.data]


def test_production_lists_only_checked_pages():
    notion = DummyNotion([
        page("p1", slug="first", published=True),
        page("p2", slug="draft", published=False),
        page("p3", slug="third", published=True),
    ])
    res = Blog(notion).get_posts_paths()
    assert res.ok
    assert _slugs(res) == ["first", "third"]


def test_dev_mode_lists_drafts_too():
    notion = DummyNotion([
        page("p1", slug="first", published=True),
        page("p2", slug="draft", published=False),
    ])
    res = Blog(notion, is_dev=True).get_posts_paths()
    assert res.ok
    assert _slugs(res) == ["first", "draft"]


def test_summary_shape_matches_routing_contract():
    notion = DummyNotion([page("p1", title="Hello", slug="hello-world")])
    res = Blog(notion).get_posts_paths()
    summary = res.data[0]
    assert isinstance(summary, PostSummary)
    assert summary.to_dict() == {"params": {"slug": "hello-world"}, "props": {"id": "p1", "title": "Hello"}}


def test_published_not_checkbox_fails_whole_listing():
    wrong = {"id": "pub", "type": "rich_text", "rich_text": rich("yes")}
    notion = DummyNotion([
        page("p1", published=True),
        page("p2", published=wrong),
    ])
    res = Blog(notion).get_posts_paths()
    assert res.ok is False
    assert res.kind == ErrorKind.UNKNOWN
    assert res.reason == "Something went wrong"
    assert res.code is None


def test_missing_published_property_is_fatal_even_in_dev():
    notion = DummyNotion([page("p1", published=None)])
    res = Blog(notion, is_dev=True).get_posts_paths()
    assert res.ok is False
    assert res.kind == ErrorKind.UNKNOWN


def test_slug_with_wrong_type_falls_back_to_empty_string():
    wrong_slug = {"Slug": {"id": "slug", "type": "number", "number": 3}}
    notion = DummyNotion([page("p1", slug=None, extra=wrong_slug)])
    res = Blog(notion).get_posts_paths()
    assert res.ok
    assert res.data[0].params.slug == ""
    assert res.data[0].props.title == "Post"


def test_title_with_wrong_type_falls_back_to_empty_string():
    notion = DummyNotion([page("p1", title=None)])
    res = Blog(notion).get_posts_paths()
    assert res.ok
    assert res.data[0].props.title == ""


def test_multi_run_values_are_space_joined():
    p = page("p1")
    p["properties"]["Post"]["title"] = rich("Hello", "world")
    res = Blog(DummyNotion([p])).get_posts_paths()
    assert res.data[0].props.title == "Hello world"


def test_partial_pages_are_dropped_without_failing():
    notion = DummyNotion([
        partial_page("p0"),
        page("p1", slug="kept"),
        "not-a-page",
    ])
    res = Blog(notion).get_posts_paths()
    assert res.ok
    assert _slugs(res) == ["kept"]


def test_backend_failure_passes_through_unchanged():
    backend = failure("Could not find database", ErrorKind.BACKEND_FAILURE, code="object_not_found")
    res = Blog(DummyNotion(posts_response=backend)).get_posts_paths()
    assert res is backend


def test_unexpected_exception_becomes_unknown_failure():
    class Exploding(DummyNotion):
        def get_posts(self):
            raise RuntimeError("boom")

    res = Blog(Exploding()).get_posts_paths()
    assert res.ok is False
    assert res.kind == ErrorKind.UNKNOWN


def test_custom_property_names_are_honoured():
    from core.config import PropertyNames  # type: ignore

    p = {
        "object": "page",
        "id": "p1",
        "url": "https://www.notion.so/p1",
        "properties": {
            "Live": {"type": "checkbox", "checkbox": True},
            "Path": {"type": "rich_text", "rich_text": rich("custom")},
            "Name": {"type": "title", "title": rich("Named")},
        },
    }
    names = PropertyNames(published="Live", slug="Path", post="Name")
    res = Blog(DummyNotion([p]), properties=names).get_posts_paths()
    assert res.ok
    assert res.data[0].to_dict() == {"params": {"slug": "custom"}, "props": {"id": "p1", "title": "Named"}}


def test_empty_database_is_a_successful_empty_listing():
    res = Blog(DummyNotion([])).get_posts_paths()
    assert res.ok
    assert res.data == []
