import sys
from pathlib import Path

from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from app.server import create_app  # type: ignore
from core.envelope import ErrorKind, failure, success  # type: ignore
from services.blog import Blog  # type: ignore

from notion_payloads import page, paragraph


class DummyNotion:
    def __init__(self, pages=None, blocks=None, *, fail=None):
        self.pages = pages or []
        self.blocks = blocks or []
        self.fail = fail

    def get_posts(self):
        if self.fail is not None:
            return self.fail
        return success({"results": self.pages})

    def get_post(self, page_id: str):
        if self.fail is not None:
            return self.fail
        for p in self.pages:
            if p["id"] == page_id:
                return success(p)
        return failure("Could not find page", ErrorKind.BACKEND_FAILURE, code="object_not_found")

    def get_blocks(self, page_id: str):  # noqa: ARG002
        return success({"results": self.blocks})


def _client(notion, **kwargs):
    return TestClient(create_app(Blog(notion, **kwargs)))


def test_healthz():
    assert _client(DummyNotion()).get("/healthz").json() == {"status": "ok"}


def test_list_posts():
    notion = DummyNotion([page("p1", title="One", slug="one"), page("p2", published=False)])
    resp = _client(notion).get("/api/posts")
    assert resp.status_code == 200
    assert resp.json() == {"items": [{"params": {"slug": "one"}, "props": {"id": "p1", "title": "One"}}]}


def test_get_post():
    notion = DummyNotion([page("p1", title="One", meta_description="desc")], [paragraph("Body", "b1")])
    resp = _client(notion).get("/api/posts/p1")
    assert resp.status_code == 200
    body = resp.json()
    assert body["meta"] == {"title": "One", "description": "desc"}
    assert body["blocks"][0]["type"] == "paragraph"
    assert body["blocks"][0]["rich_text"][0]["text"] == "Body"


def test_missing_post_is_404():
    resp = _client(DummyNotion([])).get("/api/posts/nope")
    assert resp.status_code == 404


def test_backend_failure_is_502():
    fail = failure("Service unavailable", ErrorKind.BACKEND_FAILURE, code="service_unavailable")
    resp = _client(DummyNotion(fail=fail)).get("/api/posts")
    assert resp.status_code == 502
    assert resp.json()["detail"] == "Service unavailable"


def test_schema_error_is_500_with_generic_detail():
    wrong = {"type": "select", "select": {"name": "yes"}}
    resp = _client(DummyNotion([page("p1", published=wrong)])).get("/api/posts")
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Something went wrong"
