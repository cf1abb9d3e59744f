from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional
import logging
import random
import time

import httpx
from notion_client import Client
from notion_client.errors import APIResponseError, HTTPResponseError, RequestTimeoutError

from core.envelope import Envelope, ErrorKind, failure, success

logger = logging.getLogger(__name__)

RETRIABLE_CODES = {"rate_limited", "internal_server_error", "service_unavailable"}

# Transport errors from httpx are not wrapped by the SDK
NOTION_ERRORS = (RequestTimeoutError, APIResponseError, HTTPResponseError, httpx.TransportError)


def _is_retriable(exc: Exception) -> bool:
    if isinstance(exc, (RequestTimeoutError, httpx.TransportError)):
        return True
    if isinstance(exc, APIResponseError):
        return _error_code(exc) in RETRIABLE_CODES
    if isinstance(exc, HTTPResponseError):
        status = getattr(exc, "status", 0) or 0
        return status == 429 or 500 <= status < 600
    return False


def _error_code(exc: Exception) -> str:
    if isinstance(exc, RequestTimeoutError):
        return "request_timeout"
    if isinstance(exc, httpx.TransportError):
        return "network_error"
    if isinstance(exc, APIResponseError) and getattr(exc, "code", None):
        code = exc.code
        return str(getattr(code, "value", code))
    return f"http_{getattr(exc, 'status', 'error')}"


class NotionClient:
    """Read-only access to the blog database.

    Every public method returns an envelope instead of raising; SDK errors
    become ``BACKEND_FAILURE`` failures carrying the Notion error code.
    """

    def __init__(
        self,
        token: str,
        database_id: str,
        *,
        notion_version: str = "2022-06-28",
        timeout: float = 30.0,
        max_retries: int = 3,
        backoff: float = 0.8,
        fetch_children: bool = False,
        client: Any = None,
    ) -> None:
        self.database_id = database_id
        self.max_retries = max(int(max_retries), 1)
        self.backoff = backoff
        self.fetch_children = fetch_children
        self.client = client or Client(
            auth=token,
            notion_version=notion_version,
            timeout_ms=int(timeout * 1000),
        )

    @classmethod
    def from_config(cls, cfg) -> "NotionClient":  # noqa: ANN001
        return cls(
            cfg.notion_token or "",
            cfg.notion_database_id or "",
            notion_version=cfg.notion_version,
            timeout=cfg.notion_timeout,
            max_retries=cfg.notion_max_retries,
            fetch_children=cfg.notion_fetch_children,
        )

    # --- Request helpers --------------------------------------------------
    def _call(self, fn: Callable[..., Dict[str, Any]], **kwargs: Any) -> Dict[str, Any]:
        """Call the SDK with light retry on timeouts, network errors, 429 and 5xx."""
        for attempt in range(1, self.max_retries + 1):
            try:
                return fn(**kwargs)
            except NOTION_ERRORS as e:
                if not _is_retriable(e) or attempt >= self.max_retries:
                    raise
                # exponential backoff with jitter
                sleep = (2 ** (attempt - 1)) * self.backoff + random.uniform(0, self.backoff / 2)
                logger.debug("retry %s/%s after %s (sleep=%.2fs)", attempt, self.max_retries, _error_code(e), sleep)
                time.sleep(sleep)
        raise RuntimeError("unreachable")  # pragma: no cover

    def _collect(self, fn: Callable[..., Dict[str, Any]], page_size: int = 100, **kwargs: Any) -> List[Dict[str, Any]]:
        items: List[Dict[str, Any]] = []
        start_cursor: Optional[str] = None
        while True:
            params: Dict[str, Any] = dict(kwargs, page_size=page_size)
            if start_cursor:
                params["start_cursor"] = start_cursor
            res = self._call(fn, **params)
            items.extend(res.get("results", []))
            if not res.get("has_more"):
                break
            start_cursor = res.get("next_cursor")
        return items

    def _guard(self, action: str, fn: Callable[[], Any]) -> Envelope[Any]:
        try:
            return success(fn())
        except NOTION_ERRORS as e:
            code = _error_code(e)
            logger.warning("%s failed: code=%s error=%s", action, code, e)
            return failure(str(e) or f"Notion request failed ({code})", ErrorKind.BACKEND_FAILURE, code=code)

    def _attach_children(self, blocks: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        out: List[Dict[str, Any]] = []
        for blk in blocks:
            if blk.get("has_children") and blk.get("id"):
                # Child pages are separate posts, not part of this body
                if blk.get("type") not in {"child_page", "child_database"}:
                    blk = dict(blk)
                    children = self._collect(self.client.blocks.children.list, block_id=blk["id"])
                    blk["children"] = self._attach_children(children)
            out.append(blk)
        return out

    # --- Resources --------------------------------------------------------
    def get_posts(self) -> Envelope[Dict[str, Any]]:
        """All pages of the blog database, in Notion's query order."""

        def _query() -> Dict[str, Any]:
            results = self._collect(self.client.databases.query, database_id=self.database_id)
            logger.debug("queried database=%s pages=%s", self.database_id, len(results))
            return {"results": results}

        return self._guard("get_posts", _query)

    def get_post(self, page_id: str) -> Envelope[Dict[str, Any]]:
        return self._guard("get_post", lambda: self._call(self.client.pages.retrieve, page_id=page_id))

    def get_blocks(self, page_id: str) -> Envelope[Dict[str, Any]]:
        def _list() -> Dict[str, Any]:
            results = self._collect(self.client.blocks.children.list, block_id=page_id)
            if self.fetch_children:
                results = self._attach_children(results)
            return {"results": results}

        return self._guard("get_blocks", _list)

    def get_database(self) -> Envelope[Dict[str, Any]]:
        return self._guard(
            "get_database",
            lambda: self._call(self.client.databases.retrieve, database_id=self.database_id),
        )
