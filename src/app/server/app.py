from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

SRC_ROOT = Path(__file__).resolve().parents[2]
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from core.config import load_config, validate_config
from core.envelope import ErrorKind, Failure
from core.logs import configure_logging
from services.blog import Blog
from .schemas import BlogPostResponse, PostCollectionResponse

logger = logging.getLogger(__name__)


def _raise_for_failure(res: Failure) -> None:
    if res.kind == ErrorKind.BACKEND_FAILURE:
        if res.code == "object_not_found":
            raise HTTPException(status_code=404, detail=res.reason)
        raise HTTPException(status_code=502, detail=res.reason)
    raise HTTPException(status_code=500, detail=res.reason)


def create_app(blog: Optional[Blog] = None) -> FastAPI:
    if blog is None:
        cfg = load_config()
        configure_logging(cfg.log_level)
        missing = validate_config(cfg)
        if missing:
            logger.warning("missing config: %s", missing)
        blog = Blog.from_config(cfg)

    app = FastAPI(title="Notion Blog")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Sync handlers: FastAPI runs them in its threadpool since the SDK blocks
    @app.get("/healthz")
    def healthz() -> Dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/posts", response_model=PostCollectionResponse)
    def list_posts() -> PostCollectionResponse:
        res = blog.get_posts_paths()
        if not res.ok:
            _raise_for_failure(res)
        return PostCollectionResponse.model_validate({"items": [p.to_dict() for p in res.data]})

    @app.get("/api/posts/{post_id}", response_model=BlogPostResponse)
    def get_post(post_id: str) -> BlogPostResponse:
        res = blog.get_post(post_id)
        if not res.ok:
            _raise_for_failure(res)
        return BlogPostResponse.model_validate(res.data.to_dict())

    return app
