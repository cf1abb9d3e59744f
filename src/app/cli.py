from __future__ import annotations
import argparse
import json
import sys
from typing import Any, List, Optional

from core.config import load_config, validate_config
from core.logs import configure_logging
from integrations.notion import NotionClient, inspect_schema
from services.blog import Blog


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Notion blog CLI")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_paths = sub.add_parser("paths", help="List publishable posts (slug, id, title)")
    p_paths.add_argument("--dev", action="store_true", help="Include drafts, overrides BLOG_DEV")

    p_post = sub.add_parser("post", help="Fetch one post with its blocks")
    p_post.add_argument("--id", required=True, help="Notion page id")

    sub.add_parser("check", help="Check configured property names against the database schema")
    return parser.parse_args(argv)


def _dump(payload: Any) -> None:
    sys.stdout.write(json.dumps(payload, ensure_ascii=False, indent=2) + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    cfg = load_config()
    configure_logging(cfg.log_level)
    missing = validate_config(cfg)
    if missing:
        print(f"[warn] missing config: {missing}", file=sys.stderr)

    if args.cmd == "paths":
        if args.dev:
            cfg.is_dev = True
        res = Blog.from_config(cfg).get_posts_paths()
        _dump(res.to_dict())
        return 0 if res.ok else 1
    if args.cmd == "post":
        res = Blog.from_config(cfg).get_post(args.id)
        _dump(res.to_dict())
        return 0 if res.ok else 1
    if args.cmd == "check":
        res = NotionClient.from_config(cfg).get_database()
        if not res.ok:
            print(f"[check] database fetch failed: {res.reason} (code={res.code})")
            return 1
        failed = 0
        for chk in inspect_schema(res.data, cfg.property_names()):
            mark = "ok" if chk.ok else ("FATAL" if chk.fatal else "fallback")
            print(f"[check] {chk.role}: '{chk.name}' expected={chk.expected} actual={chk.actual} -> {mark}")
            if chk.fatal and not chk.ok:
                failed += 1
        return 1 if failed else 0
    return 2


if __name__ == "__main__":
    sys.exit(main())
