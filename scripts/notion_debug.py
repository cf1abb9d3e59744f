#!/usr/bin/env python3

from __future__ import annotations

import argparse
import os
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

REPO_DIR = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))
SRC_DIR = os.path.join(REPO_DIR, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from core.config import load_config  # type: ignore
from integrations.notion import NotionClient, join_rich_plain_text  # type: ignore


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Notion blog page diagnostics helper")
    parser.add_argument("--ids", default="", help="Comma separated page ids or Notion page URLs")
    parser.add_argument("--file", default=None, help="File with one page id or URL per line")
    parser.add_argument("--blocks", action="store_true", help="Also print block types per page")
    return parser.parse_args()


PAGE_ID_RE = re.compile(r"([0-9a-f]{8}-?[0-9a-f]{4}-?[0-9a-f]{4}-?[0-9a-f]{4}-?[0-9a-f]{12})\s*$", re.I)


def page_id_from(ref: str) -> Optional[str]:
    """Accept a bare page id or a copied Notion page URL (id is the trailing hex)."""
    m = PAGE_ID_RE.search(ref.split("?", 1)[0].split("#", 1)[0])
    return m.group(1).replace("-", "").lower() if m else None


def collect_ids(args: argparse.Namespace) -> List[str]:
    refs = str(args.ids or "").split(",")
    if args.file:
        try:
            refs.extend(Path(args.file).read_text(encoding="utf-8").splitlines())
        except OSError as exc:
            print(f"[debug] failed to read file: {exc}")
    ids: Dict[str, None] = {}
    for ref in (r.strip() for r in refs):
        if not ref:
            continue
        pid = page_id_from(ref)
        if pid is None:
            print(f"[debug] not a page id or url: {ref!r}")
            continue
        ids.setdefault(pid)
    return list(ids)


def property_preview(meta: Dict[str, Any]) -> str:
    ptype = meta.get("type")
    if ptype in ("rich_text", "title"):
        return join_rich_plain_text(meta.get(ptype) or [])[:80]
    if ptype == "checkbox":
        return str(bool(meta.get("checkbox")))
    return ""


def main() -> None:
    args = parse_args()
    cfg = load_config()
    notion = NotionClient.from_config(cfg)

    ids = collect_ids(args)
    if not ids:
        res = notion.get_posts()
        if not res.ok:
            print(f"[debug] query failed: {res.reason} (code={res.code})")
            return
        ids = [p.get("id") for p in res.data.get("results", []) if p.get("id")]
        print(f"[debug] pages in database: {len(ids)}")

    for pid in ids:
        print(f"--- page={pid} ---")
        res = notion.get_post(pid)
        if not res.ok:
            print(f"  fetch failed: {res.reason} (code={res.code})")
            continue
        props = res.data.get("properties") or {}
        for name, meta in props.items():
            if not isinstance(meta, dict):
                continue
            print(f"  {name}: type={meta.get('type')} value={property_preview(meta)!r}")
        if args.blocks:
            blocks = notion.get_blocks(pid)
            if not blocks.ok:
                print(f"  blocks failed: {blocks.reason}")
                continue
            types = [b.get("type") for b in blocks.data.get("results", [])]
            print(f"  blocks={len(types)} types={sorted(set(t for t in types if t))}")


if __name__ == "__main__":
    main()
