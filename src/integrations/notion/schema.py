"""Check the configured property names against the database schema."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from core.config import PropertyNames

__all__ = ["PropertyCheck", "EXPECTED_TYPES", "inspect_schema"]

EXPECTED_TYPES = {
    "published": "checkbox",
    "slug": "rich_text",
    "post": "title",
    "meta_title": "rich_text",
    "meta_description": "rich_text",
}


@dataclass(frozen=True)
class PropertyCheck:
    role: str
    name: str
    expected: str
    actual: Optional[str]
    # Only a wrong published type breaks listing; the rest fall back to defaults
    fatal: bool = False

    @property
    def ok(self) -> bool:
        return self.actual == self.expected


def inspect_schema(database: Dict[str, Any], names: PropertyNames) -> List[PropertyCheck]:
    props = database.get("properties") if isinstance(database, dict) else None
    if not isinstance(props, dict):
        props = {}
    checks: List[PropertyCheck] = []
    for role, expected in EXPECTED_TYPES.items():
        name = getattr(names, role)
        meta = props.get(name)
        actual = meta.get("type") if isinstance(meta, dict) else None
        checks.append(
            PropertyCheck(
                role=role,
                name=name,
                expected=expected,
                actual=actual,
                fatal=(role == "published"),
            )
        )
    return checks
