"""Success/failure envelopes returned by every fallible blog operation."""

from __future__ import annotations

from dataclasses import dataclass, field, is_dataclass, asdict
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar, Union

__all__ = [
    "ErrorKind",
    "Success",
    "Failure",
    "Envelope",
    "GENERIC_FAILURE_REASON",
    "success",
    "failure",
]

T = TypeVar("T")

GENERIC_FAILURE_REASON = "Something went wrong"


class ErrorKind(str, Enum):
    BACKEND_FAILURE = "BACKEND_FAILURE"
    UNKNOWN = "UNKNOWN"


def _plain(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


@dataclass(frozen=True)
class Success(Generic[T]):
    data: T
    ok: bool = field(default=True, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": True, "data": _plain(self.data)}


@dataclass(frozen=True)
class Failure:
    reason: str
    kind: ErrorKind
    # Backend sub-reason (Notion error code or http_<status>); None for local failures
    code: Optional[str] = None
    ok: bool = field(default=False, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": False, "reason": self.reason, "kind": self.kind.value, "code": self.code}


Envelope = Union[Success[T], Failure]


def success(data: T) -> Success[T]:
    return Success(data)


def failure(
    reason: str = GENERIC_FAILURE_REASON,
    kind: ErrorKind = ErrorKind.UNKNOWN,
    code: Optional[str] = None,
) -> Failure:
    return Failure(reason=reason, kind=kind, code=code)
