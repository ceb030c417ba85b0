"""
Result assembly: the per-request ResultRecord returned by the API.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Any, Dict, Optional

SUCCESS = "success"
USAGE_HINT = (
    "To calculate Fibonacci of a different number, use: /api/20 "
    "(replace 20 with your desired number(integer))"
)


@dataclass(frozen=True)
class RequestMeta:
    """Raw request details supplied by the HTTP layer."""
    path: str = ""
    query: str = ""
    full_uri: str = ""


@dataclass(frozen=True)
class DebugInfo:
    path: str
    query: str
    full_uri: str
    extraction_method: str


@dataclass(frozen=True)
class ResultRecord:
    fibonacci: str                  # decimal text, F(n) can exceed any float/int64
    n: int
    timestamp: str                  # ISO-8601, UTC
    status: str
    debug: DebugInfo
    usage: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def build_result(
    n: int,
    value: int,
    meta: RequestMeta,
    extraction_method: str = "path_analysis",
    now: Optional[datetime] = None,
) -> ResultRecord:
    now = now or datetime.now(timezone.utc)
    return ResultRecord(
        fibonacci=str(value),
        n=n,
        timestamp=now.isoformat(),
        status=SUCCESS,
        debug=DebugInfo(
            path=meta.path,
            query=meta.query,
            full_uri=meta.full_uri,
            extraction_method=extraction_method,
        ),
        usage=USAGE_HINT,
    )
