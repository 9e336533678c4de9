"""
esprobe Responses — Typed Response Structures
=============================================

Each client operation decodes its reply exactly once, here, into a small
dataclass. Callers never index into raw JSON maps.

    info()   → ClusterInfo
    index()  → IndexResult
    search() → SearchResult (ordered list of Hit)

A required field that is absent or of the wrong type raises ResponseError.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from elastic_transport import ObjectApiResponse

from .errors import ResponseError, status_text


def _body(response: ObjectApiResponse) -> Dict[str, Any]:
    body = response.body
    if not isinstance(body, dict):
        raise ResponseError(
            f"Expected a JSON object, got {type(body).__name__}"
        )
    return body


def _require(obj: Dict[str, Any], key: str, kind: type, where: str) -> Any:
    """Fetch ``obj[key]`` and check its type, naming ``where`` on failure."""
    if key not in obj:
        raise ResponseError(f"Missing field '{key}' in {where}")
    value = obj[key]
    # bool is an int subclass; a version counter is never a bool
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ResponseError(
            f"Field '{key}' in {where} should be {kind.__name__}, "
            f"got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True)
class ClusterInfo:
    """Cluster metadata from ``GET /``."""

    status: str
    version: str
    cluster_name: Optional[str] = None

    @classmethod
    def from_response(cls, response: ObjectApiResponse) -> "ClusterInfo":
        body = _body(response)
        version = _require(body, "version", dict, "cluster info")
        return cls(
            status=status_text(response.meta.status),
            version=_require(version, "number", str, "cluster info version"),
            cluster_name=body.get("cluster_name"),
        )


@dataclass(frozen=True)
class IndexResult:
    """Outcome of a single-document index request."""

    status: str
    result: str
    version: int

    @classmethod
    def from_response(cls, response: ObjectApiResponse) -> "IndexResult":
        body = _body(response)
        return cls(
            status=status_text(response.meta.status),
            result=_require(body, "result", str, "index response"),
            version=_require(body, "_version", int, "index response"),
        )


@dataclass(frozen=True)
class Hit:
    doc_id: str
    source: Dict[str, Any]


@dataclass(frozen=True)
class SearchResult:
    """
    Search envelope.

    Hits keep the order the engine returned them in. ``total`` is None when
    the request did not track total hits.
    """

    status: str
    took: int
    total: Optional[int] = None
    hits: List[Hit] = field(default_factory=list)

    @classmethod
    def from_response(cls, response: ObjectApiResponse) -> "SearchResult":
        body = _body(response)
        hits_obj = _require(body, "hits", dict, "search response")
        raw_hits = _require(hits_obj, "hits", list, "search hits")

        # ES 7+ reports {"value": n, "relation": "eq"}; older nodes a bare int
        total = hits_obj.get("total")
        if isinstance(total, dict):
            total = total.get("value")

        hits = []
        for raw in raw_hits:
            if not isinstance(raw, dict):
                raise ResponseError("Search hit is not a JSON object")
            hits.append(
                Hit(
                    doc_id=_require(raw, "_id", str, "search hit"),
                    source=raw.get("_source") or {},
                )
            )

        return cls(
            status=status_text(response.meta.status),
            took=_require(body, "took", int, "search response"),
            total=total if isinstance(total, int) else None,
            hits=hits,
        )
