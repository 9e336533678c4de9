"""
esprobe Indexer — Concurrent Fan-Out Indexing
=============================================

Indexes a list of titles, one request per document, all in flight at once.

    titles ──┬─> task(ID=1) ──┐
             ├─> task(ID=2) ──┼─> join (every task finished) ──> outcomes
             └─> task(ID=n) ──┘

Policy:
    - Every task is submitted before any result is awaited
    - The join waits for all tasks; nothing is cancelled early
    - A failed document is logged once and does not affect its siblings
    - No retries

The executor is created and owned by the caller; this module only submits
to it and waits.
"""

import logging
from concurrent.futures import Executor, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import List, Optional, Sequence

from elasticsearch import ApiError
from elasticsearch.exceptions import SerializationError, TransportError

from .client import SearchClient
from .config import Settings
from .errors import ResponseError, error_reason, status_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    doc_id: str
    title: str

    @classmethod
    def at(cls, position: int, title: str) -> "Document":
        """Build the document for 0-based list ``position``; IDs start at 1."""
        return cls(doc_id=str(position + 1), title=title)

    def body(self) -> dict:
        return {"title": self.title}


@dataclass(frozen=True)
class IndexOutcome:
    """What happened to one document. ``ok`` is False for any failure."""

    doc_id: str
    ok: bool
    status: Optional[str] = None
    result: Optional[str] = None
    version: Optional[int] = None
    error: Optional[str] = None


def make_executor(count: int) -> ThreadPoolExecutor:
    """One worker per document, so no task waits for a free thread."""
    return ThreadPoolExecutor(
        max_workers=max(1, count),
        thread_name_prefix="esprobe-index"
    )


def index_document(
    client: SearchClient,
    doc: Document,
    settings: Settings
) -> IndexOutcome:
    """
    Index one document and log its outcome.

    Never raises for request, transport or decode failures: they are logged
    and reported as a failed outcome.

    Args:
        client: Shared search client
        doc: Document to index
        settings: Index name and refresh policy

    Returns:
        IndexOutcome for this document
    """
    try:
        res = client.index(
            settings.index_name,
            doc.doc_id,
            doc.body(),
            refresh=settings.refresh
        )
    except ApiError as e:
        status = status_text(e.meta.status)
        reason = error_reason(e)
        logger.error("[%s] Error indexing document ID=%s (%s)", status, doc.doc_id, reason)
        return IndexOutcome(doc.doc_id, ok=False, status=status, error=reason)
    except (SerializationError, ResponseError) as e:
        logger.warning("Error parsing the response body for ID=%s: %s", doc.doc_id, e)
        return IndexOutcome(doc.doc_id, ok=False, error=str(e))
    except TransportError as e:
        logger.error("Error indexing document ID=%s: %s", doc.doc_id, e)
        return IndexOutcome(doc.doc_id, ok=False, error=str(e))

    logger.info(
        "[%s] %s; ID=%s version=%d",
        res.status, res.result, doc.doc_id, res.version
    )
    return IndexOutcome(
        doc.doc_id,
        ok=True,
        status=res.status,
        result=res.result,
        version=res.version
    )


def index_titles(
    client: SearchClient,
    titles: Sequence[str],
    executor: Executor,
    settings: Settings
) -> List[IndexOutcome]:
    """
    Index every title concurrently and wait for all of them.

    Args:
        client: Shared search client
        titles: Document titles; list position i becomes ID str(i + 1)
        executor: Caller-owned executor the tasks are submitted to
        settings: Index name and refresh policy

    Returns:
        One outcome per title, in input order
    """
    docs = [Document.at(i, title) for i, title in enumerate(titles)]
    futures = [
        executor.submit(index_document, client, doc, settings)
        for doc in docs
    ]

    wait(futures)

    outcomes = [f.result() for f in futures]
    failed = sum(1 for o in outcomes if not o.ok)
    logger.debug("Indexed %d documents, %d failed", len(outcomes), failed)
    return outcomes
