"""
esprobe Client — Elasticsearch Client Wrapper
=============================================

Thin wrapper over the official ``Elasticsearch`` client exposing the three
operations a run needs, each returning a typed response structure.

Transport, pooling, TLS and retries stay inside the library. Library
exceptions (ApiError, TransportError, SerializationError) propagate unchanged
so each caller can decide how severe they are.
"""

import logging
from typing import Any, Dict, List, Optional

from elasticsearch import Elasticsearch

from .config import DEFAULT_URL
from .errors import FatalError
from .responses import ClusterInfo, IndexResult, SearchResult

logger = logging.getLogger(__name__)


class SearchClient:
    """
    Elasticsearch access for a single run.

    Example:
        with SearchClient(hosts=["http://localhost:9200"]) as client:
            print(client.info().version)

    The underlying client is safe to share between threads, so one instance
    serves every concurrent index task.
    """

    def __init__(
        self,
        hosts: Optional[List[str]] = None,
        es: Optional[Elasticsearch] = None
    ):
        """
        Connect to a cluster.

        Args:
            hosts: List of ES node URLs (default: ["http://localhost:9200"])
            es: Pre-built client to wrap instead of constructing one

        Raises:
            FatalError: If the client cannot be constructed (e.g. bad URL)
        """
        if es is not None:
            self._client = es
            return

        conn_kwargs: Dict[str, Any] = {
            "hosts": hosts or [DEFAULT_URL]
        }

        try:
            self._client = Elasticsearch(**conn_kwargs)
        except (ValueError, TypeError) as e:
            raise FatalError(f"Error creating the client: {e}") from e

        logger.debug("Client created for %s", ", ".join(conn_kwargs["hosts"]))

    def info(self) -> ClusterInfo:
        """Fetch cluster metadata (name, version)."""
        return ClusterInfo.from_response(self._client.info())

    def index(
        self,
        index: str,
        doc_id: str,
        document: dict,
        refresh: str = "true"
    ) -> IndexResult:
        """
        Index (create or overwrite) a single document.

        Args:
            index: Target index name
            doc_id: Document identifier
            document: Document source
            refresh: Refresh policy ("true", "false", "wait_for")

        Returns:
            Result status and document version
        """
        response = self._client.index(
            index=index,
            id=doc_id,
            document=document,
            refresh=refresh
        )
        return IndexResult.from_response(response)

    def search(
        self,
        index: str,
        query: dict,
        track_total_hits: bool = True,
        pretty: bool = False
    ) -> SearchResult:
        """
        Run a query DSL search.

        Args:
            index: Index name
            query: Query clause (the value of the body's "query" key)
            track_total_hits: Count every matching document
            pretty: Ask the engine for indented JSON

        Returns:
            Search envelope with hits in engine order
        """
        response = self._client.search(
            index=index,
            query=query,
            track_total_hits=track_total_hits,
            pretty=pretty
        )
        return SearchResult.from_response(response)

    def close(self):
        """Close the Elasticsearch client connection."""
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
