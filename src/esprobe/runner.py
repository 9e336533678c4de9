"""
esprobe Runner — Demonstration Sequence
=======================================

Runs the three steps strictly in order:

    1. cluster info   (fatal on any failure)
    2. fan-out index  (per-document failures are logged, run continues)
    3. search         (fatal on any failure)
"""

import logging
from typing import List

from elasticsearch import ApiError
from elasticsearch.exceptions import SerializationError, TransportError

from .client import SearchClient
from .config import Settings
from .errors import FatalError, ResponseError, describe_api_error
from .indexer import IndexOutcome, index_titles, make_executor
from .responses import ClusterInfo, SearchResult

logger = logging.getLogger(__name__)

RULE_WIDTH = 37


def _fatal(err: Exception) -> FatalError:
    """Translate a library failure into a run-ending FatalError."""
    if isinstance(err, ApiError):
        return FatalError(describe_api_error(err))
    # SerializationError is itself a TransportError
    if isinstance(err, (SerializationError, ResponseError)):
        return FatalError(f"Error parsing the response body: {err}")
    return FatalError(f"Error getting response: {err}")


def report_cluster_info(client: SearchClient) -> ClusterInfo:
    """Fetch cluster info and log the engine version."""
    try:
        info = client.info()
    except (ApiError, TransportError, SerializationError, ResponseError) as e:
        raise _fatal(e) from e

    logger.info("~~~~~~~> Elasticsearch %s", info.version)
    logger.debug("[%s] cluster_name=%s", info.status, info.cluster_name)
    return info


def run_search(client: SearchClient, settings: Settings) -> SearchResult:
    """
    Search the index and log every hit in the order returned.

    Raises:
        FatalError: On transport, decode or engine-reported errors
    """
    try:
        result = client.search(
            settings.index_name,
            settings.query,
            track_total_hits=settings.track_total_hits,
            pretty=settings.pretty
        )
    except (ApiError, TransportError, SerializationError, ResponseError) as e:
        raise _fatal(e) from e

    total = result.total if result.total is not None else len(result.hits)
    logger.info("[%s] %d hits; took: %dms", result.status, total, result.took)

    for hit in result.hits:
        logger.info(" * ID=%s, %s", hit.doc_id, hit.source)

    return result


def run(client: SearchClient, settings: Settings) -> List[IndexOutcome]:
    """
    Execute the full sequence.

    Indexing only starts once cluster info succeeded, and the search only
    starts once every index task has finished.

    Returns:
        Per-document index outcomes
    """
    report_cluster_info(client)

    with make_executor(len(settings.titles)) as executor:
        outcomes = index_titles(client, settings.titles, executor, settings)

    logger.info("-" * RULE_WIDTH)

    run_search(client, settings)

    logger.info("=" * RULE_WIDTH)
    return outcomes
