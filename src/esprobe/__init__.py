"""
esprobe — Elasticsearch Quick-Start Probe
=========================================

A small demonstration client: connect to a cluster, report its version,
index two documents concurrently and search for them.

Usage:
    from esprobe import SearchClient, Settings, run

    settings = Settings.from_env()   # honours ELASTICSEARCH_URL
    with SearchClient(hosts=settings.hosts) as client:
        run(client, settings)

Sample output:
    ~~~~~~~> Elasticsearch 8.14.0
    [201 Created] created; ID=1 version=1
    [201 Created] created; ID=2 version=1
    -------------------------------------
    [200 OK] 2 hits; took: 7ms
     * ID=1, {'title': 'Test One'}
     * ID=2, {'title': 'Test Two'}
    =====================================

License: MIT
"""

__version__ = "0.1.0"

from .client import SearchClient
from .config import Settings
from .errors import FatalError, ResponseError
from .indexer import Document, IndexOutcome, index_titles
from .runner import run

__all__ = [
    "SearchClient", "Settings", "FatalError", "ResponseError",
    "Document", "IndexOutcome", "index_titles", "run",
]
