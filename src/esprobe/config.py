"""Run settings, resolved from the environment."""

import os
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

# Endpoint override, same variable the official clients honour
ENV_URL = "ELASTICSEARCH_URL"
DEFAULT_URL = "http://localhost:9200"


def get_hosts(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """
    Resolve the node URLs to connect to.

    Args:
        environ: Environment mapping (default: ``os.environ``)

    Returns:
        Hosts from ``ELASTICSEARCH_URL`` (comma-separated), or the local default
    """
    if environ is None:
        environ = os.environ

    raw = environ.get(ENV_URL, "")
    hosts = [h.strip() for h in raw.split(",") if h.strip()]
    return hosts or [DEFAULT_URL]


@dataclass
class Settings:
    # Connection
    hosts: List[str] = field(default_factory=lambda: [DEFAULT_URL])

    # Index step
    index_name: str = "test"
    titles: Tuple[str, ...] = ("Test One", "Test Two")
    refresh: str = "true"   # make documents searchable before the search step

    # Search step
    query: Dict = field(
        default_factory=lambda: {"match": {"title": "test"}}
    )
    track_total_hits: bool = True
    pretty: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        return cls(hosts=get_hosts(environ))
