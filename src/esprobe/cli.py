"""
esprobe CLI — Command-Line Interface
====================================

Usage:
    esprobe
    ELASTICSEARCH_URL=http://es1:9200,http://es2:9200 esprobe
    python -m esprobe --verbose

The endpoint is taken from ELASTICSEARCH_URL only.
"""

import argparse
import logging
from typing import List, Optional

from . import __version__
from .client import SearchClient
from .config import Settings
from .errors import FatalError
from .log import setup_logging
from .runner import run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="esprobe",
        description=(
            "Report the cluster version, index two documents concurrently "
            "and search them"
        )
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    settings = Settings.from_env()

    try:
        with SearchClient(hosts=settings.hosts) as client:
            run(client, settings)
    except FatalError as e:
        logger.critical("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
