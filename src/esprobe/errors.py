"""
esprobe Errors — Failure Types and Formatting
=============================================

Two severities:
    FatalError     → aborts the run (cluster info, search, client setup)
    everything else → logged per document by the indexer, run continues
"""

from http import HTTPStatus

from elasticsearch import ApiError


class FatalError(Exception):
    """Unrecoverable condition; the CLI logs it and exits non-zero."""


class ResponseError(ValueError):
    """A response body is missing a field the caller requires."""


def status_text(code: int) -> str:
    """
    Format an HTTP status code as ``"200 OK"``.

    Args:
        code: Numeric HTTP status

    Returns:
        Code followed by its reason phrase, or just the code if unknown
    """
    try:
        return f"{code} {HTTPStatus(code).phrase}"
    except ValueError:
        return str(code)


def error_reason(err: ApiError) -> str:
    """
    Extract ``type: reason`` from an engine-reported error.

    Falls back to the exception message when the body carries no
    structured ``error`` object (e.g. a plain-text proxy reply).
    """
    body = err.body if isinstance(err.body, dict) else {}
    error = body.get("error")

    if isinstance(error, dict):
        return f"{error.get('type')}: {error.get('reason')}"
    return str(err.message)


def describe_api_error(err: ApiError) -> str:
    """Render an engine-reported error as ``[status] type: reason``."""
    return f"[{status_text(err.meta.status)}] {error_reason(err)}"
