"""Shared fixtures: a mocked ``Elasticsearch`` wrapped in a real SearchClient."""

from __future__ import annotations

import logging
from typing import Any
from unittest.mock import MagicMock

import pytest
from elastic_transport import ApiResponseMeta, HttpHeaders, NodeConfig, ObjectApiResponse
from elasticsearch import ApiError
from elasticsearch import ConnectionError as ESConnectionError

from esprobe.client import SearchClient
from esprobe.config import Settings

NODE = NodeConfig("http", "localhost", 9200)


def make_meta(status: int = 200) -> ApiResponseMeta:
    return ApiResponseMeta(
        status=status,
        http_version="1.1",
        headers=HttpHeaders({"content-type": "application/json"}),
        duration=0.001,
        node=NODE,
    )


def api_response(body: Any, status: int = 200) -> ObjectApiResponse:
    """Build the object the client library returns for a successful call."""

    return ObjectApiResponse(body=body, meta=make_meta(status))


def api_error(status: int, err_type: str, reason: str) -> ApiError:
    """Build an engine-reported error the way the library raises it."""

    return ApiError(
        message=err_type,
        meta=make_meta(status),
        body={"error": {"type": err_type, "reason": reason}, "status": status},
    )


def connection_refused() -> ESConnectionError:
    """Build a connection failure the way the transport raises it."""

    return ESConnectionError("Connection error", errors=(OSError("Connection refused"),))


def index_body(doc_id: str, version: int = 1, result: str = "created") -> dict:
    return {
        "_index": "test",
        "_id": doc_id,
        "_version": version,
        "result": result,
        "_shards": {"total": 2, "successful": 1, "failed": 0},
    }


INFO_BODY = {
    "name": "node-1",
    "cluster_name": "docker-cluster",
    "version": {"number": "8.14.0"},
    "tagline": "You Know, for Search",
}

SEARCH_BODY = {
    "took": 7,
    "timed_out": False,
    "hits": {
        "total": {"value": 2, "relation": "eq"},
        "max_score": 0.18,
        "hits": [
            {"_index": "test", "_id": "1", "_score": 0.18, "_source": {"title": "Test One"}},
            {"_index": "test", "_id": "2", "_score": 0.18, "_source": {"title": "Test Two"}},
        ],
    },
}


@pytest.fixture
def es() -> MagicMock:
    """Mocked Elasticsearch answering every call successfully."""

    mock = MagicMock()
    mock.info.return_value = api_response(INFO_BODY)
    mock.index.side_effect = lambda **kw: api_response(index_body(kw["id"]), status=201)
    mock.search.return_value = api_response(SEARCH_BODY)
    return mock


@pytest.fixture
def client(es: MagicMock) -> SearchClient:
    return SearchClient(es=es)


@pytest.fixture
def settings() -> Settings:
    return Settings.from_env({})


@pytest.fixture
def logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.DEBUG, logger="esprobe")
    return caplog
