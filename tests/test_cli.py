from __future__ import annotations

import pytest

from conftest import api_error, connection_refused
from esprobe import __version__
from esprobe import cli
from esprobe.client import SearchClient
from esprobe.errors import FatalError


@pytest.fixture
def patched_client(monkeypatch, es):
    built = {}

    def factory(hosts):
        built["hosts"] = hosts
        return SearchClient(es=es)

    monkeypatch.setattr(cli, "SearchClient", factory)
    return built


def test_successful_run_exits_zero(patched_client, es, monkeypatch) -> None:
    monkeypatch.setenv("ELASTICSEARCH_URL", "http://es1:9200")

    assert cli.main([]) == 0
    assert patched_client["hosts"] == ["http://es1:9200"]
    es.close.assert_called_once()


def test_fatal_error_exits_non_zero(patched_client, es, logs) -> None:
    es.info.side_effect = connection_refused()

    assert cli.main([]) == 1
    critical = [r for r in logs.records if r.levelname == "CRITICAL"]
    assert len(critical) == 1
    assert "Error getting response" in critical[0].getMessage()
    es.close.assert_called_once()


def test_search_failure_exits_non_zero(patched_client, es, logs) -> None:
    es.search.side_effect = connection_refused()

    assert cli.main([]) == 1
    assert es.index.call_count == 2
    critical = [r for r in logs.records if r.levelname == "CRITICAL"]
    assert len(critical) == 1
    assert "Error getting response" in critical[0].getMessage()


def test_index_failures_keep_exit_zero(patched_client, es) -> None:
    es.index.side_effect = api_error(400, "mapper_parsing_exception", "failed to parse")

    assert cli.main([]) == 0


def test_client_construction_failure_is_fatal(monkeypatch, logs) -> None:
    def broken(**kwargs):
        raise ValueError("URL must include a 'scheme', 'host', and 'port' component")

    monkeypatch.setattr("esprobe.client.Elasticsearch", broken)

    with pytest.raises(FatalError, match="Error creating the client"):
        SearchClient(hosts=["localhost"])

    assert cli.main([]) == 1


def test_client_builds_from_hosts_without_connecting() -> None:
    with SearchClient(hosts=["http://localhost:9200"]) as client:
        assert client is not None


def test_version_flag(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--version"])

    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out
