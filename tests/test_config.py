import itertools
import logging

import pytest

from moviesearch.config import (
    ENDPOINT_ENV,
    PROJECT_KEY_ENV,
    SCHEMA_ENV,
    SEARCHES_TABLE_ENV,
    Settings,
    missing_settings,
    validate_config,
)

FIELDS = {
    ENDPOINT_ENV: "endpoint",
    PROJECT_KEY_ENV: "project_key",
    SCHEMA_ENV: "database_id",
    SEARCHES_TABLE_ENV: "collection_id",
}

ALL_SUBSETS = [
    set(combo)
    for size in range(1, len(FIELDS) + 1)
    for combo in itertools.combinations(FIELDS, size)
]


def test_validate_config_accepts_complete_settings(settings, caplog):
    with caplog.at_level(logging.WARNING, logger="moviesearch.config"):
        assert validate_config(settings) is True
    assert caplog.records == []


@pytest.mark.parametrize("missing", ALL_SUBSETS, ids=lambda s: "+".join(sorted(s)))
def test_validate_config_reports_exactly_the_missing_names(settings, caplog, missing):
    values = settings.model_dump()
    for env_name in missing:
        values[FIELDS[env_name]] = ""
    partial = Settings(**values)

    with caplog.at_level(logging.WARNING, logger="moviesearch.config"):
        assert validate_config(partial) is False

    assert set(missing_settings(partial)) == missing
    message = caplog.records[-1].getMessage()
    reported = set(message.split(": ", 1)[1].split(", "))
    assert reported == missing


def test_none_counts_as_missing():
    assert missing_settings(Settings()) == [ENDPOINT_ENV, PROJECT_KEY_ENV, SCHEMA_ENV, SEARCHES_TABLE_ENV]


def test_from_env_reads_variables(monkeypatch):
    monkeypatch.setenv(ENDPOINT_ENV, "https://x.supabase.co")
    monkeypatch.setenv(PROJECT_KEY_ENV, "key")
    monkeypatch.delenv(SCHEMA_ENV, raising=False)
    monkeypatch.setenv(SEARCHES_TABLE_ENV, "searches")

    loaded = Settings.from_env()

    assert loaded.endpoint == "https://x.supabase.co"
    assert loaded.database_id is None
    assert loaded.client_configured is True
    assert loaded.storage_configured is False


def test_client_only_needs_endpoint_and_key():
    assert Settings(endpoint="https://x.supabase.co", project_key="key").client_configured
    assert not Settings(endpoint="https://x.supabase.co").client_configured
