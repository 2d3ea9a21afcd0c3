from __future__ import annotations

import asyncio

import pytest

from services.row_source import FetchError, GoogleSheetsRowSource


@pytest.fixture()
def source() -> GoogleSheetsRowSource:
    return GoogleSheetsRowSource(spreadsheet_id="sheet-123", credentials_file="missing.json")


def test_fetch_returns_values(source, monkeypatch) -> None:
    seen = []

    def fake_get_values(range_name: str) -> dict:
        seen.append(range_name)
        return {"range": range_name, "values": [["d", "Acme", "Curioso", "3"]]}

    monkeypatch.setattr(source, "_get_values", fake_get_values)
    rows = asyncio.run(source.fetch("Foglio1!A2:D"))
    assert rows == [["d", "Acme", "Curioso", "3"]]
    assert seen == ["Foglio1!A2:D"]


def test_missing_values_means_empty_range(source, monkeypatch) -> None:
    monkeypatch.setattr(source, "_get_values", lambda range_name: {"range": range_name})
    assert asyncio.run(source.fetch("Foglio2!A2:D")) == []


def test_provider_error_becomes_fetch_error(source, monkeypatch) -> None:
    def broken(range_name: str) -> dict:
        raise ConnectionError("network unreachable")

    monkeypatch.setattr(source, "_get_values", broken)
    with pytest.raises(FetchError) as excinfo:
        asyncio.run(source.fetch("Foglio1!A2:D"))
    assert excinfo.value.range_name == "Foglio1!A2:D"
    assert isinstance(excinfo.value.__cause__, ConnectionError)


def test_missing_credentials_file_becomes_fetch_error(source) -> None:
    with pytest.raises(FetchError):
        asyncio.run(source.fetch("Foglio1!A2:D"))


def test_explicit_spreadsheet_id_wins(source) -> None:
    assert source.spreadsheet_id == "sheet-123"
