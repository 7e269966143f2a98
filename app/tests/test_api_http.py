from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator, Tuple

import pytest
from starlette.testclient import TestClient

from lingoaudit.dictionary import Dictionary, DictionaryService
from lingoaudit.models.api.errors import ErrorCode
from lingoaudit.server import create_app


@pytest.fixture
def dictionaries(tmp_path: Path) -> Tuple[Path, Path]:
    primary = tmp_path / "en.json"
    secondary = tmp_path / "de.json"
    primary.write_text(
        json.dumps({"home.title": "Home", "home.body": "Welcome", "only.en": "Only"}),
        encoding="utf-8",
    )
    secondary.write_text(
        json.dumps({"home.title": "Startseite", "home.body": "Willkommen"}),
        encoding="utf-8",
    )
    return primary, secondary


@pytest.fixture
def client(dictionaries: Tuple[Path, Path]) -> Iterator[TestClient]:
    app, _ = create_app(*dictionaries)
    with TestClient(app) as test_client:
        yield test_client


def test_health_check_lists_locales(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    payload = response.json()
    assert payload["locales"] == ["en", "de"]
    assert payload["entries"] == {"en": 3, "de": 2}
    assert payload["time"].endswith("Z")


def test_translations_are_joined_by_key(client: TestClient) -> None:
    response = client.get("/api/translations")

    assert response.status_code == 200
    payload = response.json()
    assert payload["count"] == 3
    assert [row["key"] for row in payload["rows"]] == [
        "home.body",
        "home.title",
        "only.en",
    ]
    assert payload["rows"][2]["values"] == {"en": "Only", "de": None}


def test_search_keys_ignores_case(client: TestClient) -> None:
    response = client.get("/api/search-keys", params={"query": "  HOME.T "})

    assert response.status_code == 200
    assert [row["key"] for row in response.json()["rows"]] == ["home.title"]


def test_search_values_matches_either_locale(client: TestClient) -> None:
    response = client.get("/api/search-values", params={"query": "willkommen"})

    assert [row["key"] for row in response.json()["rows"]] == ["home.body"]


def test_empty_search_returns_everything(client: TestClient) -> None:
    response = client.get("/api/search-values")

    assert response.json()["count"] == 3


def test_edit_persists_one_locale(
    client: TestClient, dictionaries: Tuple[Path, Path]
) -> None:
    _, secondary = dictionaries

    response = client.put(
        "/api/translations",
        json={"key": " only.en ", "locale": "de", "value": "Nur"},
    )

    assert response.status_code == 200
    assert response.json() == {"key": "only.en", "values": {"en": "Only", "de": "Nur"}}
    saved = json.loads(secondary.read_text(encoding="utf-8"))
    assert list(saved) == ["home.body", "home.title", "only.en"]


def test_insert_persists_both_locales(
    client: TestClient, dictionaries: Tuple[Path, Path]
) -> None:
    primary, secondary = dictionaries

    response = client.post(
        "/api/translations",
        json={"key": "new.key", "primaryValue": "New", "secondaryValue": "Neu"},
    )

    assert response.status_code == 200
    assert json.loads(primary.read_text(encoding="utf-8"))["new.key"] == "New"
    assert json.loads(secondary.read_text(encoding="utf-8"))["new.key"] == "Neu"


def test_unknown_locale_is_not_found(client: TestClient) -> None:
    response = client.put(
        "/api/translations",
        json={"key": "home.title", "locale": "fr", "value": "Accueil"},
    )

    assert response.status_code == 404
    assert response.json() == {"error": ErrorCode.UNKNOWN_LOCALE.value, "detail": "fr"}


@pytest.mark.parametrize(
    "body",
    [
        {"locale": "en", "value": "x"},
        {"key": "   ", "locale": "en", "value": "x"},
        {"key": "a", "locale": "en"},
    ],
)
def test_invalid_edit_payloads(client: TestClient, body: dict) -> None:
    response = client.put("/api/translations", json=body)

    assert response.status_code == 400
    assert response.json()["error"] == ErrorCode.INVALID_JSON_PAYLOAD.value


def test_non_json_body_is_rejected(client: TestClient) -> None:
    response = client.post(
        "/api/translations",
        content=b"not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == {"json": "Invalid JSON payload"}


def test_failed_write_reports_persist_error(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    def failing_save(self: Dictionary) -> None:
        raise OSError("read-only file system")

    monkeypatch.setattr(Dictionary, "save", failing_save)

    response = client.put(
        "/api/translations",
        json={"key": "home.title", "locale": "en", "value": "Changed"},
    )

    assert response.status_code == 500
    assert response.json()["error"] == ErrorCode.PERSIST_FAILED.value
    rows = client.get("/api/translations").json()["rows"]
    assert rows[1]["values"]["en"] == "Home"


def test_create_app_exposes_service(dictionaries: Tuple[Path, Path]) -> None:
    app, service = create_app(*dictionaries)

    assert isinstance(service, DictionaryService)
    assert app.state.dictionary_service is service
