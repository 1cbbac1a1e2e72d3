"""
FastAPI endpoint tests for the Word Nums API.

Uses httpx + FastAPI TestClient; no real server needed.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from word_nums.parser import NumberWordsParser

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _warm_parser() -> None:
    """Initialise the parser once for all API tests (bypasses lifespan)."""
    api._parser = NumberWordsParser()
    yield  # type: ignore[misc]
    api._parser = None


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["sign_policy"] == "plus_means_unsigned"
        assert data["largest_scale"] == "undecillion"


class TestParseEndpoint:
    def test_parses_signed_default(self) -> None:
        resp = client.post(
            "/parse",
            json={"text": "one hundred fifty five thousand three hundred seventy two"},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["value"] == 155372
        assert data["type"] == "i32"
        assert data["signed"] is True
        assert data["literal"] == "155372i32"

    def test_plus_gives_unsigned(self) -> None:
        data = client.post(
            "/parse", json={"text": "plus one thousand three hundred thirty seven"}
        ).json()
        assert data["type"] == "u16"
        assert data["bits"] == 16
        assert data["literal"] == "1337u16"

    def test_negative(self) -> None:
        data = client.post(
            "/parse", json={"text": "minus hundred fifty four thousand thirty five"}
        ).json()
        assert data["value"] == -154035

    def test_u128_max_survives_json(self) -> None:
        text = "plus " + api.number_to_words(2**128 - 1)
        data = client.post("/parse", json={"text": text}).json()
        assert data["value"] == 2**128 - 1
        assert data["type"] == "u128"


class TestParseErrors:
    def test_unknown_word_returns_422_with_code(self) -> None:
        resp = client.post("/parse", json={"text": "one gazillion"})
        assert resp.status_code == 422
        data = resp.json()
        assert data["code"] == "UNKNOWN_WORD"
        assert data["details"]["word"] == "gazillion"

    def test_malformed_reports_reason(self) -> None:
        data = client.post("/parse", json={"text": "seven fifty"}).json()
        assert data["code"] == "MALFORMED_NUMBER"
        assert data["details"]["reason"] == "TENS_AFTER_UNIT"

    def test_empty_text(self) -> None:
        data = client.post("/parse", json={"text": ""}).json()
        assert data["code"] == "EMPTY_INPUT"

    def test_missing_body_returns_422(self) -> None:
        resp = client.post("/parse", json={})
        assert resp.status_code == 422


class TestBatchEndpoint:
    def test_mixed_batch(self) -> None:
        resp = client.post(
            "/parse/batch", json={"texts": ["fifty seven hundred", "one two"]}
        )
        assert resp.status_code == 200
        good, bad = resp.json()
        assert good["ok"] is True
        assert good["result"]["value"] == 5700
        assert bad["ok"] is False
        assert bad["error_code"] == "MALFORMED_NUMBER"

    def test_empty_batch_rejected(self) -> None:
        resp = client.post("/parse/batch", json={"texts": []})
        assert resp.status_code == 422


class TestRenderEndpoint:
    def test_render(self) -> None:
        data = client.get("/render/1337").json()
        assert data["words"] == "one thousand three hundred thirty seven"

    def test_render_negative(self) -> None:
        data = client.get("/render/-10").json()
        assert data["words"] == "minus ten"

    def test_render_too_large(self) -> None:
        resp = client.get(f"/render/{10**39}")
        assert resp.status_code == 422
