"""Tests for the HTTP endpoints."""
import asyncio
import time

import httpx
import pytest

from fuzzy_match.main import app
from fuzzy_match.settings import settings


def test_healthz(client):
    """Test health check endpoint."""
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_version(client):
    """Test version endpoint lists the strategies."""
    response = client.get("/version")

    assert response.status_code == 200
    data = response.json()
    assert data["service"] == "fuzzy-match"
    assert "token_set_ratio" in data["strategies"]


def test_compare_single_strategy(client):
    """Test scoring a pair with one strategy."""
    response = client.post("/v1/compare/ratio", json={"a": "Hello", "b": "Hallo"})

    assert response.status_code == 200
    data = response.json()
    assert data["strategy"] == "ratio"
    assert data["score"] == 0.8
    assert data["normalization"] == "normalize"
    assert "request_id" in data


def test_compare_already_normalized(client):
    """Test that the normalization mode is passed through."""
    response = client.post(
        "/v1/compare/ratio",
        json={"a": "Hello", "b": "hello", "normalization": "already_normalized"},
    )

    assert response.status_code == 200
    assert response.json()["score"] == pytest.approx(0.8)


def test_compare_all_strategies(client):
    """Test scoring a pair with every strategy."""
    response = client.post(
        "/v1/compare",
        json={"a": "Do we buy the airplane?", "b": "Airplane"},
    )

    assert response.status_code == 200
    scores = response.json()["scores"]
    assert set(scores) == {"ratio", "partial_ratio", "token_sort_ratio", "token_set_ratio"}
    assert scores["partial_ratio"] == 1.0


def test_compare_unknown_strategy(client):
    """Test that an unknown strategy is a structured 404."""
    response = client.post("/v1/compare/soundex", json={"a": "x", "b": "y"})

    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "unknown_strategy"
    assert "ratio" in error["details"]["supported"]


def test_compare_rejects_long_input(client, monkeypatch):
    """Test that inputs above the configured limit are rejected."""
    monkeypatch.setattr(settings, "max_input_chars", 5)

    response = client.post("/v1/compare/ratio", json={"a": "short", "b": "far too long"})

    assert response.status_code == 413
    error = response.json()["error"]
    assert error["code"] == "input_too_long"
    assert error["details"]["field"] == "b"


def test_compare_validates_body(client):
    """Test that a missing string is a validation error."""
    response = client.post("/v1/compare/ratio", json={"a": "only one"})

    assert response.status_code == 422


def test_request_id_header_is_echoed(client):
    """Test that an incoming request ID is reused."""
    response = client.post(
        "/v1/compare/token_sort_ratio",
        json={"a": "a b", "b": "b a"},
        headers={"x-request-id": "req-123"},
    )

    assert response.headers["X-Request-ID"] == "req-123"
    assert response.json()["request_id"] == "req-123"


@pytest.mark.asyncio
async def test_compare_async_client():
    """Test the app through an async client."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post(
            "/v1/compare/token_set_ratio",
            json={"a": "differences in Rust C++", "b": "Rust differences"},
        )

    assert response.status_code == 200
    assert 0.0 <= response.json()["score"] <= 1.0


def test_compare_all_response_fields(client):
    """Test that the all-strategies response carries only its documented fields."""
    response = client.post("/v1/compare", json={"a": "Hello", "b": "Hallo"})

    assert response.status_code == 200
    assert set(response.json()) == {"request_id", "scores", "timing_ms"}


@pytest.mark.asyncio
async def test_healthz_answers_during_long_comparison():
    """Test that a maximum-size comparison does not block other requests."""
    size = settings.max_input_chars
    a = ("abcdefghij" * (size // 10 + 1))[:size]
    b = ("jihgfedcba" * (size // 10 + 1))[:size]

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test", timeout=60.0) as client:
        compare_task = asyncio.create_task(client.post("/v1/compare", json={"a": a, "b": b}))
        await asyncio.sleep(0.05)

        t0 = time.perf_counter()
        health = await client.get("/healthz")
        health_elapsed = time.perf_counter() - t0
        compare_running = not compare_task.done()

        compare_response = await compare_task

    assert health.status_code == 200
    assert compare_running
    assert health_elapsed < 0.5
    assert compare_response.status_code == 200
