"""Tests for API routes using httpx AsyncClient."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from codeverdict.config import Settings
from codeverdict.main import app
from tests.conftest import setup_test_app


async def _client_with(
    tmp_path: Path, settings: Settings
) -> AsyncClient:
    setup_test_app(tmp_path, settings)
    return AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    )


class TestHealthRoutes:
    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient) -> None:
        resp = await client.get("/api/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert "version" in data
        assert "timestamp" in data


class TestAnalyzeRoute:
    @pytest.mark.asyncio
    async def test_analyze_success(
        self, client: AsyncClient, eval_snippet: str
    ) -> None:
        resp = await client.post(
            "/api/analyze",
            json={"code": eval_snippet, "file_name": "app.js"},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        data = body["data"]
        assert data["language"] == "javascript"
        assert data["file_name"] == "app.js"
        assert data["detection_method"] == "hybrid-analysis"
        assert 0 <= data["ai_probability"] <= 100
        assert 50 <= data["confidence_score"] <= 100
        security = [
            p for p in data["patterns"] if p["pattern_type"] == "security"
        ]
        assert [p["pattern_name"] for p in security] == ["Eval Usage"]
        assert [s["title"] for s in data["suggestions"]] == ["Avoid eval()"]
        assert len(body["metadata"]["request_id"]) == 12
        assert body["metadata"]["likelihood"] in ("high", "medium", "low")

    @pytest.mark.asyncio
    async def test_empty_code_allowed(self, client: AsyncClient) -> None:
        resp = await client.post("/api/analyze", json={"code": ""})
        body = resp.json()
        assert body["success"] is True
        assert body["data"]["ai_probability"] == 36.5
        assert body["data"]["confidence_score"] == 69.63

    @pytest.mark.asyncio
    async def test_missing_code_rejected(self, client: AsyncClient) -> None:
        resp = await client.post("/api/analyze", json={"language": "go"})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_code_too_long(self, tmp_path: Path) -> None:
        settings = Settings(api_key="", max_code_chars=10)
        async with await _client_with(tmp_path, settings) as c:
            resp = await c.post("/api/analyze", json={"code": "x" * 11})
        body = resp.json()
        assert body["success"] is False
        assert body["error"] == "Code exceeds 10 characters"

    @pytest.mark.asyncio
    async def test_analysis_failure_is_enveloped(
        self,
        client: AsyncClient,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        def _boom(*args: object) -> None:
            raise RuntimeError("regex exploded")

        monkeypatch.setattr(
            "codeverdict.api.routes.analyze.analyze_code", _boom
        )
        resp = await client.post("/api/analyze", json={"code": "x"})
        body = resp.json()
        assert body["success"] is False
        assert body["error"] == "Analysis failed"
        assert "request_id" in body["metadata"]

    @pytest.mark.asyncio
    async def test_request_logged(self, client: AsyncClient) -> None:
        request_logger = MagicMock()
        app.state.logger = request_logger
        await client.post(
            "/api/analyze", json={"code": "var a = 1;", "file_name": "a.js"}
        )
        request_logger.log_analysis.assert_called_once()
        kwargs = request_logger.log_analysis.call_args.kwargs
        assert kwargs["file_name"] == "a.js"
        assert kwargs["code_chars"] == 10
        assert kwargs["suggestion_count"] == 1


class TestAPIKey:
    @pytest.mark.asyncio
    async def test_missing_key_rejected(self, tmp_path: Path) -> None:
        async with await _client_with(
            tmp_path, Settings(api_key="secret")
        ) as c:
            resp = await c.post("/api/analyze", json={"code": "x"})
        assert resp.status_code == 401
        body = resp.json()
        assert body["success"] is False
        assert body["error"] == "Invalid or missing API key"

    @pytest.mark.asyncio
    async def test_wrong_key_rejected(self, tmp_path: Path) -> None:
        async with await _client_with(
            tmp_path, Settings(api_key="secret")
        ) as c:
            resp = await c.post(
                "/api/analyze",
                json={"code": "x"},
                headers={"X-API-Key": "guess"},
            )
        assert resp.status_code == 401

    @pytest.mark.asyncio
    async def test_valid_key_accepted(self, tmp_path: Path) -> None:
        async with await _client_with(
            tmp_path, Settings(api_key="secret")
        ) as c:
            resp = await c.post(
                "/api/analyze",
                json={"code": "x"},
                headers={"X-API-Key": "secret"},
            )
        assert resp.status_code == 200
        assert resp.json()["success"] is True

    @pytest.mark.asyncio
    async def test_health_is_public(self, tmp_path: Path) -> None:
        async with await _client_with(
            tmp_path, Settings(api_key="secret")
        ) as c:
            resp = await c.get("/api/health")
        assert resp.status_code == 200
