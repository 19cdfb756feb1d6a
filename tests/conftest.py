"""Shared test fixtures: sample snippets and an API test client."""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from codeverdict.config import Settings
from codeverdict.logger import AnalysisLogger
from codeverdict.main import app


def make_long_function(body_lines: int, indent: str = "   ") -> str:
    """A single brace-balanced function with ``body_lines`` body lines.

    Odd indentation and spaced operators keep unrelated patterns quiet.
    """
    lines = ["function compute(a) {"]
    lines.extend(f"{indent}a += {i};" for i in range(body_lines))
    lines.append("}")
    return "\n".join(lines)


@pytest.fixture
def eval_snippet() -> str:
    return "const result = eval(userInput);"


@pytest.fixture
def var_snippet() -> str:
    return "var count = 0;"


@pytest.fixture
def commented_snippet() -> str:
    """Ten lines, four of them ``//`` comments."""
    return "\n".join(
        [
            "// setup",
            "x = 1",
            "// grow",
            "y = 2",
            "// shrink",
            "z = 3",
            "// done",
            "a = 4",
            "b = 5",
            "c = 6",
        ]
    )


def setup_test_app(
    tmp_path: Path, settings: Settings | None = None
) -> None:
    """Populate app.state the way lifespan startup does."""
    app.state.settings = settings or Settings()
    app.state.logger = AnalysisLogger(
        log_dir=tmp_path / "logs", level="WARNING"
    )


@pytest.fixture
async def client(tmp_path: Path) -> AsyncIterator[AsyncClient]:
    """Test client without auth (no API key configured)."""
    setup_test_app(tmp_path, Settings(api_key=""))
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as c:
        yield c
