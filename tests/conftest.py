# tests/conftest.py
from __future__ import annotations
from typing import Any, Dict, List, Optional
import pytest
from starlette.testclient import TestClient

from livehls.common import settings as settings_mod
from livehls.domain.entities.stream import ProbeResult
from livehls.domain.errors import ResolveError
from livehls.services.api.app import create_app
from livehls.services.api.deps import get_stream_probe
from livehls.services.probe.ytdlp_adapter import parse_ytdlp_json


class FakeProbe:
    """Test double for StreamProbePort: returns a canned payload or raises."""

    def __init__(self, payload: Optional[Dict[str, Any]] = None, error: Optional[ResolveError] = None):
        self.payload = payload or {}
        self.error = error
        self.calls: List[str] = []

    async def probe(self, source_url: str) -> ProbeResult:
        self.calls.append(source_url)
        if self.error is not None:
            raise self.error
        return parse_ytdlp_json(self.payload)


@pytest.fixture(autouse=True)
def _fresh_settings():
    settings_mod.get_settings.cache_clear()
    yield
    settings_mod.get_settings.cache_clear()


@pytest.fixture()
def make_probe():
    return FakeProbe


@pytest.fixture()
def fake_probe(make_probe) -> FakeProbe:
    return make_probe()


@pytest.fixture()
def api_client(fake_probe):
    """
    A TestClient whose `get_stream_probe` dependency is overridden to return
    the per-test FakeProbe, so no yt-dlp process is ever started.
    """
    app = create_app()
    app.dependency_overrides[get_stream_probe] = lambda: fake_probe
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
