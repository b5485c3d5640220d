from __future__ import annotations

import os
from typing import Callable

import httpx
import pytest

from core.config import AppSettings
from core.domain.models import LookupConfig

TEST_ENDPOINT = "https://lookup.test/safebrowsing/api/lookup"


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for key in list(os.environ):
        if key.upper().startswith("SAFEBROWSING_"):
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def config() -> LookupConfig:
    return AppSettings(endpoint=TEST_ENDPOINT, http_timeout_seconds=5.0).lookup_config()


@pytest.fixture()
def recorded() -> list[httpx.Request]:
    return []


@pytest.fixture()
def make_transport(recorded) -> Callable[..., httpx.MockTransport]:
    def _make(status_code: int = 200, body: str = "", exc: Exception | None = None) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded.append(request)
            if exc is not None:
                raise exc
            return httpx.Response(status_code, text=body)

        return httpx.MockTransport(handler)

    return _make


@pytest.fixture()
def patch_transport(monkeypatch, make_transport):
    """Route every client built by the lookup service through a mock transport."""

    import core.services.lookup as lookup_module

    real_build = lookup_module.build_client

    def _patch(**kwargs) -> None:
        mock = make_transport(**kwargs)

        def fake_build(config, *, transport=None, **kwargs):
            return real_build(config, transport=mock, **kwargs)

        monkeypatch.setattr(lookup_module, "build_client", fake_build)

    return _patch
