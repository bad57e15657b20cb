"""Shared fixtures: HTTP client and a stubbed AIArchives API."""

from typing import Any, Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

import tools.save_conversation as save_conversation_module
from main import app
from utils.archive_client import AIArchivesClient

ARCHIVE_BASE_URL = "https://archive.test"


class ArchiveStub:
    """Records uploads and answers with a canned response."""

    def __init__(self, status_code: int = 200, json_body: Any = None, text: str = ""):
        self.status_code = status_code
        self.json_body = json_body
        self.text = text
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.json_body is not None:
            return httpx.Response(self.status_code, json=self.json_body)
        return httpx.Response(self.status_code, text=self.text)


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def use_archive(monkeypatch: pytest.MonkeyPatch) -> Callable[..., AIArchivesClient]:
    """Swap the tool's archive client for one backed by ``handler``."""

    def _install(handler: Callable[[httpx.Request], httpx.Response],
                 base_url: str = ARCHIVE_BASE_URL, timeout: float = 5.0) -> AIArchivesClient:
        stub_client = AIArchivesClient(
            base_url=base_url,
            timeout=timeout,
            transport=httpx.MockTransport(handler),
        )
        monkeypatch.setattr(save_conversation_module, "archive_client", stub_client)
        return stub_client

    return _install


@pytest.fixture
def archive_stub(use_archive: Callable[..., AIArchivesClient]) -> Callable[..., ArchiveStub]:
    def _make(status_code: int = 200, json_body: Any = None, text: str = "") -> ArchiveStub:
        stub = ArchiveStub(status_code, json_body, text)
        use_archive(stub)
        return stub

    return _make
