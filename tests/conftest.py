# tests/conftest.py
import pytest


class FakeResponse:
    def __init__(self, content=b"", status_code=200, reason="OK"):
        self.content = content
        self.status_code = status_code
        self.reason = reason

    @property
    def ok(self):
        return self.status_code < 400


class FakeSession:
    """Stands in for requests.Session; serves canned responses per URL."""

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.requested = []

    def add(self, url, content=b"", status_code=200, reason="OK"):
        self.responses[url] = FakeResponse(content, status_code, reason)

    def fail(self, url, exc):
        self.responses[url] = exc

    def get(self, url, timeout=None):
        self.requested.append((url, timeout))
        if url not in self.responses:
            return FakeResponse(status_code=404, reason="Not Found")
        response = self.responses[url]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def site(tmp_path, monkeypatch):
    """A working directory holding a ``site/`` folder for source documents."""
    monkeypatch.chdir(tmp_path)
    root = tmp_path / "site"
    root.mkdir()
    return root


@pytest.fixture
def fake_session():
    return FakeSession()
