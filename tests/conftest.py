from typing import Optional

import pytest

from clusterctl.config import TLSConfig


class FakeAdminAPI:
    """In-memory Admin API double recording every call."""

    def __init__(self, error: Optional[Exception] = None):
        self.error = error
        self.created: list[tuple[str, str]] = []
        self.deleted: list[str] = []
        self.closed = 0

    def create_user(self, username: str, password: str) -> None:
        self.created.append((username, password))
        if self.error is not None:
            raise self.error

    def delete_user(self, username: str) -> None:
        self.deleted.append(username)
        if self.error is not None:
            raise self.error

    def close(self) -> None:
        self.closed += 1


class RecordingBuilder:
    """Client constructor double capturing the URL and TLS it was given."""

    def __init__(self, api: FakeAdminAPI):
        self.api = api
        self.calls: list[tuple[str, Optional[TLSConfig]]] = []

    def __call__(self, url: str, tls: Optional[TLSConfig]) -> FakeAdminAPI:
        self.calls.append((url, tls))
        return self.api


@pytest.fixture
def fake_api() -> FakeAdminAPI:
    return FakeAdminAPI()


@pytest.fixture
def builder(fake_api: FakeAdminAPI) -> RecordingBuilder:
    return RecordingBuilder(fake_api)
