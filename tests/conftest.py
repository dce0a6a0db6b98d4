"""
Global pytest fixtures for the httpauth test suite.

Responsibilities:
    - Provide a recording verification predicate whose answer tests can flip
    - Provide a tiny downstream ASGI app that writes "test-good"
    - Provide a TestClient over that app wrapped by the middleware
    - Provide a fresh TestClient for the demo app factory
"""

from typing import List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient
from starlette.responses import PlainTextResponse

from httpauth import basic
from main import create_app

REALM = "test-realm"


class RecordingVerifier:
    """
    Predicate double: remembers the last pair it saw and answers `not fail`.
    """

    def __init__(self):
        self.fail = False
        self.calls: List[Tuple[str, str]] = []

    def __call__(self, username: str, password: str) -> bool:
        self.calls.append((username, password))
        return not self.fail

    @property
    def last(self) -> Optional[Tuple[str, str]]:
        return self.calls[-1] if self.calls else None


async def _good_app(scope, receive, send):
    if scope["type"] == "lifespan":
        return
    await PlainTextResponse("test-good")(scope, receive, send)


@pytest.fixture
def good_app():
    """Downstream ASGI app: always 200 "test-good"."""
    return _good_app


@pytest.fixture
def verifier() -> RecordingVerifier:
    return RecordingVerifier()


@pytest.fixture
def protected(good_app, verifier) -> TestClient:
    """TestClient over `good_app` behind Basic auth with realm "test-realm"."""
    return TestClient(basic(REALM, good_app, verifier))


@pytest.fixture
def client() -> TestClient:
    """
    Provide a fresh TestClient with a new demo app instance.

    Notes:
        - Realm and users are injected so tests do not depend on the environment.
    """
    app = create_app(realm="private area", auth_func=lambda u, p: (u, p) == ("test", "nothing"))
    return TestClient(app)
