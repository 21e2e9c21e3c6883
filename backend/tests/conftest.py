import pytest
from fastapi.testclient import TestClient

from main import app
from routes.deps import get_store
from store import SessionStore


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def session_store(clock) -> SessionStore:
    return SessionStore(idle_timeout=10, clock=clock)


@pytest.fixture
def client(session_store):
    app.dependency_overrides[get_store] = lambda: session_store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
