"""
Shared fixtures:
- A fixed secret and ready-made engine / session around it
- scripted_indices: a fake random-index source that replays chosen indices
- make_reader: a stand-in for input() fed from a list of lines
- Keep the CODEBREAKER_* environment (and any local .env) out of every test,
  unless the test is marked real_dotenv
"""
import pytest

from codebreaker.code import Code
from codebreaker.config import ENV_MAX_ATTEMPTS, ENV_SECRET
from codebreaker.engine import GameEngine
from codebreaker.session import GameSession, Scoreboard


class ScriptedIndices:
    """Replays a fixed list of indices and remembers the pool sizes it was asked for."""

    def __init__(self, indices):
        self._indices = list(indices)
        self.pool_sizes = []

    def __call__(self, n: int) -> int:
        self.pool_sizes.append(n)
        return self._indices.pop(0)


def _reader_for(lines):
    """Returns each line, then raises EOFError like a closed stdin."""
    remaining = list(lines)

    def read() -> str:
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read


@pytest.fixture(autouse=True)
def _clean_env(request, monkeypatch):
    monkeypatch.delenv(ENV_SECRET, raising=False)
    monkeypatch.delenv(ENV_MAX_ATTEMPTS, raising=False)
    if "real_dotenv" not in request.keywords:
        monkeypatch.setattr("codebreaker.config.load_dotenv", lambda *a, **k: False)
    yield


@pytest.fixture
def scripted_indices():
    return ScriptedIndices


@pytest.fixture
def make_reader():
    return _reader_for


@pytest.fixture
def secret() -> Code:
    return Code("0123")


@pytest.fixture
def engine(secret) -> GameEngine:
    return GameEngine(secret, max_attempts=3)


@pytest.fixture
def scoreboard() -> Scoreboard:
    return Scoreboard()


@pytest.fixture
def session(secret, scoreboard) -> GameSession:
    return GameSession(secret, max_attempts=3, scoreboard=scoreboard)
