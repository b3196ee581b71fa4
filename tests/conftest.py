import random
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from taskgraph.config import load_settings  # noqa: E402
from taskgraph.core.graph import TaskGraph  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    monkeypatch.delenv("TASKGRAPH_VERIFY_INVARIANTS", raising=False)
    monkeypatch.delenv("TASKGRAPH_LOG_LEVEL", raising=False)
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


@pytest.fixture
def random_graph():
    def _build(seed: int, n: int = 12, m: int = 24, low: int = -5, high: int = 9) -> TaskGraph:
        rng = random.Random(seed)
        edges = [(rng.randrange(n), rng.randrange(n), rng.randint(low, high)) for _ in range(m)]
        return TaskGraph(n, edges)

    return _build
