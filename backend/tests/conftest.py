import random
import sys
from pathlib import Path

import pytest

# Ensure the backend package is importable when running tests from repo root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from app.generation import GenerationController, get_generation  # noqa: E402
from app.main import app  # noqa: E402
from app.store import RosterStore, get_store  # noqa: E402


@pytest.fixture(name="store")
def store_fixture():
    return RosterStore()


@pytest.fixture(name="generation")
def generation_fixture(store: RosterStore):
    # Long interval: API tests drive state transitions, not ticks.
    return GenerationController(store, interval=60.0, rng=random.Random(1234))


@pytest.fixture(name="client")
def client_fixture(store: RosterStore, generation: GenerationController):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_generation] = lambda: generation
    with TestClient(app) as client:
        yield client
        if generation.is_running:
            client.portal.call(generation.stop)
    app.dependency_overrides.pop(get_store, None)
    app.dependency_overrides.pop(get_generation, None)
