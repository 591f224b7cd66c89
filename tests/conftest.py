"""Root conftest — isolated store per test, repository, and HTTP client.

Invariants:
    - Every test gets a fresh SQLite file under tmp_path with the schema created
    - get_db_manager and get_optional_db_manager overridden so routes and the
      /up probe use the test store
    - build_payload returns wire-shaped (camelCase) dicts for POST/PUT bodies

Design Decisions:
    - SQLite file rather than :memory:: every pooled connection sees the same data
      and gets foreign_keys=ON from the connect listener
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from httpx import ASGITransport, AsyncClient

from questlines.infrastructure.database import (
    DatabaseSessionManager, get_db_manager, get_optional_db_manager,
)
from questlines.main import app
from questlines.schemas.questline import QuestlinePayload
from questlines.services.questline_repository import QuestlineRepository


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'questlines.db'}",
    )
    await manager.create_schema()
    yield manager
    await manager.close()


@pytest.fixture
def repo(db_manager):
    return QuestlineRepository(db_manager)


@pytest.fixture
async def client(db_manager):
    """FastAPI test client with the session manager overridden."""
    app.dependency_overrides[get_db_manager] = lambda: db_manager
    app.dependency_overrides[get_optional_db_manager] = lambda: db_manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def build_payload():
    """Factory for questline bodies.

    quests: iterable of (quest_id, completed, [objective ids]) tuples.
    """
    def _build(name="Intro", quests=(), dependencies=(), questline_id=None):
        body = {
            "name": name,
            "quests": [
                {
                    "id": quest_id,
                    "title": f"Quest {quest_id}",
                    "description": f"About {quest_id}",
                    "position": {"x": 10.0 * i, "y": 5.5},
                    "color": "#ff0000" if i % 2 else None,
                    "completed": completed,
                    "objectives": [
                        {"id": oid, "text": f"do {oid}", "completed": False, "sortIndex": j}
                        for j, oid in enumerate(objective_ids)
                    ],
                }
                for i, (quest_id, completed, objective_ids) in enumerate(quests)
            ],
            "dependencies": [{"from": a, "to": b} for a, b in dependencies],
        }
        if questline_id is not None:
            body["id"] = questline_id
        return body
    return _build


@pytest.fixture
def build_model(build_payload):
    """Same factory, validated into a QuestlinePayload for repository calls."""
    def _build(**kwargs):
        return QuestlinePayload.model_validate(build_payload(**kwargs))
    return _build
