"""Root conftest — shared test configuration and fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database and a fresh app
    - The app's db_manager is set directly on app.state (the lifespan does not
      run under ASGITransport)
    - FakeDogRepository records every call so tests can assert short-circuits

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Fresh create_app() per test: dependency overrides never leak between tests
"""

import os

# Must be set before dog_service.main builds its module-level app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from dog_service.config import Settings  # noqa: E402
from dog_service.core.domain_types import (  # noqa: E402
    Dog, DogId, DogOperation, GatewayFailure,
)
from dog_service.infrastructure.database import DatabaseSessionManager  # noqa: E402
from dog_service.main import create_app  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class FakeDogRepository:
    """In-memory DogRepository with scriptable failures.

    failures: method name -> cause, returned as a GatewayFailure
    raises: exception raised from every method (simulates a bug)
    """

    def __init__(self):
        self.dogs: dict[int, Dog] = {}
        self.next_id = 1
        self.calls: list[str] = []
        self.failures: dict[str, str] = {}
        self.raises: Exception | None = None

    def _enter(self, method: str, operation: DogOperation) -> GatewayFailure | None:
        self.calls.append(method)
        if self.raises:
            raise self.raises
        if method in self.failures:
            return GatewayFailure(operation, self.failures[method])
        return None

    async def create(self, fields):
        if failure := self._enter("create", DogOperation.CREATE):
            return failure
        dog = Dog(id=DogId(self.next_id), **fields)
        self.dogs[dog.id] = dog
        self.next_id += 1
        return dog

    async def find_one(self, dog_id):
        if failure := self._enter("find_one", DogOperation.GET):
            return failure
        return self.dogs.get(dog_id)

    async def find_many(self):
        if failure := self._enter("find_many", DogOperation.LIST):
            return failure
        return list(self.dogs.values())

    async def update(self, dog_id, fields):
        if failure := self._enter("update", DogOperation.UPDATE):
            return failure
        current = self.dogs.get(dog_id)
        if current is None:
            return GatewayFailure(DogOperation.UPDATE, "Record to update not found")
        updated = Dog(**{**current.to_dict(), **fields})
        self.dogs[dog_id] = updated
        return updated

    async def delete(self, dog_id):
        if failure := self._enter("delete", DogOperation.DELETE):
            return failure
        if dog_id not in self.dogs:
            return GatewayFailure(DogOperation.DELETE, "Record to delete does not exist")
        del self.dogs[dog_id]
        return None


@pytest.fixture
def fake_repository():
    return FakeDogRepository()


@pytest.fixture
def test_settings():
    return Settings(
        database_url=TEST_DATABASE_URL, environment="test", log_format="text",
    )


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager(TEST_DATABASE_URL)
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
def app(test_settings, db_manager):
    application = create_app(test_settings)
    application.state.db_manager = db_manager
    return application


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def rex():
    return {"name": "Rex", "breed": "Lab", "description": "Friendly", "age": 3}
