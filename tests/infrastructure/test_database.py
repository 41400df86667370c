"""Database Session Manager — rollback mapping and health checks."""

import pytest
from sqlalchemy import text

from dog_service.core.errors import PersistenceError
from dog_service.infrastructure.database import DatabaseSessionManager


async def test_health_check_succeeds_on_live_database(db_manager):
    assert await db_manager.health_check() is True


async def test_escaping_sqlalchemy_error_becomes_persistence_error(db_manager):
    with pytest.raises(PersistenceError) as exc_info:
        async with db_manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert exc_info.value.http_status == 500
    assert "no_such_table" not in exc_info.value.to_response()["error"]


async def test_health_check_fails_on_unreachable_database(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path}/missing/dir/dogs.db",
    )
    assert await manager.health_check() is False
    await manager.dispose()


async def test_create_schema_creates_dogs_table(db_manager):
    async with db_manager.session() as db:
        result = await db.execute(text("SELECT COUNT(*) FROM dogs"))
        assert result.scalar_one() == 0
