from collections.abc import AsyncGenerator

import pytest

from src.platform.database.orm_db_setting import AsyncEngineManager, Database


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Database on its own engine, disposed in the test's event loop"""
    engine_manager = AsyncEngineManager()
    yield Database(engine_manager=engine_manager)
    await engine_manager.dispose()
