"""
PostgreSQL fixtures for repository tests

Tables are created on demand and emptied after every test. The whole module
is skipped when the configured database cannot be reached.
"""

import asyncio
from collections.abc import AsyncIterator

import asyncpg
import pytest
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.platform.database.orm_db_setting import Database, create_db_and_tables, dispose_engine


@pytest.fixture
async def database() -> AsyncIterator[Database]:
    try:
        await asyncio.wait_for(create_db_and_tables(), timeout=5)
    except (OSError, SQLAlchemyError, asyncpg.PostgresError) as e:
        await dispose_engine()
        pytest.skip(f'PostgreSQL unavailable: {e}')

    db = Database()
    yield db

    async with db.session() as session:
        await session.execute(text('TRUNCATE TABLE booking, movie, "user" RESTART IDENTITY'))
        await session.commit()
    await dispose_engine()
