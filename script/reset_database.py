#!/usr/bin/env python3
"""
Database Reset Script
Reset the reservation store structure

Features:
1. Drop every reservation table (and the alembic version table)
2. Run Alembic Migrations - create the latest schema

Works for both sqlite+aiosqlite and postgresql+asyncpg DATABASE_URLs.
"""

import asyncio
import os
import subprocess

from sqlalchemy import text

from src.platform.config.core_setting import settings
from src.platform.constant.path import BASE_DIR
from src.platform.database.orm_db_setting import Base, dispose_engine, get_engine
import src.service.call_reservation.driven_adapter.model  # noqa: F401


async def _drop_tables() -> None:
    try:
        async with get_engine().begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.execute(text('DROP TABLE IF EXISTS alembic_version'))
        print('   ✅ Tables dropped')
    finally:
        await dispose_engine()


def _run_alembic_migrations() -> None:
    """Run Alembic migrations"""
    print("   🔄 Running 'alembic upgrade head'...")

    result = subprocess.run(
        ['alembic', 'upgrade', 'head'],
        cwd=BASE_DIR,
        capture_output=True,
        text=True,
        env=os.environ.copy(),
    )

    if result.returncode != 0:
        print(f'   ❌ Migration failed (return code: {result.returncode})')
        if result.stdout:
            print(f'   📋 STDOUT: {result.stdout}')
        if result.stderr:
            print(f'   📋 STDERR: {result.stderr}')
        raise RuntimeError(f'Alembic migration failed with return code {result.returncode}')

    print('   ✅ Database migrations completed')


async def main() -> None:
    print('🔄 Starting database reset...')
    print(f'Database URL: {settings.DATABASE_URL}')
    print('=' * 50)

    try:
        print('🗑️ Dropping tables...')
        await _drop_tables()

        print('🏗️ Running database migrations...')
        _run_alembic_migrations()

        print('=' * 50)
        print('✅ Database reset completed!')
    except Exception as e:
        print(f'❌ Reset failed: {e}')
        exit(1)


if __name__ == '__main__':
    asyncio.run(main())
