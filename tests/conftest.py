# tests/conftest.py

from typing import AsyncGenerator, Awaitable, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from vendor_registry.db.base import Base, get_db
from vendor_registry.domain import Vendor
from vendor_registry.main import app as main_app


# --- Database fixtures ---
# Every test gets its own SQLite file so committed rows never leak between tests
# and separate sessions really are separate connections (needed for race tests).
@pytest_asyncio.fixture(scope="function")
async def test_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'vendors.db'}",
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture(scope="function")
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture(scope="function")
def vendor_factory(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[..., Awaitable[list[Vendor]]]:
    """
    Returns a coroutine that commits vendors with the given explicit ids,
    each with a unique email derived from its id.
    """
    async def _create_vendors(*ids: int, partner_type: str = "Supplier") -> list[Vendor]:
        vendors = [
            Vendor(
                id=vendor_id,
                name=f"Vendor {vendor_id}",
                contact_person="Pat Doe",
                email=f"vendor{vendor_id}@example.com",
                partner_type=partner_type,
            )
            for vendor_id in ids
        ]
        async with session_factory() as session:
            session.add_all(vendors)
            await session.commit()
        return vendors
    return _create_vendors


@pytest.fixture(scope="function")
def stored_ids(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[], Awaitable[list[int]]]:
    """Returns a coroutine reading the committed vendor ids through a fresh session."""
    async def _read() -> list[int]:
        async with session_factory() as session:
            result = await session.execute(select(Vendor.id).order_by(Vendor.id))
            return list(result.scalars().all())
    return _read


# --- HTTP client fixture ---
@pytest_asyncio.fixture(scope="function")
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient against the app, with get_db bound to the per-test database."""

    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    main_app.dependency_overrides[get_db] = _override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=main_app), base_url="http://test"
    ) as ac:
        yield ac
    main_app.dependency_overrides.clear()
