"""
Pytest configuration and fixtures for Dual Pascal tests
"""

import os
import sys
from collections.abc import AsyncGenerator
from datetime import timedelta

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

import dualpascal.database as database_module  # noqa: E402
from dualpascal import models, scheduler  # noqa: E402,F401
from dualpascal.auth import create_access_token, hash_password  # noqa: E402
from dualpascal.database import Base, build_engine, get_db  # noqa: E402
from dualpascal.models.user import RoleEnum, User, UserStatus  # noqa: E402
from main import app  # noqa: E402


@pytest.fixture(scope="function")
async def test_engine(tmp_path):
    """A fresh SQLite database file per test, with foreign keys enforced."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_engine, monkeypatch):
    """Session maker bound to the test engine; background jobs pick it up too."""
    factory = async_sessionmaker(test_engine, class_=AsyncSession, autoflush=False, expire_on_commit=False)
    monkeypatch.setattr(database_module, "AsyncSessionLocal", factory)
    return factory


@pytest.fixture(scope="function")
async def test_db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture(autouse=True)
def enqueued_jobs(monkeypatch) -> list[tuple[str, int]]:
    """
    Record background jobs instead of scheduling them.
    Tests that exercise a job call it directly.
    """
    jobs: list[tuple[str, int]] = []
    monkeypatch.setattr(scheduler, "enqueue_analytics_setup", lambda user_id: jobs.append(("analytics_setup", user_id)))
    monkeypatch.setattr(
        scheduler, "enqueue_contact_notification", lambda contact_id: jobs.append(("contact_notification", contact_id))
    )
    return jobs


@pytest.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client against the app with the test database"""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def _create_user(db: AsyncSession, username: str, password: str, role: RoleEnum = RoleEnum.user) -> User:
    user = User(
        username=username,
        email=f"{username}@example.com",
        hashed_password=hash_password(password),
        role=role,
        status=UserStatus.active,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest.fixture
async def test_user(test_db: AsyncSession) -> User:
    """Create a regular author"""
    return await _create_user(test_db, "testuser", "testpassword")


@pytest.fixture
async def other_user(test_db: AsyncSession) -> User:
    """A second author, for ownership checks"""
    return await _create_user(test_db, "otheruser", "otherpassword")


@pytest.fixture
async def test_admin(test_db: AsyncSession) -> User:
    """Create a test admin user"""
    return await _create_user(test_db, "testadmin", "adminpassword", role=RoleEnum.admin)


def _bearer(user: User) -> dict:
    access_token = create_access_token(data={"sub": user.username}, expires_delta=timedelta(minutes=30))
    return {"Authorization": f"Bearer {access_token}"}


@pytest.fixture
def auth_headers(test_user: User) -> dict:
    return _bearer(test_user)


@pytest.fixture
def other_auth_headers(other_user: User) -> dict:
    return _bearer(other_user)


@pytest.fixture
def admin_auth_headers(test_admin: User) -> dict:
    return _bearer(test_admin)
