"""Test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from solarroots.config import Settings
from solarroots.context import AppContext
from solarroots.db import Base, get_db
from solarroots.db.session import enable_sqlite_foreign_keys
from solarroots.main import app
from solarroots.services.vision_loader import load_vision_config

# Use SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_VISION_YAML = """\
mission: Connect community solar cooperatives.
pillars:
  - id: ownership
    title: Community ownership
    description: Member-governed projects.
directory_targets:
  minimum_sites: 2
  minimum_tag_density: 1.5
  recommended_tags:
    - solar
    - cooperative
  storytelling_focus:
    - community
"""


@pytest.fixture
def vision_config():
    """Vision config with small, easy-to-reach targets."""
    return load_vision_config(TEST_VISION_YAML)


@pytest.fixture
def app_context(vision_config):
    return AppContext(
        settings=Settings(seed_demo_data=False),
        vision=vision_config,
        vision_document=TEST_VISION_YAML.strip(),
    )


@pytest.fixture
async def db_engine():
    """Create test database engine."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine):
    """Create test database session."""
    async_session = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as session:
        yield session


@pytest.fixture
async def client(db_session, app_context):
    """Create test client with database session and vision context overrides."""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.state.context = app_context

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
    del app.state.context
