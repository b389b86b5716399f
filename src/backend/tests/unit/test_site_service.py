"""Unit tests for SiteService."""

import pytest
from sqlalchemy import func, select

from solarroots.db.models import Tag
from solarroots.db.seed import DEMO_SITES, seed_directory
from solarroots.services.site_service import SiteService


class TestSiteService:
    """Tests for SiteService."""

    @pytest.mark.asyncio
    async def test_create_site(self, db_session):
        """Test creating a site with tags."""
        service = SiteService(db_session)

        entry = await service.create(
            name="Sunrise Co-op",
            description="Worker-owned solar installation cooperative.",
            website="https://sunrisecoop.example.com",
            tags=["solar", "cooperative"],
        )

        assert entry.id is not None
        assert entry.name == "Sunrise Co-op"
        assert entry.tags == ("solar", "cooperative")

    @pytest.mark.asyncio
    async def test_create_site_without_optional_fields(self, db_session):
        service = SiteService(db_session)

        entry = await service.create(name="Bare Site", description="", website="")

        assert entry.description is None
        assert entry.website is None
        assert entry.tags == ()

    @pytest.mark.asyncio
    async def test_create_normalizes_tags(self, db_session):
        """Test that tags are stripped and de-duplicated in order."""
        service = SiteService(db_session)

        entry = await service.create(name="Tagged", tags=[" solar", "wind", "solar", " ", "wind "])

        assert entry.tags == ("solar", "wind")

    @pytest.mark.asyncio
    async def test_tags_are_shared_between_sites(self, db_session):
        """Test that an existing tag label is reused rather than duplicated."""
        service = SiteService(db_session)

        await service.create(name="One", tags=["solar"])
        await service.create(name="Two", tags=["solar", "cooperative"])

        count = (await db_session.execute(select(func.count()).select_from(Tag))).scalar()
        assert count == 2

    @pytest.mark.asyncio
    async def test_get_site(self, db_session):
        """Test getting a site by ID."""
        service = SiteService(db_session)
        created = await service.create(name="Get Test", tags=["solar"])

        entry = await service.get(created.id)

        assert entry is not None
        assert entry.name == "Get Test"
        assert entry.tags == ("solar",)

    @pytest.mark.asyncio
    async def test_get_site_not_found(self, db_session):
        service = SiteService(db_session)
        assert await service.get(9999) is None

    @pytest.mark.asyncio
    async def test_list_entries_newest_first(self, db_session):
        """Test listing sites orders newest first."""
        service = SiteService(db_session)

        first = await service.create(name="First", tags=["solar"])
        second = await service.create(name="Second", tags=["cooperative"])

        entries = await service.list_entries()

        assert [e.id for e in entries] == [second.id, first.id]
        assert entries[0].tags == ("cooperative",)

    @pytest.mark.asyncio
    async def test_list_entries_empty(self, db_session):
        service = SiteService(db_session)
        assert await service.list_entries() == []


class TestSeedDirectory:
    """Tests for demo seeding."""

    @pytest.mark.asyncio
    async def test_seeds_empty_directory(self, db_session):
        created = await seed_directory(db_session)

        entries = await SiteService(db_session).list_entries()
        assert created == len(DEMO_SITES)
        assert {e.name for e in entries} == {"SolarRoots Community", "Sunrise Co-op"}
        tags_by_name = {e.name: e.tags for e in entries}
        assert tags_by_name["SolarRoots Community"] == ("solar", "regenerative")
        assert tags_by_name["Sunrise Co-op"] == ("solar", "cooperative")

    @pytest.mark.asyncio
    async def test_seed_is_idempotent(self, db_session):
        await seed_directory(db_session)
        assert await seed_directory(db_session) == 0

        entries = await SiteService(db_session).list_entries()
        assert len(entries) == len(DEMO_SITES)
