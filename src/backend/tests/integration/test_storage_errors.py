"""Integration tests for storage failures surfacing as generic 500s."""

import pytest
from sqlalchemy.exc import OperationalError

from solarroots.services.site_service import SiteService

INTERNAL_DETAIL = "disk I/O error on sites table"


@pytest.fixture
def failing_storage(monkeypatch):
    """Make every site listing fail with a database error."""
    async def list_entries(self):
        raise OperationalError("SELECT sites.id FROM sites", {}, Exception(INTERNAL_DETAIL))

    monkeypatch.setattr(SiteService, "list_entries", list_entries)


class TestStorageErrors:
    """Storage errors are logged and reported without internal detail."""

    @pytest.mark.asyncio
    async def test_page_returns_plain_internal_server_error(self, client, failing_storage):
        response = await client.get("/")

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Internal Server Error"

    @pytest.mark.asyncio
    async def test_api_returns_generic_json_error(self, client, failing_storage):
        response = await client.get("/api/sites")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal Server Error"}
        assert INTERNAL_DETAIL not in response.text
        assert "SELECT" not in response.text

    @pytest.mark.asyncio
    async def test_vision_api_returns_generic_json_error(self, client, failing_storage):
        response = await client.get("/api/vision")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal Server Error"}
        assert INTERNAL_DETAIL not in response.text
