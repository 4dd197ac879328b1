import pytest
from pymongo.errors import PyMongoError

from app.api.deps import get_internship_service
from app.config import settings
from app.core.exceptions import ServerError
from app.main import app
from app.services.internship_service import InternshipFilters, InternshipService


class UnreachableCollection:
    """Collection stand-in whose reads fail the way a lost connection does."""

    async def count_documents(self, *args, **kwargs):
        raise PyMongoError("connection refused")


@pytest.fixture
def broken_internships(client, db):
    service = InternshipService(db)
    service.collection = UnreachableCollection()
    app.dependency_overrides[get_internship_service] = lambda: service
    return service


async def test_store_error_becomes_server_error(db):
    service = InternshipService(db)
    service.collection = UnreachableCollection()

    with pytest.raises(ServerError) as exc_info:
        await service.list_active(InternshipFilters())

    assert exc_info.value.message == "Error fetching internships"
    assert exc_info.value.detail == "connection refused"


async def test_store_error_response_includes_driver_message(client, broken_internships):
    response = await client.get("/api/internships")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "Error fetching internships",
        "error": "connection refused",
    }


async def test_store_error_detail_hidden_in_production(client, broken_internships, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")

    response = await client.get("/api/internships")

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Error fetching internships"}
