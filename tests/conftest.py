"""Shared fixtures: in-memory MongoDB, HTTP client and seeded users."""

import os

# Must be set before app settings are imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FORMAT", "console")

from datetime import timedelta  # noqa: E402
from typing import Any, Dict, Optional  # noqa: E402

import pytest  # noqa: E402
from bson import ObjectId  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from mongomock_motor import AsyncMongoMockClient  # noqa: E402

from app.core.security import create_access_token, get_password_hash  # noqa: E402
from app.db.session import INTERNSHIPS, USERS, ensure_indexes, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models.user import User  # noqa: E402
from app.utils.helpers import utcnow  # noqa: E402

PASSWORD = "secret123"


@pytest.fixture
async def db():
    client = AsyncMongoMockClient()
    database = client["skillbridge_test"]
    await ensure_indexes(database)
    yield database


@pytest.fixture
async def client(db):
    async def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def create_user(db, name: str, email: str, role: str = "student") -> User:
    now = utcnow()
    doc = {
        "name": name,
        "email": email,
        "password": get_password_hash(PASSWORD),
        "role": role,
        "createdAt": now,
        "updatedAt": now,
    }
    result = await db[USERS].insert_one(doc)
    doc["_id"] = result.inserted_id
    return User.model_validate(doc)


async def create_internship(db, admin: User, **overrides: Any) -> Dict[str, Any]:
    """Insert an internship document directly, bypassing the API."""
    now = utcnow()
    doc = {
        "title": "Backend Developer Intern",
        "company": "Wipro Technologies",
        "description": "Build scalable APIs and microservices.",
        "skills": ["Python", "MongoDB", "REST API"],
        "country": "India",
        "duration": "6 months",
        "stipend": "₹25,000/month",
        "applicationDeadline": now + timedelta(days=1),
        "isActive": True,
        "createdBy": ObjectId(admin.id),
        "createdAt": now,
        "updatedAt": now,
    }
    doc.update(overrides)
    result = await db[INTERNSHIPS].insert_one(doc)
    doc["_id"] = result.inserted_id
    return doc


def auth_headers(user: Optional[User]) -> Dict[str, str]:
    if user is None:
        return {}
    token = create_access_token({"sub": user.id})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def admin(db) -> User:
    return await create_user(db, "Admin User", "admin@skillbridge.com", role="admin")


@pytest.fixture
async def student(db) -> User:
    return await create_user(db, "John Doe", "student@skillbridge.com")


@pytest.fixture
async def other_student(db) -> User:
    return await create_user(db, "Jane Roe", "jane@skillbridge.com")


@pytest.fixture
def admin_headers(admin) -> Dict[str, str]:
    return auth_headers(admin)


@pytest.fixture
def student_headers(student) -> Dict[str, str]:
    return auth_headers(student)


@pytest.fixture
def make_user(db):
    async def factory(name: str, email: str, role: str = "student") -> User:
        return await create_user(db, name, email, role=role)

    return factory


@pytest.fixture
def make_internship(db, admin):
    async def factory(**overrides: Any) -> Dict[str, Any]:
        return await create_internship(db, admin, **overrides)

    return factory


@pytest.fixture
def headers_for():
    return auth_headers
