import logging
from datetime import datetime


PROFILE = {
    "bio": "Final-year CS student who likes backend work.",
    "phone": "+91 98765 43210",
    "location": "Bangalore",
    "skills": ["Python", "FastAPI", "MongoDB", "Docker"],
    "education": [
        {
            "school": "IIT Bombay",
            "degree": "B.Tech",
            "field": "Computer Science",
            "startDate": "2021-08",
            "endDate": "2025-05",
            "current": True,
        }
    ],
    "projects": [
        {
            "title": "Job board",
            "technologies": ["React", "Node.js"],
            "link": "https://github.com/johndoe/job-board",
        }
    ],
    "github": "https://github.com/johndoe",
}


async def test_get_missing_profile(client, student_headers):
    response = await client.get("/api/profile/me", headers=student_headers)

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Profile not found"}


async def test_profile_requires_auth(client):
    assert (await client.get("/api/profile/me")).status_code == 401
    assert (await client.put("/api/profile", json={"bio": "x"})).status_code == 401


async def test_create_and_read_profile(client, student, student_headers):
    created = await client.post("/api/profile", json=PROFILE, headers=student_headers)

    assert created.status_code == 201
    assert created.json()["message"] == "Profile created successfully"

    response = await client.get("/api/profile/me", headers=student_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["user"] == {"_id": student.id, "name": "John Doe", "email": "student@skillbridge.com"}
    assert data["skills"] == ["Python", "FastAPI", "MongoDB", "Docker"]
    assert data["projects"][0]["technologies"] == ["React", "Node.js"]
    assert data["github"] == "https://github.com/johndoe"


async def test_current_entry_drops_end_date(client, student_headers):
    response = await client.post("/api/profile", json=PROFILE, headers=student_headers)

    education = response.json()["data"]["education"][0]
    assert education["current"] is True
    assert education["endDate"] is None


async def test_create_twice_is_rejected(client, student_headers):
    await client.post("/api/profile", json=PROFILE, headers=student_headers)

    response = await client.post("/api/profile", json={"bio": "again"}, headers=student_headers)

    assert response.status_code == 400
    assert response.json()["message"] == "Profile already exists. Use PUT to update."


async def test_put_creates_then_updates(client, student_headers):
    created = await client.put("/api/profile", json={"bio": "First draft"}, headers=student_headers)
    assert created.status_code == 201
    assert created.json()["data"]["bio"] == "First draft"

    updated = await client.put(
        "/api/profile", json={"location": "Pune", "skills": ["Go", "Rust"]}, headers=student_headers
    )
    assert updated.status_code == 200
    assert updated.json()["message"] == "Profile updated successfully"
    data = updated.json()["data"]
    assert data["bio"] == "First draft"
    assert data["location"] == "Pune"
    assert data["skills"] == ["Go", "Rust"]


async def test_profiles_are_per_user(client, other_student, student_headers, headers_for):
    await client.post("/api/profile", json={"bio": "John"}, headers=student_headers)

    response = await client.get("/api/profile/me", headers=headers_for(other_student))
    assert response.status_code == 404


async def test_bio_length_limit(client, student_headers):
    ok = await client.post("/api/profile", json={"bio": "x" * 500}, headers=student_headers)
    assert ok.status_code == 201

    too_long = await client.put("/api/profile", json={"bio": "x" * 501}, headers=student_headers)
    assert too_long.status_code == 400


async def test_education_entry_requires_school(client, student_headers):
    entry = {k: v for k, v in PROFILE["education"][0].items() if k != "school"}

    response = await client.post("/api/profile", json={"education": [entry]}, headers=student_headers)
    assert response.status_code == 400


async def test_delete_profile(client, student_headers):
    await client.post("/api/profile", json=PROFILE, headers=student_headers)

    deleted = await client.delete("/api/profile", headers=student_headers)
    assert deleted.status_code == 200
    assert deleted.json() == {"success": True, "message": "Profile deleted successfully"}

    assert (await client.get("/api/profile/me", headers=student_headers)).status_code == 404


async def test_delete_missing_profile(client, student_headers):
    response = await client.delete("/api/profile", headers=student_headers)
    assert response.status_code == 404


async def test_put_null_list_clears_it(client, student_headers):
    await client.put("/api/profile", json={"skills": ["Go"]}, headers=student_headers)

    response = await client.put(
        "/api/profile", json={"bio": "x", "skills": None}, headers=student_headers
    )
    assert response.status_code == 200
    assert response.json()["data"]["skills"] == []

    fetched = await client.get("/api/profile/me", headers=student_headers)
    assert fetched.status_code == 200
    assert fetched.json()["data"]["skills"] == []
    assert fetched.json()["data"]["bio"] == "x"


async def test_post_null_list_is_stored_empty(client, student_headers):
    response = await client.post("/api/profile", json={"education": None}, headers=student_headers)
    assert response.status_code == 201
    assert response.json()["data"]["education"] == []

    fetched = await client.get("/api/profile/me", headers=student_headers)
    assert fetched.status_code == 200
    assert fetched.json()["data"]["education"] == []


async def test_put_refreshes_updated_at_only(client, student_headers, monkeypatch):
    clock = iter([datetime(2026, 3, 1, 9, 0, 0), datetime(2026, 3, 2, 9, 0, 0)])
    monkeypatch.setattr("app.services.profile_service.utcnow", lambda: next(clock))

    first = (await client.put("/api/profile", json={"bio": "v1"}, headers=student_headers)).json()
    second = (await client.put("/api/profile", json={"bio": "v2"}, headers=student_headers)).json()

    assert first["data"]["createdAt"] == first["data"]["updatedAt"]
    assert second["data"]["createdAt"] == first["data"]["createdAt"]
    assert second["data"]["updatedAt"] > first["data"]["updatedAt"]
    assert second["data"]["updatedAt"].startswith("2026-03-02T09:00:00")


async def test_service_logs_do_not_contain_email(client, student, student_headers, caplog):
    caplog.set_level(logging.INFO, logger="app.services.profile_service")

    await client.post("/api/profile", json={"bio": "Hello"}, headers=student_headers)

    assert student.id in caplog.text
    assert student.email not in caplog.text
