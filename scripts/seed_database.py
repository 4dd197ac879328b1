#!/usr/bin/env python3
"""
Seed the database with sample data for local development.

Clears users, internships, applications and profiles, then creates an admin,
a student, a set of internships and one pending application.

Usage:
    python scripts/seed_database.py
"""

import asyncio
import sys
from datetime import timedelta
from pathlib import Path

from motor.motor_asyncio import AsyncIOMotorClient

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.config import settings  # noqa: E402
from app.core.security import get_password_hash  # noqa: E402
from app.db.session import (  # noqa: E402
    APPLICATIONS,
    INTERNSHIPS,
    PROFILES,
    USERS,
    ensure_indexes,
)
from app.utils.helpers import utcnow  # noqa: E402

ADMIN = {"name": "Admin User", "email": "admin@skillbridge.com", "password": "admin123", "role": "admin"}
STUDENT = {"name": "John Doe", "email": "student@skillbridge.com", "password": "student123", "role": "student"}

# (title, company, skills, country, duration, stipend, days until deadline)
SAMPLE_INTERNSHIPS = [
    ("Full Stack Developer Intern", "Infosys Limited",
     ["React", "Node.js", "MongoDB", "Express", "TypeScript"], "India", "6 months", "₹30,000/month", 60),
    ("Backend Developer Intern", "Wipro Technologies",
     ["Node.js", "Express", "MongoDB", "REST API", "Docker"], "India", "6 months", "₹25,000/month", 65),
    ("Frontend Developer Intern", "TCS Digital",
     ["React", "Next.js", "JavaScript", "CSS", "Redux"], "India", "5 months", "₹28,000/month", 45),
    ("Data Science Intern", "Flipkart",
     ["Python", "Machine Learning", "Pandas", "TensorFlow", "SQL"], "India", "6 months", "₹35,000/month", 90),
    ("DevOps Engineer Intern", "Zoho Corporation",
     ["Docker", "Kubernetes", "Jenkins", "AWS", "Linux"], "India", "5 months", "₹30,000/month", 70),
    ("Python Developer Intern", "Freshworks",
     ["Python", "Django", "PostgreSQL", "REST API", "AWS"], "India", "5 months", "₹29,000/month", 75),
    ("Frontend Developer Intern", "TechCorp Solutions",
     ["React", "JavaScript", "HTML", "CSS", "Git"], "USA", "3 months", "$1500/month", 50),
    ("Full Stack Developer Intern", "Digital Innovations Ltd",
     ["React", "Node.js", "PostgreSQL", "TypeScript", "AWS"], "UK", "4 months", "£1200/month", 55),
    ("Mobile App Developer Intern", "AppMasters Inc",
     ["React Native", "JavaScript", "Mobile Development", "Redux", "Firebase"], "Canada", "3 months",
     "CAD 2000/month", 40),
    ("Data Analyst Intern", "Analytics Pro",
     ["Python", "SQL", "Tableau", "Excel", "Statistics"], "Germany", "5 months", "€1000/month", 80),
    ("Cloud Solutions Intern", "CloudTech Systems",
     ["AWS", "Docker", "Kubernetes", "Jenkins", "Linux"], "Singapore", "4 months", "SGD 2500/month", 85),
]


def _description(title: str, company: str, skills) -> str:
    return (
        f"Join {company} as a {title}. Work alongside experienced engineers on "
        f"production projects using {', '.join(skills[:3])} and more."
    )


async def _create_user(db, account: dict, now) -> dict:
    doc = {
        "name": account["name"],
        "email": account["email"],
        "password": get_password_hash(account["password"]),
        "role": account["role"],
        "createdAt": now,
        "updatedAt": now,
    }
    result = await db[USERS].insert_one(doc)
    doc["_id"] = result.inserted_id
    return doc


async def seed_database():
    """Reset collections and load sample data."""
    print("🌱 Seeding SkillBridge database")
    print("=" * 60)

    client = AsyncIOMotorClient(settings.MONGODB_URI)
    db = client[settings.MONGODB_DATABASE]

    try:
        await client.admin.command("ping")
        print(f"✅ Connected to MongoDB ({settings.MONGODB_DATABASE})")

        print("\n🗑️  Clearing existing data...")
        for name in (USERS, INTERNSHIPS, APPLICATIONS, PROFILES):
            await db[name].delete_many({})
        await ensure_indexes(db)
        print("✅ Existing data cleared")

        now = utcnow()

        print("\n👤 Creating users...")
        admin = await _create_user(db, ADMIN, now)
        student = await _create_user(db, STUDENT, now)
        print(f"   Admin:   {ADMIN['email']} / {ADMIN['password']}")
        print(f"   Student: {STUDENT['email']} / {STUDENT['password']}")

        print("\n💼 Creating sample internships...")
        internship_docs = []
        # Oldest first so the first listing is the newest in the public list
        for offset, (title, company, skills, country, duration, stipend, days) in enumerate(
            reversed(SAMPLE_INTERNSHIPS)
        ):
            created_at = now + timedelta(seconds=offset)
            internship_docs.append(
                {
                    "title": title,
                    "company": company,
                    "description": _description(title, company, skills),
                    "skills": skills,
                    "country": country,
                    "duration": duration,
                    "stipend": stipend,
                    "applicationDeadline": now + timedelta(days=days),
                    "isActive": True,
                    "createdBy": admin["_id"],
                    "createdAt": created_at,
                    "updatedAt": created_at,
                }
            )
        result = await db[INTERNSHIPS].insert_many(internship_docs)
        print(f"✅ Created {len(result.inserted_ids)} internships")

        print("\n📝 Creating sample application...")
        first = internship_docs[-1]
        await db[APPLICATIONS].insert_one(
            {
                "internship": first["_id"],
                "student": student["_id"],
                "studentName": student["name"],
                "studentEmail": student["email"],
                "coverLetter": (
                    "I am very interested in this position. I have been learning React "
                    "for the past 6 months and have built several projects."
                ),
                "resume": "https://example.com/resume.pdf",
                "status": "pending",
                "appliedAt": now,
            }
        )
        print("✅ Sample application created")

        print("\n🎉 Database seeded successfully!")
    finally:
        client.close()


if __name__ == "__main__":
    asyncio.run(seed_database())
