"""MongoDB client lifecycle and request dependency."""

import logging
from typing import AsyncGenerator, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from app.config import settings

logger = logging.getLogger(__name__)

# Collection names
USERS = "users"
PROFILES = "profiles"
INTERNSHIPS = "internships"
APPLICATIONS = "applications"


class MongoDB:
    """Holds the process-wide motor client."""

    client: Optional[AsyncIOMotorClient] = None
    db: Optional[AsyncIOMotorDatabase] = None


mongodb = MongoDB()


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create the indexes the services rely on for uniqueness and sorting."""
    await db[USERS].create_index("email", unique=True)
    await db[PROFILES].create_index("user", unique=True)

    # One application per (internship, student); the real duplicate guard
    await db[APPLICATIONS].create_index(
        [("internship", ASCENDING), ("student", ASCENDING)],
        unique=True,
        name="unique_internship_student",
    )
    await db[APPLICATIONS].create_index([("student", ASCENDING), ("appliedAt", DESCENDING)])

    await db[INTERNSHIPS].create_index([("isActive", ASCENDING), ("createdAt", DESCENDING)])

    logger.info("MongoDB indexes ensured")


async def init_db() -> None:
    """Connect to MongoDB, verify the connection and create indexes."""
    mongodb.client = AsyncIOMotorClient(
        settings.MONGODB_URI,
        maxPoolSize=settings.MONGODB_MAX_POOL_SIZE,
        minPoolSize=settings.MONGODB_MIN_POOL_SIZE,
        serverSelectionTimeoutMS=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
    )
    mongodb.db = mongodb.client[settings.MONGODB_DATABASE]

    try:
        await mongodb.client.admin.command("ping")
    except Exception as e:
        logger.error(f"❌ Failed to connect to MongoDB: {e}")
        raise

    await ensure_indexes(mongodb.db)
    logger.info(f"✅ Connected to MongoDB: {settings.MONGODB_DATABASE}")


async def close_db() -> None:
    """Close the motor client."""
    if mongodb.client is not None:
        mongodb.client.close()
        logger.info("MongoDB connection closed")
    mongodb.client = None
    mongodb.db = None


async def get_db() -> AsyncGenerator[AsyncIOMotorDatabase, None]:
    """Dependency to get the database handle."""
    if mongodb.db is None:
        raise RuntimeError("Database is not initialized")
    yield mongodb.db
