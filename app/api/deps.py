"""
API Dependencies
Service factories bound to the request's database handle
"""

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.db.session import get_db
from app.services.application_service import ApplicationService
from app.services.internship_service import InternshipService
from app.services.profile_service import ProfileService
from app.services.user_service import UserService


def get_user_service(db: AsyncIOMotorDatabase = Depends(get_db)) -> UserService:
    return UserService(db)


def get_internship_service(db: AsyncIOMotorDatabase = Depends(get_db)) -> InternshipService:
    return InternshipService(db)


def get_application_service(db: AsyncIOMotorDatabase = Depends(get_db)) -> ApplicationService:
    return ApplicationService(db)


def get_profile_service(db: AsyncIOMotorDatabase = Depends(get_db)) -> ProfileService:
    return ProfileService(db)
