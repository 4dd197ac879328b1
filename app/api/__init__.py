"""API routes."""

from fastapi import APIRouter

from app.api.routes import applications, auth, internships, profile

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(internships.router, prefix="/internships", tags=["Internships"])
api_router.include_router(applications.router, prefix="/applications", tags=["Applications"])
api_router.include_router(profile.router, prefix="/profile", tags=["Profile"])
