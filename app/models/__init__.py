"""Document models."""

from app.models.user import Role, User, UserBrief
from app.models.internship import Internship, InternshipBrief
from app.models.application import ACCEPTED_STATUSES, Application, ApplicationStatus
from app.models.profile import EducationEntry, ExperienceEntry, Profile, ProjectEntry

# Export all models
__all__ = [
    "Role",
    "User",
    "UserBrief",
    "Internship",
    "InternshipBrief",
    "Application",
    "ApplicationStatus",
    "ACCEPTED_STATUSES",
    "Profile",
    "EducationEntry",
    "ExperienceEntry",
    "ProjectEntry",
]
