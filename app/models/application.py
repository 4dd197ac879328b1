"""Application model."""

from enum import Enum
from typing import Dict, FrozenSet, Optional, Union

from app.db.base import Base, ObjectIdStr, UTCDateTime
from app.models.internship import InternshipBrief
from app.models.user import UserBrief


class ApplicationStatus(str, Enum):
    """
    Application status.

    The client shows pending -> reviewed/interview -> accepted/rejected, but
    no ordering is enforced server-side: any accepted value may replace any
    other.
    """

    PENDING = "pending"
    REVIEWED = "reviewed"
    INTERVIEW = "interview"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


# Which statuses each status-changing operation accepts.
# "interview" is a valid stored status but the admin status update does not
# accept it.
ACCEPTED_STATUSES: Dict[str, FrozenSet[ApplicationStatus]] = {
    "update_status": frozenset(
        {
            ApplicationStatus.PENDING,
            ApplicationStatus.REVIEWED,
            ApplicationStatus.ACCEPTED,
            ApplicationStatus.REJECTED,
        }
    ),
}


class Application(Base):
    """A student's application to one internship."""

    internship: Union[InternshipBrief, ObjectIdStr, None] = None
    student: Union[UserBrief, ObjectIdStr, None] = None

    # Snapshot of the student's identity at submission; never re-synced
    student_name: str
    student_email: str

    cover_letter: str
    resume: str = ""
    status: ApplicationStatus = ApplicationStatus.PENDING
    applied_at: Optional[UTCDateTime] = None

    def __repr__(self):
        return f"<Application {self.student} -> {self.internship}>"
