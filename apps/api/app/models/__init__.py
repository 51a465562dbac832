"""Expose ORM models."""
from .appointment import Appointment, AppointmentStatus
from .doctor import Doctor
from .hospital import Hospital
from .note import Note
from .profile import MedicalComplication, Organization, SocialPlatform
from .user import Gender, User

__all__ = [
    "Appointment",
    "AppointmentStatus",
    "Doctor",
    "Gender",
    "Hospital",
    "MedicalComplication",
    "Note",
    "Organization",
    "SocialPlatform",
    "User",
]
