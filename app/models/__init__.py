from .user import User, UserRole, Gender
from .salon import Salon, Service, Review, ServiceCategory, SalonGender
from .appointment import Appointment, AppointmentStatus

from sqlalchemy.orm import configure_mappers
configure_mappers()

__all__ = [
    "User", "UserRole", "Gender",
    "Salon", "Service", "Review", "ServiceCategory", "SalonGender",
    "Appointment", "AppointmentStatus",
]
