from .auth import AuthService
from .salon_service import SalonService
from .appointment_service import AppointmentService
from .review_service import ReviewService

__all__ = [
    "AuthService",
    "SalonService",
    "AppointmentService",
    "ReviewService",
]
