from .user import UserCreate, UserLogin, UserResponse, UserSummary, UserEnvelope, Token
from .salon import (
    ServiceCreate, ServiceResponse, SalonCreate, SalonUpdate, SalonResponse,
    SalonSummary, SalonEnvelope, SalonListEnvelope
)
from .appointment import (
    ServiceSelector, AppointmentCreate, AppointmentUpdate, AppointmentResponse,
    AppointmentEnvelope, AppointmentListEnvelope, MessageResponse
)
from .review import ReviewCreate, ReviewResponse, ReviewEnvelope, ReviewListEnvelope

__all__ = [
    "UserCreate", "UserLogin", "UserResponse", "UserSummary", "UserEnvelope", "Token",
    "ServiceCreate", "ServiceResponse", "SalonCreate", "SalonUpdate", "SalonResponse",
    "SalonSummary", "SalonEnvelope", "SalonListEnvelope",
    "ServiceSelector", "AppointmentCreate", "AppointmentUpdate", "AppointmentResponse",
    "AppointmentEnvelope", "AppointmentListEnvelope", "MessageResponse",
    "ReviewCreate", "ReviewResponse", "ReviewEnvelope", "ReviewListEnvelope",
]
