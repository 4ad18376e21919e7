from pydantic import field_validator
from typing import Optional, List
from datetime import datetime, timezone

from app.schemas.base import CamelModel
from app.schemas.user import UserSummary
from app.schemas.salon import SalonSummary
from app.models.appointment import AppointmentStatus
from app.models.salon import ServiceCategory

class ServiceSelector(CamelModel):
    """Identifies a catalog entry; price always comes from the catalog"""
    name: Optional[str] = None
    category: Optional[ServiceCategory] = None
    duration: Optional[int] = None

class AppointmentCreate(CamelModel):
    salon: Optional[int] = None
    service: Optional[ServiceSelector] = None
    date: Optional[datetime] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    notes: Optional[str] = None

    @field_validator('date')
    @classmethod
    def normalize_date(cls, v):
        if v is not None and v.tzinfo is not None:
            v = v.astimezone(timezone.utc).replace(tzinfo=None)
        return v

class AppointmentUpdate(CamelModel):
    status: Optional[AppointmentStatus] = None
    notes: Optional[str] = None

class ServiceSnapshot(CamelModel):
    name: str
    category: ServiceCategory
    duration: int
    price: float

class AppointmentResponse(CamelModel):
    id: int
    customer_id: int
    salon_id: int
    customer: Optional[UserSummary] = None
    salon: Optional[SalonSummary] = None
    service: ServiceSnapshot
    date: datetime
    start_time: str
    end_time: str
    status: AppointmentStatus
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class AppointmentEnvelope(CamelModel):
    message: Optional[str] = None
    appointment: AppointmentResponse

class AppointmentListEnvelope(CamelModel):
    appointments: List[AppointmentResponse]

class MessageResponse(CamelModel):
    message: str
