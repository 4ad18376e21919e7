from datetime import date as date_type
from fastapi import APIRouter, Depends, Query, status as http_status
from sqlalchemy.orm import Session
from typing import Optional

from app.database import get_db
from app.core.dependencies import get_current_user, require_role
from app.models.appointment import AppointmentStatus
from app.models.user import User, UserRole
from app.schemas.appointment import (
    AppointmentCreate, AppointmentUpdate, AppointmentResponse,
    AppointmentEnvelope, AppointmentListEnvelope, MessageResponse
)
from app.services.appointment_service import AppointmentService

router = APIRouter()

require_booking_customer = require_role([UserRole.CUSTOMER], "Only customers can book appointments")

def _render(db: Session, appointment) -> AppointmentResponse:
    return AppointmentResponse.model_validate(AppointmentService.hydrate(db, appointment))

@router.get("", response_model=AppointmentListEnvelope)
def get_appointments(
    status: Optional[AppointmentStatus] = Query(None),
    date: Optional[date_type] = Query(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Appointments of the current customer, or of the current owner's salons"""
    appointments = AppointmentService.list_appointments(db, current_user, status, date)
    return {"appointments": [AppointmentResponse.model_validate(a) for a in appointments]}

@router.post("", response_model=AppointmentEnvelope, status_code=http_status.HTTP_201_CREATED)
def create_appointment(
    appointment_data: AppointmentCreate,
    current_user: User = Depends(require_booking_customer),
    db: Session = Depends(get_db)
):
    """Book an appointment (customers only)"""
    appointment = AppointmentService.create_appointment(db, appointment_data, current_user)
    return {"message": "Appointment created successfully", "appointment": _render(db, appointment)}

@router.get("/{appointment_id}", response_model=AppointmentEnvelope)
def get_appointment(
    appointment_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    appointment = AppointmentService.get_appointment(db, appointment_id, current_user)
    return {"appointment": _render(db, appointment)}

@router.patch("/{appointment_id}", response_model=AppointmentEnvelope)
def update_appointment(
    appointment_id: int,
    appointment_data: AppointmentUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Change status and/or notes"""
    appointment = AppointmentService.update_appointment(db, appointment_id, appointment_data, current_user)
    return {"message": "Appointment updated successfully", "appointment": _render(db, appointment)}

@router.delete("/{appointment_id}", response_model=MessageResponse)
def delete_appointment(
    appointment_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return AppointmentService.delete_appointment(db, appointment_id, current_user)
