"""Booking and lifecycle rules for appointments.

Mutations return bare ``Appointment`` rows; callers that render a response
pass them through ``AppointmentService.hydrate`` to load the customer and
salon references.
"""
import logging
from datetime import date, datetime, timedelta, timezone
from sqlalchemy.orm import Session, joinedload
from typing import List, Optional

from app.core.config import settings
from app.core.exceptions import Conflict, Forbidden, InvalidArgument, NotFound
from app.models.appointment import Appointment, AppointmentStatus
from app.models.salon import Salon
from app.models.user import User, UserRole
from app.schemas.appointment import AppointmentCreate, AppointmentUpdate
from app.services.appointment_policy import (
    Relationship, can_access, check_status_change, resolve_relationship
)
from app.services.salon_service import SalonService
from app.utils.validators import combine_date_and_time, day_bounds, times_overlap, validate_time

logger = logging.getLogger(__name__)

ACTIVE_STATUSES = (AppointmentStatus.PENDING, AppointmentStatus.CONFIRMED)

class AppointmentService:
    @staticmethod
    def create_appointment(db: Session, appointment_data: AppointmentCreate, actor: User) -> Appointment:
        """Book a catalog service at a salon for the acting customer"""
        if actor.role != UserRole.CUSTOMER:
            raise Forbidden("Only customers can book appointments")

        selector = appointment_data.service
        if (
            appointment_data.salon is None
            or selector is None
            or not selector.name
            or selector.category is None
            or appointment_data.date is None
            or not appointment_data.start_time
            or not appointment_data.end_time
        ):
            raise InvalidArgument("Missing required fields")

        start_time = appointment_data.start_time
        end_time = appointment_data.end_time
        if not validate_time(start_time) or not validate_time(end_time):
            raise InvalidArgument("Start and end time must be in 24hr format (HH:MM)")
        if start_time >= end_time:
            raise InvalidArgument("Start time must be before end time")

        salon = SalonService.get_salon(db, appointment_data.salon)
        if not salon:
            raise NotFound("Salon not found")

        catalog_service = SalonService.find_catalog_service(salon, selector.name, selector.category)
        if not catalog_service:
            raise InvalidArgument(
                f"Salon does not offer '{selector.name}' in {selector.category.value}"
            )

        duration = selector.duration if selector.duration is not None else catalog_service.min_duration
        if duration < catalog_service.min_duration or duration > catalog_service.max_duration:
            raise InvalidArgument(
                f"Duration must be between {catalog_service.min_duration} and "
                f"{catalog_service.max_duration} minutes"
            )

        if settings.REJECT_OVERLAPPING_APPOINTMENTS:
            AppointmentService._ensure_slot_free(db, salon, appointment_data.date, start_time, end_time)

        appointment = Appointment(
            customer_id=actor.id,
            salon_id=salon.id,
            service_name=catalog_service.name,
            service_category=catalog_service.category,
            service_duration=duration,
            service_price=catalog_service.price,
            date=appointment_data.date,
            start_time=start_time,
            end_time=end_time,
            status=AppointmentStatus.PENDING,
            notes=appointment_data.notes
        )

        try:
            db.add(appointment)
            db.commit()
            db.refresh(appointment)
        except Exception:
            db.rollback()
            raise

        logger.info(
            f"Appointment {appointment.id} booked by customer {actor.id} at salon {salon.id} "
            f"on {appointment.date.date()} {start_time}-{end_time}"
        )
        return appointment

    @staticmethod
    def _ensure_slot_free(db: Session, salon: Salon, day: date, start_time: str, end_time: str):
        day_start, day_end = day_bounds(day)
        same_day = db.query(Appointment).filter(
            Appointment.salon_id == salon.id,
            Appointment.date >= day_start,
            Appointment.date < day_end,
            Appointment.status != AppointmentStatus.CANCELLED
        ).all()

        for existing in same_day:
            if times_overlap(start_time, end_time, existing.start_time, existing.end_time):
                raise Conflict(
                    f"Salon already has an appointment from {existing.start_time} to {existing.end_time}"
                )

    @staticmethod
    def _load(db: Session, appointment_id: int) -> Appointment:
        appointment = db.query(Appointment).options(
            joinedload(Appointment.salon)
        ).filter(Appointment.id == appointment_id).first()
        if not appointment:
            raise NotFound("Appointment not found")
        return appointment

    @staticmethod
    def relationship_of(actor: User, appointment: Appointment) -> Relationship:
        salon_owner_id = appointment.salon.owner_id if appointment.salon else None
        return resolve_relationship(actor.id, actor.role, appointment.customer_id, salon_owner_id)

    @staticmethod
    def get_appointment(db: Session, appointment_id: int, actor: User) -> Appointment:
        appointment = AppointmentService._load(db, appointment_id)
        relationship = AppointmentService.relationship_of(actor, appointment)
        if not can_access(actor.role, relationship):
            raise Forbidden("You don't have permission to view this appointment")
        return appointment

    @staticmethod
    def list_appointments(
        db: Session,
        actor: User,
        status: Optional[AppointmentStatus] = None,
        day: Optional[date] = None
    ) -> List[Appointment]:
        """Appointments visible to the actor, ordered by date then start time"""
        query = AppointmentService._with_references(db.query(Appointment))

        if actor.role == UserRole.BUSINESS:
            salon_ids = SalonService.find_owned_salon_ids(db, actor.id)
            query = query.filter(Appointment.salon_id.in_(salon_ids))
        else:
            query = query.filter(Appointment.customer_id == actor.id)

        if status:
            query = query.filter(Appointment.status == status)

        if day:
            day_start, day_end = day_bounds(day)
            query = query.filter(Appointment.date >= day_start, Appointment.date < day_end)

        return query.order_by(Appointment.date.asc(), Appointment.start_time.asc(), Appointment.id.asc()).all()

    @staticmethod
    def update_appointment(
        db: Session,
        appointment_id: int,
        appointment_data: AppointmentUpdate,
        actor: User
    ) -> Appointment:
        """Apply a status transition and/or a notes overwrite"""
        notes_given = "notes" in appointment_data.model_fields_set
        if appointment_data.status is None and not notes_given:
            raise InvalidArgument("Nothing to update: provide status or notes")

        appointment = AppointmentService._load(db, appointment_id)
        relationship = AppointmentService.relationship_of(actor, appointment)
        current_status = appointment.status

        if appointment_data.status is not None:
            check_status_change(actor.role, relationship, current_status, appointment_data.status)
        elif not can_access(actor.role, relationship):
            raise Forbidden("You don't have permission to update this appointment")

        values = {}
        query = db.query(Appointment).filter(Appointment.id == appointment.id)
        if appointment_data.status is not None:
            values[Appointment.status] = appointment_data.status
            # compare-and-swap against the status the permission check saw
            query = query.filter(Appointment.status == current_status)
        if notes_given:
            values[Appointment.notes] = appointment_data.notes

        try:
            updated = query.update(values, synchronize_session=False)
            if not updated:
                db.rollback()
                raise Conflict("Appointment was changed by another request; reload and retry")
            db.commit()
        except Conflict:
            raise
        except Exception:
            db.rollback()
            raise

        db.refresh(appointment)
        if appointment_data.status is not None:
            logger.info(
                f"Appointment {appointment.id} moved {current_status.value} -> "
                f"{appointment.status.value} by {actor.role.value} {actor.id}"
            )
        return appointment

    @staticmethod
    def delete_appointment(db: Session, appointment_id: int, actor: User):
        appointment = AppointmentService._load(db, appointment_id)
        relationship = AppointmentService.relationship_of(actor, appointment)
        if not can_access(actor.role, relationship):
            raise Forbidden("You don't have permission to delete this appointment")

        if relationship == Relationship.APPOINTMENT_CUSTOMER and appointment.status in ACTIVE_STATUSES:
            cutoff = timedelta(hours=settings.CUSTOMER_DELETE_CUTOFF_HOURS)
            starts_at = combine_date_and_time(appointment.date, appointment.start_time)
            now = datetime.now(timezone.utc).replace(tzinfo=None)
            if starts_at - now < cutoff:
                raise Forbidden(
                    f"Cannot delete appointments less than {settings.CUSTOMER_DELETE_CUTOFF_HOURS} hours in advance"
                )

        try:
            db.delete(appointment)
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info(f"Appointment {appointment_id} deleted by {actor.role.value} {actor.id}")
        return {"message": "Appointment deleted successfully"}

    @staticmethod
    def _with_references(query):
        return query.options(
            joinedload(Appointment.customer),
            joinedload(Appointment.salon)
        )

    @staticmethod
    def hydrate(db: Session, appointment: Appointment) -> Appointment:
        """Reload an appointment with customer and salon for the response"""
        return AppointmentService._with_references(
            db.query(Appointment)
        ).filter(Appointment.id == appointment.id).first()
