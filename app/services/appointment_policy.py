"""Authorization and state rules for appointments.

Everything here is plain data plus pure functions so the rules can be
checked exhaustively without a database. Callers resolve the actor's
relationship to an appointment first, then ask the tables below.
"""
import enum
from typing import Optional

from app.core.exceptions import Forbidden
from app.models.appointment import AppointmentStatus
from app.models.user import UserRole


class Relationship(str, enum.Enum):
    APPOINTMENT_CUSTOMER = "appointment_customer"
    SALON_OWNER = "salon_owner"
    NONE = "none"


TERMINAL_STATUSES = frozenset({AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED})

STATUS_TRANSITIONS = {
    AppointmentStatus.PENDING: frozenset({AppointmentStatus.CONFIRMED, AppointmentStatus.CANCELLED}),
    AppointmentStatus.CONFIRMED: frozenset({AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED}),
    AppointmentStatus.COMPLETED: frozenset(),
    AppointmentStatus.CANCELLED: frozenset(),
}

# (role, relationship) -> statuses that actor may request
STATUS_GRANTS = {
    (UserRole.CUSTOMER, Relationship.APPOINTMENT_CUSTOMER): frozenset({AppointmentStatus.CANCELLED}),
    (UserRole.BUSINESS, Relationship.SALON_OWNER): frozenset({
        AppointmentStatus.CONFIRMED,
        AppointmentStatus.COMPLETED,
    }),
}

# (role, relationship) pairs allowed to view, delete or annotate an appointment
ACCESS_GRANTS = frozenset({
    (UserRole.CUSTOMER, Relationship.APPOINTMENT_CUSTOMER),
    (UserRole.BUSINESS, Relationship.SALON_OWNER),
})


def resolve_relationship(actor_id: int, role: UserRole, customer_id: int,
                         salon_owner_id: Optional[int]) -> Relationship:
    if role == UserRole.CUSTOMER and customer_id == actor_id:
        return Relationship.APPOINTMENT_CUSTOMER
    if role == UserRole.BUSINESS and salon_owner_id is not None and salon_owner_id == actor_id:
        return Relationship.SALON_OWNER
    return Relationship.NONE


def can_access(role: UserRole, relationship: Relationship) -> bool:
    return (role, relationship) in ACCESS_GRANTS


def allowed_statuses(role: UserRole, relationship: Relationship) -> frozenset:
    return STATUS_GRANTS.get((role, relationship), frozenset())


def is_transition_allowed(current: AppointmentStatus, requested: AppointmentStatus) -> bool:
    return requested in STATUS_TRANSITIONS[current]


def permitted_transition(role: UserRole, relationship: Relationship,
                         current: AppointmentStatus, requested: AppointmentStatus) -> bool:
    """True when the actor may move an appointment from current to requested"""
    return requested in allowed_statuses(role, relationship) and is_transition_allowed(current, requested)


def check_status_change(role: UserRole, relationship: Relationship,
                        current: AppointmentStatus, requested: AppointmentStatus) -> None:
    if permitted_transition(role, relationship, current, requested):
        return

    if not can_access(role, relationship):
        raise Forbidden("You don't have permission to update this appointment")

    if requested not in allowed_statuses(role, relationship):
        if role == UserRole.CUSTOMER:
            raise Forbidden("Customers can only cancel appointments")
        raise Forbidden(f"Salon owners cannot set an appointment to {requested.value}")

    if current in TERMINAL_STATUSES:
        raise Forbidden(f"Appointment is already {current.value} and can no longer change status")

    if not is_transition_allowed(current, requested):
        raise Forbidden(f"Cannot move an appointment from {current.value} to {requested.value}")
