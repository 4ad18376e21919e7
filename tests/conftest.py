from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import create_access_token, get_password_hash
from app.database import Base, get_db
from app.main import app
from app.models import (
    Appointment, AppointmentStatus, Gender, Salon, SalonGender, Service, ServiceCategory,
    User, UserRole
)

PASSWORD = "secret123"
PASSWORD_HASH = get_password_hash(PASSWORD)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_user(db, email, role=UserRole.CUSTOMER, first_name="Test"):
    user = User(
        first_name=first_name,
        last_name="User",
        email=email,
        password=PASSWORD_HASH,
        gender=Gender.FEMALE,
        phone="+4512345678",
        address="1 Main Street",
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_salon(db, owner, name="Shear Bliss"):
    salon = Salon(
        owner_id=owner.id,
        name=name,
        gender=SalonGender.UNISEX,
        email="hello@salon.example.com",
        phone="+4587654321",
        address="12 High Street",
        district="Centre",
        city="Copenhagen",
        postal_code="1050",
    )
    salon.services = [
        Service(name="Haircut", category=ServiceCategory.HAIR_STYLING,
                min_duration=30, max_duration=60, price=20.0),
        Service(name="Manicure", category=ServiceCategory.NAILS,
                min_duration=20, max_duration=40, price=15.0),
    ]
    db.add(salon)
    db.commit()
    db.refresh(salon)
    return salon


def auth_headers(user):
    token = create_access_token({"user_id": user.id, "role": user.role.value})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def customer(db):
    return make_user(db, "carla@example.com", first_name="Carla")


@pytest.fixture
def other_customer(db):
    return make_user(db, "dan@example.com", first_name="Dan")


@pytest.fixture
def owner(db):
    return make_user(db, "olivia@example.com", role=UserRole.BUSINESS, first_name="Olivia")


@pytest.fixture
def other_owner(db):
    return make_user(db, "bob@example.com", role=UserRole.BUSINESS, first_name="Bob")


@pytest.fixture
def salon(db, owner):
    return make_salon(db, owner)


@pytest.fixture
def other_salon(db, other_owner):
    return make_salon(db, other_owner, name="Nail Nook")


@pytest.fixture
def make_appointment(db):
    def _make(customer, salon, status=AppointmentStatus.PENDING,
              date=datetime(2024, 4, 1), start_time="10:00", end_time="10:30", notes=None):
        appointment = Appointment(
            customer_id=customer.id,
            salon_id=salon.id,
            service_name="Haircut",
            service_category=ServiceCategory.HAIR_STYLING,
            service_duration=30,
            service_price=20.0,
            date=date,
            start_time=start_time,
            end_time=end_time,
            status=status,
            notes=notes,
        )
        db.add(appointment)
        db.commit()
        db.refresh(appointment)
        return appointment
    return _make


def booking_payload(salon, **overrides):
    payload = {
        "salon": salon.id,
        "service": {"name": "Haircut", "category": "Hair Styling", "duration": 30, "price": 20},
        "date": "2024-04-01T00:00:00",
        "startTime": "10:00",
        "endTime": "10:30",
    }
    payload.update(overrides)
    return payload
