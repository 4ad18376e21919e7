from sqlalchemy import (
    Column, Integer, String, DateTime, Text, Float, ForeignKey, Enum, UniqueConstraint
)
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import enum
from app.database import Base

class ServiceCategory(str, enum.Enum):
    HAIR_STYLING = "Hair Styling"
    NAILS = "Nails"
    FACE_AND_BODY = "Face and Body"

class SalonGender(str, enum.Enum):
    MALE = "Male"
    FEMALE = "Female"
    UNISEX = "Unisex"

class Salon(Base):
    __tablename__ = "salons"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    slogan = Column(String(255))
    gender = Column(Enum(SalonGender), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(20), nullable=False)
    address = Column(Text, nullable=False)
    district = Column(String(100), nullable=False)
    city = Column(String(100), nullable=False)
    postal_code = Column(String(20), nullable=False)
    logo = Column(String(500))
    rating = Column(Float, default=0.0, nullable=False)
    total_reviews = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    owner = relationship("User", back_populates="salons")
    services = relationship(
        "Service", back_populates="salon", cascade="all, delete-orphan", order_by="Service.id"
    )
    reviews = relationship("Review", back_populates="salon", cascade="all, delete-orphan")
    appointments = relationship("Appointment", back_populates="salon", cascade="all, delete-orphan")

class Service(Base):
    """A catalog entry offered by a salon"""
    __tablename__ = "services"

    id = Column(Integer, primary_key=True, index=True)
    salon_id = Column(Integer, ForeignKey("salons.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    category = Column(Enum(ServiceCategory), nullable=False)
    min_duration = Column(Integer, nullable=False)
    max_duration = Column(Integer, nullable=False)
    price = Column(Float, nullable=False)
    description = Column(Text)

    salon = relationship("Salon", back_populates="services")

class Review(Base):
    __tablename__ = "reviews"
    __table_args__ = (
        UniqueConstraint("customer_id", "salon_id", name="uq_reviews_customer_salon"),
    )

    id = Column(Integer, primary_key=True, index=True)
    salon_id = Column(Integer, ForeignKey("salons.id", ondelete="CASCADE"), nullable=False, index=True)
    customer_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    salon = relationship("Salon", back_populates="reviews")
    customer = relationship("User", back_populates="reviews")
