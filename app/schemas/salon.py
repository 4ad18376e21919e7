from pydantic import EmailStr, Field, field_validator, model_validator
from typing import Optional, List
from datetime import datetime

from app.schemas.base import CamelModel
from app.schemas.user import UserSummary
from app.models.salon import ServiceCategory, SalonGender

class ServiceBase(CamelModel):
    name: str
    category: ServiceCategory
    min_duration: int = Field(ge=5)
    max_duration: int = Field(ge=5)
    price: float = Field(ge=0)
    description: Optional[str] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Service name is required')
        return v

    @model_validator(mode='after')
    def validate_duration_range(self):
        if self.max_duration < self.min_duration:
            raise ValueError('Maximum duration cannot be shorter than minimum duration')
        return self

class ServiceCreate(ServiceBase):
    pass

class ServiceResponse(ServiceBase):
    id: int

class SalonBase(CamelModel):
    name: str
    slogan: Optional[str] = None
    gender: SalonGender
    email: EmailStr
    phone: str
    address: str
    district: str
    city: str
    postal_code: str
    logo: Optional[str] = None

class SalonCreate(SalonBase):
    services: List[ServiceCreate] = []

    @field_validator('name', 'phone', 'address', 'district', 'city', 'postal_code')
    @classmethod
    def validate_required_text(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Field cannot be empty')
        return v

class SalonUpdate(CamelModel):
    name: Optional[str] = None
    slogan: Optional[str] = None
    gender: Optional[SalonGender] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    district: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    logo: Optional[str] = None
    services: Optional[List[ServiceCreate]] = None

class SalonResponse(SalonBase):
    id: int
    owner_id: int
    owner: Optional[UserSummary] = None
    rating: float
    total_reviews: int
    services: List[ServiceResponse] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class SalonSummary(CamelModel):
    name: str
    address: str

class SalonEnvelope(CamelModel):
    message: Optional[str] = None
    salon: SalonResponse

class SalonListEnvelope(CamelModel):
    salons: List[SalonResponse]
