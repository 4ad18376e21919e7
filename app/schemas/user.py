from pydantic import EmailStr, field_validator
from typing import Optional
from datetime import datetime

from app.schemas.base import CamelModel
from app.models.user import UserRole, Gender

class UserBase(CamelModel):
    first_name: str
    last_name: str
    email: EmailStr
    gender: Gender
    phone: str
    address: str
    role: UserRole = UserRole.CUSTOMER

class UserCreate(UserBase):
    password: str

    @field_validator('first_name', 'last_name', 'phone', 'address')
    @classmethod
    def validate_required_text(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Field cannot be empty')
        return v

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        return v.lower()

    @field_validator('password')
    @classmethod
    def validate_password(cls, v):
        if len(v) < 6:
            raise ValueError('Password must be at least 6 characters long')
        if len(v.encode()) > 72:
            raise ValueError('Password cannot be longer than 72 bytes')
        return v

class UserLogin(CamelModel):
    email: EmailStr
    password: str

class UserResponse(UserBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class UserSummary(CamelModel):
    first_name: str
    last_name: str
    email: str

class UserEnvelope(CamelModel):
    message: Optional[str] = None
    user: UserResponse

class Token(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
