from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from app.database import get_db
from app.core.dependencies import get_current_user, require_business
from app.models.salon import ServiceCategory, SalonGender
from app.models.user import User
from app.schemas.appointment import MessageResponse
from app.schemas.salon import SalonCreate, SalonUpdate, SalonEnvelope, SalonListEnvelope
from app.services.salon_service import SalonService

router = APIRouter()

@router.get("", response_model=SalonListEnvelope)
def get_salons(
    name: Optional[str] = Query(None),
    district: Optional[str] = Query(None),
    city: Optional[str] = Query(None),
    postal_code: Optional[str] = Query(None, alias="postalCode"),
    gender: Optional[SalonGender] = Query(None),
    category: Optional[ServiceCategory] = Query(None),
    db: Session = Depends(get_db)
):
    """List salons with optional filters"""
    salons = SalonService.list_salons(db, name, district, city, postal_code, gender, category)
    return {"salons": salons}

@router.post("", response_model=SalonEnvelope, status_code=status.HTTP_201_CREATED)
def create_salon(
    salon_data: SalonCreate,
    current_user: User = Depends(require_business),
    db: Session = Depends(get_db)
):
    """Register a salon (business accounts only)"""
    salon = SalonService.create_salon(db, salon_data, current_user)
    return {"message": "Salon created successfully", "salon": salon}

@router.get("/{salon_id}", response_model=SalonEnvelope)
def get_salon(salon_id: int, db: Session = Depends(get_db)):
    """Get salon by ID with its service catalog"""
    return {"salon": SalonService.get_salon_or_404(db, salon_id)}

@router.patch("/{salon_id}", response_model=SalonEnvelope)
def update_salon(
    salon_id: int,
    salon_data: SalonUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update salon information (owner only)"""
    salon = SalonService.update_salon(db, salon_id, salon_data, current_user)
    return {"message": "Salon updated successfully", "salon": salon}

@router.delete("/{salon_id}", response_model=MessageResponse)
def delete_salon(
    salon_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a salon (owner only)"""
    return SalonService.delete_salon(db, salon_id, current_user)
