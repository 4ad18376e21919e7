import logging
from sqlalchemy.orm import Session, joinedload, selectinload
from typing import List, Optional

from app.core.exceptions import Conflict, Forbidden, NotFound
from app.models.salon import Salon, Service, ServiceCategory, SalonGender
from app.models.user import User
from app.schemas.salon import SalonCreate, SalonUpdate

logger = logging.getLogger(__name__)

NULLABLE_SALON_FIELDS = {"slogan", "logo"}

class SalonService:
    @staticmethod
    def create_salon(db: Session, salon_data: SalonCreate, owner: User) -> Salon:
        """Create a salon owned by a business account"""
        existing_salon = db.query(Salon).filter(
            Salon.name == salon_data.name,
            Salon.owner_id == owner.id
        ).first()
        if existing_salon:
            raise Conflict("You already have a salon with this name")

        try:
            salon = Salon(
                **salon_data.model_dump(exclude={"services"}),
                owner_id=owner.id
            )
            salon.services = [Service(**service.model_dump()) for service in salon_data.services]

            db.add(salon)
            db.commit()
            db.refresh(salon)
        except Exception:
            db.rollback()
            raise

        logger.info(f"Salon {salon.id} created by owner {owner.id}")
        return salon

    @staticmethod
    def get_salon(db: Session, salon_id: int) -> Optional[Salon]:
        """Get salon by ID with owner and catalog"""
        return db.query(Salon).options(
            joinedload(Salon.owner),
            selectinload(Salon.services)
        ).filter(Salon.id == salon_id).first()

    @staticmethod
    def get_salon_or_404(db: Session, salon_id: int) -> Salon:
        salon = SalonService.get_salon(db, salon_id)
        if not salon:
            raise NotFound("Salon not found")
        return salon

    @staticmethod
    def list_salons(
        db: Session,
        name: Optional[str] = None,
        district: Optional[str] = None,
        city: Optional[str] = None,
        postal_code: Optional[str] = None,
        gender: Optional[SalonGender] = None,
        category: Optional[ServiceCategory] = None
    ) -> List[Salon]:
        """List salons, newest first, with optional filters"""
        query = db.query(Salon).options(
            joinedload(Salon.owner),
            selectinload(Salon.services)
        )

        if name:
            query = query.filter(Salon.name.ilike(f"%{name}%"))
        if district:
            query = query.filter(Salon.district == district)
        if city:
            query = query.filter(Salon.city == city)
        if postal_code:
            query = query.filter(Salon.postal_code == postal_code)
        if gender:
            query = query.filter(Salon.gender == gender)
        if category:
            query = query.filter(Salon.services.any(Service.category == category))

        return query.order_by(Salon.created_at.desc(), Salon.id.desc()).all()

    @staticmethod
    def _get_owned_salon(db: Session, salon_id: int, owner: User, action: str) -> Salon:
        salon = SalonService.get_salon_or_404(db, salon_id)
        if salon.owner_id != owner.id:
            raise Forbidden(f"You do not have permission to {action} this salon")
        return salon

    @staticmethod
    def update_salon(db: Session, salon_id: int, salon_data: SalonUpdate, owner: User) -> Salon:
        """Partially update a salon; a supplied services list replaces the catalog"""
        salon = SalonService._get_owned_salon(db, salon_id, owner, "update")

        update_data = salon_data.model_dump(exclude_unset=True, exclude={"services"})
        try:
            for field, value in update_data.items():
                if value is None and field not in NULLABLE_SALON_FIELDS:
                    continue
                setattr(salon, field, value)

            if salon_data.services is not None:
                salon.services = [Service(**service.model_dump()) for service in salon_data.services]

            db.commit()
            db.refresh(salon)
        except Exception:
            db.rollback()
            raise

        return salon

    @staticmethod
    def delete_salon(db: Session, salon_id: int, owner: User):
        """Delete a salon together with its catalog, reviews and appointments"""
        salon = SalonService._get_owned_salon(db, salon_id, owner, "delete")

        try:
            db.delete(salon)
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info(f"Salon {salon_id} deleted by owner {owner.id}")
        return {"message": "Salon deleted successfully"}

    @staticmethod
    def find_owned_salon_ids(db: Session, owner_id: int) -> List[int]:
        rows = db.query(Salon.id).filter(Salon.owner_id == owner_id).all()
        return [row.id for row in rows]

    @staticmethod
    def find_catalog_service(salon: Salon, name: str, category: ServiceCategory) -> Optional[Service]:
        """Match a catalog entry by category and case-insensitive name"""
        wanted = name.strip().lower()
        for service in salon.services:
            if service.category == category and service.name.strip().lower() == wanted:
                return service
        return None
