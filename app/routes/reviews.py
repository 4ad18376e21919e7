from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from app.database import get_db
from app.core.dependencies import require_role
from app.models.user import User, UserRole
from app.schemas.review import ReviewCreate, ReviewEnvelope, ReviewListEnvelope
from app.services.review_service import ReviewService

router = APIRouter()

require_reviewing_customer = require_role([UserRole.CUSTOMER], "Only customers can submit reviews")

@router.get("", response_model=ReviewListEnvelope)
def get_reviews(
    salon: Optional[int] = Query(None),
    customer: Optional[int] = Query(None),
    db: Session = Depends(get_db)
):
    """List reviews, newest first"""
    return {"reviews": ReviewService.list_reviews(db, salon, customer)}

@router.post("", response_model=ReviewEnvelope, status_code=status.HTTP_201_CREATED)
def create_review(
    review_data: ReviewCreate,
    current_user: User = Depends(require_reviewing_customer),
    db: Session = Depends(get_db)
):
    """Review a salon (customers only, once per salon)"""
    review = ReviewService.submit_review(db, review_data, current_user)
    return {"message": "Review submitted successfully", "review": review}
