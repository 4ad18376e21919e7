from typing import Optional, List
from datetime import datetime

from app.schemas.base import CamelModel
from app.schemas.user import UserSummary

class ReviewCreate(CamelModel):
    salon: Optional[int] = None
    rating: Optional[int] = None
    comment: Optional[str] = None

class ReviewSalonSummary(CamelModel):
    name: str

class ReviewResponse(CamelModel):
    id: int
    salon_id: int
    customer_id: int
    customer: Optional[UserSummary] = None
    salon: Optional[ReviewSalonSummary] = None
    rating: int
    comment: str
    created_at: Optional[datetime] = None

class ReviewEnvelope(CamelModel):
    message: Optional[str] = None
    review: ReviewResponse

class ReviewListEnvelope(CamelModel):
    reviews: List[ReviewResponse]
