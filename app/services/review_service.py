import logging
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload
from typing import List, Optional

from app.core.exceptions import Conflict, Forbidden, InvalidArgument, NotFound
from app.models.salon import Salon, Review
from app.models.user import User, UserRole
from app.schemas.review import ReviewCreate

logger = logging.getLogger(__name__)

MIN_COMMENT_LENGTH = 3
MAX_COMMENT_LENGTH = 500

def rounded_average(total: int, count: int) -> float:
    """Mean of integer ratings rounded half-up to one decimal place"""
    if not count:
        return 0.0
    return ((20 * total + count) // (2 * count)) / 10

class ReviewService:
    @staticmethod
    def submit_review(db: Session, review_data: ReviewCreate, actor: User) -> Review:
        """Create a review and refresh the salon's aggregate rating"""
        if actor.role != UserRole.CUSTOMER:
            raise Forbidden("Only customers can submit reviews")

        comment = (review_data.comment or "").strip()
        if review_data.salon is None or review_data.rating is None or not comment:
            raise InvalidArgument("Missing required fields")

        if review_data.rating < 1 or review_data.rating > 5:
            raise InvalidArgument("Rating must be between 1 and 5")

        if len(comment) < MIN_COMMENT_LENGTH:
            raise InvalidArgument(f"Comment must be at least {MIN_COMMENT_LENGTH} characters long")
        if len(comment) > MAX_COMMENT_LENGTH:
            raise InvalidArgument(f"Comment cannot be longer than {MAX_COMMENT_LENGTH} characters")

        salon = db.query(Salon).filter(Salon.id == review_data.salon).first()
        if not salon:
            raise NotFound("Salon not found")

        if ReviewService.find_review(db, salon.id, actor.id):
            raise Conflict("You have already reviewed this salon")

        review = Review(
            salon_id=salon.id,
            customer_id=actor.id,
            rating=review_data.rating,
            comment=comment
        )

        try:
            db.add(review)
            db.flush()
            ReviewService.update_salon_rating(db, salon)
            db.commit()
        except IntegrityError:
            # unique (customer, salon) constraint lost a race with another request
            db.rollback()
            raise Conflict("You have already reviewed this salon")
        except Exception:
            db.rollback()
            raise

        logger.info(f"Review {review.id} added to salon {salon.id}; rating now {salon.rating}")
        return ReviewService.hydrate(db, review)

    @staticmethod
    def find_review(db: Session, salon_id: int, customer_id: int) -> Optional[Review]:
        return db.query(Review).filter(
            Review.salon_id == salon_id,
            Review.customer_id == customer_id
        ).first()

    @staticmethod
    def update_salon_rating(db: Session, salon: Salon):
        """Recompute rating and review count from every review of the salon"""
        total, count = db.query(
            func.coalesce(func.sum(Review.rating), 0),
            func.count(Review.id)
        ).filter(Review.salon_id == salon.id).one()

        salon.rating = rounded_average(int(total), int(count))
        salon.total_reviews = int(count)

    @staticmethod
    def list_reviews(db: Session, salon_id: Optional[int] = None, customer_id: Optional[int] = None) -> List[Review]:
        query = db.query(Review).options(
            joinedload(Review.customer),
            joinedload(Review.salon)
        )

        if salon_id is not None:
            query = query.filter(Review.salon_id == salon_id)
        if customer_id is not None:
            query = query.filter(Review.customer_id == customer_id)

        return query.order_by(Review.created_at.desc(), Review.id.desc()).all()

    @staticmethod
    def hydrate(db: Session, review: Review) -> Review:
        return db.query(Review).options(
            joinedload(Review.customer),
            joinedload(Review.salon)
        ).filter(Review.id == review.id).first()
