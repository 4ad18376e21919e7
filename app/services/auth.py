import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import Conflict, Unauthenticated
from app.core.security import get_password_hash, verify_password, create_access_token
from app.models.user import User
from app.schemas.user import UserCreate, UserLogin

logger = logging.getLogger(__name__)

class AuthService:
    @staticmethod
    def register_user(db: Session, user_data: UserCreate) -> User:
        """Register a customer or business account"""
        existing_user = db.query(User).filter(User.email == user_data.email).first()
        if existing_user:
            raise Conflict("User with this email already exists")

        user = User(
            **user_data.model_dump(exclude={"password"}),
            password=get_password_hash(user_data.password)
        )

        try:
            db.add(user)
            db.commit()
            db.refresh(user)
        except IntegrityError:
            db.rollback()
            raise Conflict("User with this email already exists")
        except Exception:
            db.rollback()
            raise

        logger.info(f"Registered {user.role.value} account {user.id}")
        return user

    @staticmethod
    def authenticate(db: Session, credentials: UserLogin) -> dict:
        """Check credentials and issue an access token"""
        user = db.query(User).filter(User.email == credentials.email.lower()).first()
        if not user or not verify_password(credentials.password, user.password):
            raise Unauthenticated("Email or password is incorrect")

        access_token = create_access_token({"user_id": user.id, "role": user.role.value})
        return {"access_token": access_token, "token_type": "bearer", "user": user}
