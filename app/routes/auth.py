from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.user import UserCreate, UserLogin, UserEnvelope, Token
from app.services.auth import AuthService

router = APIRouter()

@router.post("/signup", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
def signup(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a customer or business account"""
    user = AuthService.register_user(db, user_data)
    return {"message": "User registered successfully", "user": user}

@router.post("/login", response_model=Token)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Exchange email and password for an access token"""
    return AuthService.authenticate(db, credentials)
