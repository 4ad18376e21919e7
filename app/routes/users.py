from fastapi import APIRouter, Depends

from app.core.dependencies import get_current_user
from app.models.user import User
from app.schemas.user import UserEnvelope

router = APIRouter()

@router.get("/me", response_model=UserEnvelope)
def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get current user information"""
    return {"user": current_user}
