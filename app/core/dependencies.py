from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.database import get_db
from app.core.exceptions import Unauthenticated, Forbidden
from app.core.security import verify_token
from app.models.user import User, UserRole

security = HTTPBearer(auto_error=False)

async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    if credentials is None:
        raise Unauthenticated()

    payload = verify_token(credentials.credentials)
    if not payload or payload.get("type") != "access":
        raise Unauthenticated("Invalid authentication credentials")

    user_id = payload.get("user_id")
    user = db.query(User).filter(User.id == user_id).first() if user_id is not None else None
    if not user:
        raise Unauthenticated("User not found")

    return user

def require_role(required_roles: list, message: Optional[str] = None):
    """Dependency to require specific user roles.

    Dependencies resolve before the request body is validated, so a wrong
    role is reported as Forbidden even when the body is malformed.
    """
    async def role_checker(current_user: User = Depends(get_current_user)):
        if current_user.role not in required_roles:
            raise Forbidden(message or f"Access denied. Required roles: {[role.value for role in required_roles]}")
        return current_user
    return role_checker

require_business = require_role([UserRole.BUSINESS])
