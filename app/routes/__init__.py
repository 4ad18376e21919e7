from .auth import router as auth_router
from .users import router as users_router
from .salons import router as salons_router
from .appointments import router as appointments_router
from .reviews import router as reviews_router

__all__ = [
    "auth_router",
    "users_router",
    "salons_router",
    "appointments_router",
    "reviews_router",
]
