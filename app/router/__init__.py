from app.router.api.auth import router as auth_router
from app.router.api.goals import router as goals_router
from app.router.api.progress import router as progress_router
from app.router.api.users import router as users_router
from app.router.api.ai import router as ai_router
__all__ = [
    "auth_router",
    "goals_router",
    "progress_router",
    "users_router",
    "ai_router",
]
