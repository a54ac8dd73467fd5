from .reviews import router as reviews_router
from .things import router as things_router

__all__ = ["things_router", "reviews_router"]
