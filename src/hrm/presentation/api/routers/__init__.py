from hrm.presentation.api.routers.auth import router as auth_router
from hrm.presentation.api.routers.companies import router as companies_router

__all__ = [
    "auth_router",
    "companies_router",
]
