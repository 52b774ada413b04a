# hrportal/api/__init__.py
from fastapi import APIRouter

from hrportal.api.auth.router import router as auth_router
from hrportal.api.dashboard.router import router as dashboard_router
from hrportal.api.employees.router import router as employees_router
from hrportal.api.logistics.router import router as logistics_router
from hrportal.api.navigation.router import router as navigation_router
from hrportal.api.onboarding.router import router as onboarding_router
from hrportal.api.psychometrics.router import router as psychometrics_router

api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["authentication"])
api_router.include_router(navigation_router, prefix="/navigation", tags=["navigation"])
api_router.include_router(dashboard_router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(employees_router, prefix="/employees", tags=["employees"])
api_router.include_router(onboarding_router, prefix="/onboarding", tags=["onboarding"])
api_router.include_router(logistics_router, prefix="/logistics", tags=["logistics"])
api_router.include_router(psychometrics_router, prefix="/psychometrics", tags=["psychometrics"])
