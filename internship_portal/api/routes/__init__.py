"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from internship_portal.api.routes.user_routes import router as user_router
from internship_portal.api.routes.student_routes import router as student_router
from internship_portal.api.routes.startup_routes import router as startup_router
from internship_portal.api.routes.internship_routes import router as internship_router
from internship_portal.api.routes.application_routes import router as application_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(user_router)
api_router.include_router(student_router)
api_router.include_router(startup_router)
api_router.include_router(internship_router)
api_router.include_router(application_router)
