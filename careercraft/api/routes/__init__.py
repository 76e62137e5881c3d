"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from careercraft.api.routes.auth_routes import router as auth_router
from careercraft.api.routes.user_routes import router as user_router
from careercraft.api.routes.ai_routes import router as ai_router
from careercraft.api.routes.scholarship_routes import router as scholarship_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(user_router)
api_router.include_router(ai_router)
api_router.include_router(scholarship_router)
