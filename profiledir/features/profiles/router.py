"""Profile directory API routes."""

from fastapi import APIRouter

from profiledir.features.profiles.routes.login import router as login_router
from profiledir.features.profiles.routes.profiles import router as profiles_router
from profiledir.features.profiles.routes.signup import router as signup_router
from profiledir.features.profiles.routes.upload import router as upload_router

router = APIRouter(tags=["profiles"])

# Include all route handlers
router.include_router(signup_router)
router.include_router(login_router)
router.include_router(profiles_router)
router.include_router(upload_router)
