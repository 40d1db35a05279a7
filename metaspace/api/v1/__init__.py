"""API v1 routes."""

from fastapi import APIRouter

from metaspace.api.v1 import admin, auth, avatars, health, user

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(user.router, prefix="/user", tags=["user"])
router.include_router(avatars.router, prefix="/avatars", tags=["avatars"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
