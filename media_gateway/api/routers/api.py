"""API routes"""
from fastapi import APIRouter

from media_gateway.api.routers import health_router, upload_router, user_router, video_router

app = APIRouter()

app.include_router(health_router.router, tags=["Health"])
app.include_router(user_router.router, tags=["Users"], prefix="/users")
app.include_router(video_router.router, tags=["Videos"], prefix="/videos")
app.include_router(upload_router.router, tags=["Upload"])
