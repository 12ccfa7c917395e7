from typing import Optional

from fastapi import Depends
from media_gateway.api.db.session import AsyncSessionLocal
from media_gateway.api.repositories.user_repository import UserRepository
from media_gateway.api.repositories.video_repository import VideoRepository
from media_gateway.api.services.blob_store import BlobStoreClient
from media_gateway.api.services.raw_upload_service import RawUploadService
from media_gateway.api.services.video_upload_service import VideoUploadService
from media_gateway.core.config import MINIO_BUCKET

# --- Low Level Services ---

_blob_store: Optional[BlobStoreClient] = None


def get_blob_store() -> BlobStoreClient:
    global _blob_store
    if _blob_store is None:
        _blob_store = BlobStoreClient()
    return _blob_store

# --- Repositories ---

def get_db_session():
    return AsyncSessionLocal()

async def get_user_repository(session = Depends(get_db_session)):
    try:
        yield UserRepository(session)
    finally:
        await session.close()

async def get_video_repository(session = Depends(get_db_session)):
    try:
        yield VideoRepository(session)
    finally:
        await session.close()

# --- Ingestion Services ---

def get_video_upload_service(
    blob_store: BlobStoreClient = Depends(get_blob_store),
    video_repository: VideoRepository = Depends(get_video_repository),
) -> VideoUploadService:
    return VideoUploadService(
        blob_store=blob_store,
        video_repository=video_repository,
        bucket=MINIO_BUCKET,
    )

def get_raw_upload_service(
    blob_store: BlobStoreClient = Depends(get_blob_store),
) -> RawUploadService:
    return RawUploadService(blob_store=blob_store)
