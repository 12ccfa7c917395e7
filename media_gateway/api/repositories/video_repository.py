import uuid
from typing import List

from sqlalchemy import insert, select

from media_gateway.api.model.video import Video
from media_gateway.api.repositories.base_repository import CatalogRepository
from media_gateway.api.repositories.interfaces import IVideoRepository

VIDEO_NOT_FOUND = "Video not found"


class VideoRepository(CatalogRepository, IVideoRepository):
    async def create_video(self, video_path: str) -> Video:
        stmt = insert(Video).values(video_path=video_path).returning(Video)
        return await self._insert_returning(stmt)

    async def list_videos(self) -> List[Video]:
        return await self._fetch_all(select(Video))

    async def get_video_by_id(self, video_id: uuid.UUID) -> Video:
        return await self._fetch_first(select(Video).where(Video.video_id == video_id), VIDEO_NOT_FOUND)

    async def get_video_by_path(self, video_path: str) -> Video:
        return await self._fetch_first(select(Video).where(Video.video_path == video_path), VIDEO_NOT_FOUND)
