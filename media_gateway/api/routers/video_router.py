import uuid

from fastapi import APIRouter, Depends, Query

from media_gateway.api.dependencies import get_video_repository
from media_gateway.api.repositories.video_repository import VideoRepository
from media_gateway.api.responses.base import BaseResponse

router = APIRouter()


@router.get("")
async def get_videos(videos: VideoRepository = Depends(get_video_repository)):
    rows = await videos.list_videos()
    return BaseResponse.success_response({"payload": [v.to_dict() for v in rows]})


@router.get("/id")
async def get_video_by_id(video_id: uuid.UUID = Query(...), videos: VideoRepository = Depends(get_video_repository)):
    video = await videos.get_video_by_id(video_id)
    return BaseResponse.success_response(video.to_dict())


@router.get("/path")
async def get_video_by_path(video_path: str = Query(...), videos: VideoRepository = Depends(get_video_repository)):
    video = await videos.get_video_by_path(video_path)
    return BaseResponse.success_response(video.to_dict())
