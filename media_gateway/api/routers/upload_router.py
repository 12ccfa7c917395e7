from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from loguru import logger as custom_logger
from starlette import status

from media_gateway.api.dependencies import get_raw_upload_service, get_video_upload_service
from media_gateway.api.responses.base import BaseResponse
from media_gateway.api.services.raw_upload_service import RawUploadService, parse_content_length
from media_gateway.api.services.video_upload_service import VideoUploadService, read_file_field

router = APIRouter()


@router.post("/upload-video")
async def upload_video(request: Request, service: VideoUploadService = Depends(get_video_upload_service)):
    """Buffered upload: multipart field "file" -> blob store -> videos row."""
    custom_logger.info("Upload video called")
    async with request.form() as form:
        upload = await read_file_field(form)

    video = await service.upload(upload)
    return BaseResponse.success_response({
        "status": True,
        "message": "File uploaded successfully",
        "video": str(video.video_id),
    })


@router.post("/upload-raw-video/{bucket_name}/{object_name:path}")
async def upload_raw_video(
    bucket_name: str,
    object_name: str,
    request: Request,
    service: RawUploadService = Depends(get_raw_upload_service),
):
    """Streaming upload: the raw body is piped to the blob store as it arrives."""
    content_length = parse_content_length(request.headers.get("content-length"))
    await service.upload(bucket_name, object_name, request.stream(), content_length)
    return PlainTextResponse("Object created", status_code=status.HTTP_201_CREATED)
