from dataclasses import dataclass
from typing import Optional

from loguru import logger as custom_logger
from starlette.datastructures import FormData, UploadFile

from media_gateway.api.exceptions import CatalogWriteFailed, MissingFileError
from media_gateway.api.model.video import Video
from media_gateway.api.repositories.interfaces import IVideoRepository
from media_gateway.api.services.blob_store import BlobStoreClient
from media_gateway.core.config import DEFAULT_UPLOAD_NAME

FILE_FIELD = "file"


@dataclass
class BufferedUpload:
    file_name: str
    data: bytes
    content_type: Optional[str] = None


async def read_file_field(form: FormData, default_name: str = DEFAULT_UPLOAD_NAME) -> BufferedUpload:
    """Materialize the first multipart field named "file".

    One file per request: later fields with the same name are ignored.
    A field without a filename is stored under `default_name`.
    """
    values = form.getlist(FILE_FIELD)
    if not values:
        raise MissingFileError()

    field = values[0]
    if len(values) > 1:
        custom_logger.info(f"Ignoring {len(values) - 1} extra '{FILE_FIELD}' field(s)")

    if isinstance(field, UploadFile):
        data = await field.read()
        return BufferedUpload(
            file_name=field.filename or default_name,
            data=data,
            content_type=field.content_type,
        )

    return BufferedUpload(file_name=default_name, data=field.encode("utf-8"))


class VideoUploadService:
    """Store an uploaded file, then record it in the catalog.

    The blob write always completes before the catalog insert is attempted,
    so a videos row never points at a blob that was not written. The reverse
    is not guaranteed: if the insert fails the blob stays in the bucket.
    """

    def __init__(self, blob_store: BlobStoreClient, video_repository: IVideoRepository, bucket: str):
        self.blob_store = blob_store
        self.video_repository = video_repository
        self.bucket = bucket

    async def upload(self, upload: BufferedUpload) -> Video:
        custom_logger.info(f"Starting upload: {upload.file_name}, size: {len(upload.data):,} bytes")

        await self.blob_store.put(
            self.bucket,
            upload.file_name,
            upload.data,
            content_type=upload.content_type,
        )

        try:
            video = await self.video_repository.create_video(upload.file_name)
        except CatalogWriteFailed:
            custom_logger.error(
                f"Orphaned blob: {self.bucket}/{upload.file_name} stored but no catalog row was created"
            )
            raise

        custom_logger.info(f"Video recorded: video_id={video.video_id}, path={video.video_path}")
        return video
