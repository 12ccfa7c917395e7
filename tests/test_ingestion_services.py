import asyncio
import io

import httpx
import pytest
from starlette.datastructures import FormData, Headers, UploadFile
from starlette.requests import ClientDisconnect

from media_gateway.api.exceptions import (
    BlobWriteFailed,
    CatalogWriteFailed,
    InputError,
    MissingFileError,
    UploadAborted,
)
from media_gateway.api.services.blob_store import BlobStoreClient
from media_gateway.api.services.raw_upload_service import RawUploadService, parse_content_length
from media_gateway.api.services.video_upload_service import (
    BufferedUpload,
    VideoUploadService,
    read_file_field,
)
from tests.fakes import RecordingStore, make_s3_client


def upload_file(data: bytes, filename=None, content_type="video/mp4"):
    return UploadFile(
        file=io.BytesIO(data),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


async def test_first_file_field_wins():
    form = FormData([
        ("file", upload_file(b"first", "a.mp4")),
        ("file", upload_file(b"second", "b.mp4")),
    ])

    upload = await read_file_field(form)

    assert upload.file_name == "a.mp4"
    assert upload.data == b"first"
    assert upload.content_type == "video/mp4"


async def test_file_field_without_filename_uses_default_name():
    form = FormData([("file", upload_file(b"payload"))])

    upload = await read_file_field(form)

    assert upload.file_name == "uploaded_file.mp4"
    assert upload.data == b"payload"


async def test_plain_text_file_field_is_stored_under_default_name():
    form = FormData([("note", "ignored"), ("file", "inline bytes")])

    upload = await read_file_field(form)

    assert upload.file_name == "uploaded_file.mp4"
    assert upload.data == b"inline bytes"


async def test_missing_file_field():
    form = FormData([("other", upload_file(b"x", "x.mp4"))])

    with pytest.raises(MissingFileError):
        await read_file_field(form)


async def test_upload_writes_blob_then_row(blob_store, video_repository):
    service = VideoUploadService(blob_store, video_repository, bucket="bucket")
    form = FormData([("file", upload_file(b"movie", "clip.mp4"))])

    video = await service.upload(await read_file_field(form))

    assert blob_store.objects[("bucket", "clip.mp4")] == b"movie"
    assert video.video_path == "clip.mp4"
    assert video_repository.rows == [video]


async def test_blob_failure_leaves_catalog_untouched(blob_store, video_repository):
    blob_store.fail_with = BlobWriteFailed(503, "SlowDown")
    service = VideoUploadService(blob_store, video_repository, bucket="bucket")
    form = FormData([("file", upload_file(b"movie", "clip.mp4"))])

    with pytest.raises(BlobWriteFailed):
        await service.upload(await read_file_field(form))

    assert video_repository.rows == []


async def test_catalog_failure_keeps_blob(blob_store, video_repository):
    video_repository.fail_insert = True
    service = VideoUploadService(blob_store, video_repository, bucket="bucket")
    form = FormData([("file", upload_file(b"movie", "clip.mp4"))])

    with pytest.raises(CatalogWriteFailed):
        await service.upload(await read_file_field(form))

    # No rollback of the stored blob
    assert blob_store.objects[("bucket", "clip.mp4")] == b"movie"


async def test_concurrent_uploads_with_distinct_names(blob_store, video_repository):
    service = VideoUploadService(blob_store, video_repository, bucket="bucket")
    uploads = [BufferedUpload(f"clip-{i}.mp4", f"payload-{i}".encode()) for i in range(8)]

    videos = await asyncio.gather(*(service.upload(upload) for upload in uploads))

    assert len({video.video_id for video in videos}) == len(uploads)
    for upload in uploads:
        assert blob_store.objects[("bucket", upload.file_name)] == upload.data
    assert sorted(row.video_path for row in video_repository.rows) == sorted(u.file_name for u in uploads)


async def test_concurrent_uploads_with_same_name_are_all_accepted(blob_store, video_repository):
    service = VideoUploadService(blob_store, video_repository, bucket="bucket")
    payloads = [f"version-{i}".encode() for i in range(8)]

    videos = await asyncio.gather(
        *(service.upload(BufferedUpload("clip.mp4", payload)) for payload in payloads)
    )

    assert len({video.video_id for video in videos}) == len(payloads)
    assert len(video_repository.rows) == len(payloads)
    # Last writer wins: the stored blob is exactly one of the uploads
    assert blob_store.objects[("bucket", "clip.mp4")] in payloads


@pytest.mark.parametrize("value, expected", [(None, None), ("", None), ("0", 0), ("1048576", 1048576)])
def test_parse_content_length(value, expected):
    assert parse_content_length(value) == expected


@pytest.mark.parametrize("value", ["abc", "-1"])
def test_parse_content_length_rejects_garbage(value):
    with pytest.raises(InputError):
        parse_content_length(value)


async def test_raw_upload_client_disconnect_aborts_outbound_write():
    upstream = RecordingStore()
    service = RawUploadService(
        BlobStoreClient(s3_client=make_s3_client(), transport=httpx.MockTransport(upstream))
    )

    async def body():
        yield b"first chunk"
        raise ClientDisconnect()

    with pytest.raises(UploadAborted):
        await service.upload("videos", "clip.mp4", body(), content_length=1024)

    assert upstream.objects == {}


async def test_raw_upload_forwards_stream(streaming_blob_store, recording_store):
    service = RawUploadService(streaming_blob_store)

    async def body():
        for part in (b"ab", b"", b"cd", b"ef"):
            yield part

    await service.upload("videos", "clip.mp4", body(), content_length=6)

    assert recording_store.objects["/videos/clip.mp4"] == b"abcdef"
