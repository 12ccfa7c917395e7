import httpx
import pytest
from fastapi.testclient import TestClient

from media_gateway.api import dependencies
from media_gateway.api.services.blob_store import BlobStoreClient
from media_gateway.main import app
from tests.fakes import (
    FakeBlobStore,
    FakeUserRepository,
    FakeVideoRepository,
    RecordingStore,
    make_s3_client,
)


@pytest.fixture
def blob_store():
    return FakeBlobStore()


@pytest.fixture
def video_repository():
    return FakeVideoRepository()


@pytest.fixture
def user_repository():
    return FakeUserRepository()


@pytest.fixture
def recording_store():
    return RecordingStore()


@pytest.fixture
def streaming_blob_store(recording_store):
    return BlobStoreClient(
        s3_client=make_s3_client(),
        transport=httpx.MockTransport(recording_store),
    )


@pytest.fixture
def client(blob_store, video_repository, user_repository):
    app.dependency_overrides[dependencies.get_blob_store] = lambda: blob_store
    app.dependency_overrides[dependencies.get_video_repository] = lambda: video_repository
    app.dependency_overrides[dependencies.get_user_repository] = lambda: user_repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def raw_client(streaming_blob_store):
    app.dependency_overrides[dependencies.get_blob_store] = lambda: streaming_blob_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
