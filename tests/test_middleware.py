import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from media_gateway.api.exception_handlers import ingest_exception_handler
from media_gateway.api.exceptions import IngestError
from media_gateway.api.middleware import RequestSizeLimitMiddleware


@pytest.fixture
def limited_client():
    app = FastAPI()
    app.add_middleware(
        RequestSizeLimitMiddleware,
        default_limit=16,
        route_limits=[("/stream/", 0)],
    )
    app.add_exception_handler(IngestError, ingest_exception_handler)

    @app.post("/echo")
    async def echo(request: Request):
        return {"size": len(await request.body())}

    @app.post("/stream/{key}")
    async def stream(key: str, request: Request):
        size = 0
        async for chunk in request.stream():
            size += len(chunk)
        return {"size": size}

    with TestClient(app) as client:
        yield client


def test_body_within_limit_passes(limited_client):
    response = limited_client.post("/echo", content=b"x" * 16)

    assert response.json() == {"size": 16}


def test_declared_length_over_limit_is_refused(limited_client):
    response = limited_client.post("/echo", content=b"x" * 17)

    assert response.status_code == 413
    assert response.json()["message"] == "Request body exceeds 16 bytes"


def test_chunked_body_over_limit_is_refused(limited_client):
    def body():
        for _ in range(4):
            yield b"x" * 8

    response = limited_client.post("/echo", content=body())

    assert response.status_code == 413


def test_streaming_route_has_no_ceiling(limited_client):
    response = limited_client.post("/stream/movie.mp4", content=b"x" * 4096)

    assert response.status_code == 200
    assert response.json() == {"size": 4096}


def test_limit_lookup_prefers_route_specific_limit():
    middleware = RequestSizeLimitMiddleware(app=None, default_limit=10, route_limits=[("/raw/", 0), ("/small/", 2)])

    assert middleware.limit_for("/raw/bucket/key") == 0
    assert middleware.limit_for("/small/x") == 2
    assert middleware.limit_for("/other") == 10
