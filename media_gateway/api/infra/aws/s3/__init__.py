from botocore.client import Config

from media_gateway.api.infra.aws import session
from media_gateway.core.config import MINIO_ENDPOINT, MINIO_SECURE


def endpoint_url() -> str:
    if MINIO_ENDPOINT.startswith(("http://", "https://")):
        return MINIO_ENDPOINT
    scheme = "https" if MINIO_SECURE else "http"
    return f"{scheme}://{MINIO_ENDPOINT}"


def new_client():
    """S3 client bound to the MinIO endpoint (path-style, SigV4)."""
    return session.client(
        "s3",
        endpoint_url=endpoint_url(),
        config=Config(signature_version="s3v4", s3={"addressing_style": "path"}),
    )
