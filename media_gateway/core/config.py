from __future__ import annotations
from starlette.config import Config
from starlette.datastructures import CommaSeparatedStrings

config = Config(".env")

API_PREFIX: str = config("API_PREFIX", default="")
VERSION: str = "0.1.0"
PROJECT_NAME: str = config("PROJECT_NAME", default="Media Gateway")
DEBUG: bool = config("DEBUG", cast=bool, default=False)
ALLOWED_HOSTS: list[str] = config(
    "ALLOWED_HOSTS",
    cast=CommaSeparatedStrings,
    default="",
)

APP_HOST: str = config("APP_HOST", default="0.0.0.0")
APP_PORT: int = config("APP_PORT", cast=int, default=8081)

# Blob store (S3 compatible, MinIO in development)
MINIO_ENDPOINT: str = config("MINIO_ENDPOINT", default="minio:9000")
MINIO_ACCESS_KEY: str = config("MINIO_ACCESS_KEY", default="minioadmin")
MINIO_SECRET_KEY: str = config("MINIO_SECRET_KEY", default="minioadmin")
MINIO_BUCKET: str = config("MINIO_BUCKET", default="bucket")
MINIO_SECURE: bool = config("MINIO_SECURE", cast=bool, default=False)
MINIO_REGION: str = config("MINIO_REGION", default="us-east-1")

PRESIGNED_URL_EXPIRES: int = config("PRESIGNED_URL_EXPIRES", cast=int, default=300)
DEFAULT_UPLOAD_NAME: str = config("DEFAULT_UPLOAD_NAME", default="uploaded_file.mp4")

# Request body ceilings (bytes). 0 disables the ceiling for that route group.
MAX_REQUEST_SIZE: int = config("MAX_REQUEST_SIZE", cast=int, default=1073741824)
RAW_UPLOAD_MAX_SIZE: int = config("RAW_UPLOAD_MAX_SIZE", cast=int, default=0)
RAW_UPLOAD_PATH_PREFIX: str = "/upload-raw-video/"

# Timeouts (seconds)
UPLOAD_TIMEOUT: int = config("UPLOAD_TIMEOUT", cast=int, default=300)

# Database
DATABASE_URL: str = config("DATABASE_URL", default="postgres://dbuser:p@localhost:1111/data")
DB_POOL_SIZE: int = config("DB_POOL_SIZE", cast=int, default=100)
DB_MAX_OVERFLOW: int = config("DB_MAX_OVERFLOW", cast=int, default=0)
