import boto3
from media_gateway.core.config import MINIO_ACCESS_KEY, MINIO_SECRET_KEY, MINIO_REGION

session = boto3.session.Session(
    region_name=MINIO_REGION,
    aws_access_key_id=MINIO_ACCESS_KEY,
    aws_secret_access_key=MINIO_SECRET_KEY
)
