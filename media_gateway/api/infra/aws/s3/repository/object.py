from typing import Dict
import asyncio

from media_gateway.api.infra.aws.s3 import new_client
from media_gateway.api.infra.aws.s3.entity.object import S3Object


async def get_object(key: str, bucket_name: str, client=None) -> S3Object:
    loop = asyncio.get_running_loop()
    client = client or new_client()

    def _get():
        response = client.get_object(Bucket=bucket_name, Key=key)
        # Drain inside the executor; StreamingBody.read is blocking
        response["Body"] = response["Body"].read()
        return response

    object_ = await loop.run_in_executor(None, _get)
    return S3Object(key=key, **object_)


async def put_object(obj: S3Object, bucket_name: str, client=None) -> Dict:
    loop = asyncio.get_running_loop()
    client = client or new_client()

    params = {
        "Bucket": bucket_name,
        "Key": obj.key,
        "Body": obj.body,
    }
    if obj.content_type is not None:
        params["ContentType"] = obj.content_type
    if obj.content_length is not None:
        params["ContentLength"] = obj.content_length

    def _put():
        return client.put_object(**params)

    object_ = await loop.run_in_executor(None, _put)
    return object_


def generate_presigned_put_url(key: str, bucket_name: str, expires_in: int, client=None) -> str:
    """Presigned URL authorising exactly one PUT of (bucket_name, key)."""
    client = client or new_client()
    return client.generate_presigned_url(
        ClientMethod="put_object",
        Params={
            "Bucket": bucket_name,
            "Key": key
        },
        ExpiresIn=expires_in,
        HttpMethod="PUT")
