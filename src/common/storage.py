# src/common/storage.py
import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .config import REGION


class TransportError(RuntimeError):
    """S3 or Tika server I/O failed; the invocation must fail so Lambda can retry."""


def _client(region: str = REGION):
    return boto3.client("s3", region_name=region)


class S3Store:
    def __init__(self, client=None):
        self.client = client or _client()

    def get(self, bucket: str, key: str):
        """Returns the object's StreamingBody. Caller closes it."""
        try:
            resp = self.client.get_object(Bucket=bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            raise TransportError(f"S3 get_object failed (bucket='{bucket}', key='{key}'): {e}") from e
        return resp["Body"]

    def put(self, bucket: str, key: str, body: bytes, content_type: str = "application/json"):
        try:
            self.client.put_object(
                Bucket=bucket,
                Key=key,
                Body=body,
                ContentLength=len(body),
                ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as e:
            raise TransportError(f"S3 put_object failed (bucket='{bucket}', key='{key}'): {e}") from e
