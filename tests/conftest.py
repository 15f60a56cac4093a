import io

import pytest

from common.extractor import ContentExtractor, ExtractionError
from common.storage import TransportError


class FakeBody(io.BytesIO):
    """Stands in for botocore's StreamingBody; remembers whether it was closed."""

    def __init__(self, data: bytes):
        super().__init__(data)
        self.was_closed = False

    def close(self):
        self.was_closed = True
        super().close()


class FakeStore:
    def __init__(self, objects=None, fail_get=False, fail_put=False):
        self.objects = dict(objects or {})
        self.fail_get = fail_get
        self.fail_put = fail_put
        self.gets = []
        self.puts = []
        self.bodies = []

    def get(self, bucket, key):
        self.gets.append((bucket, key))
        if self.fail_get:
            raise TransportError(f"S3 get_object failed (bucket='{bucket}', key='{key}'): boom")
        body = FakeBody(self.objects.get((bucket, key), b""))
        self.bodies.append(body)
        return body

    def put(self, bucket, key, body, content_type="application/json"):
        if self.fail_put:
            raise TransportError(f"S3 put_object failed (bucket='{bucket}', key='{key}'): boom")
        self.puts.append({"bucket": bucket, "key": key, "body": body,
                          "length": len(body), "content_type": content_type})


class FakeExtractor(ContentExtractor):
    def __init__(self, text="", metadata=None, error=None):
        self.text = text
        self.metadata = metadata or {}
        self.error = error
        self.calls = 0

    def extract(self, stream):
        self.calls += 1
        stream.read()
        if self.error:
            raise ExtractionError(self.error)
        return self.text, dict(self.metadata)


class ExplodingExtractor(ContentExtractor):
    def extract(self, stream):
        raise ConnectionError("tika server unreachable")


def s3_event(bucket, *keys):
    return {
        "Records": [
            {
                "eventSource": "aws:s3",
                "eventName": "ObjectCreated:Put",
                "s3": {"bucket": {"name": bucket}, "object": {"key": k}},
            }
            for k in keys
        ]
    }


class FakeContext:
    aws_request_id = "req-123"


@pytest.fixture
def context():
    return FakeContext()
