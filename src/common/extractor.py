# src/common/extractor.py
import json
from abc import ABC, abstractmethod
from typing import Dict, List, Tuple, Union

from tika import parser as tika_parser

from .config import TIKA_SERVER_ENDPOINT, TIKA_REQUEST_TIMEOUT
from .storage import TransportError

MetadataValue = Union[str, List[str]]

CONTENT_KEY = "X-TIKA:content"
CONTAINER_EXCEPTION_KEY = "X-TIKA:EXCEPTION:container_exception"

# Tika answers these for documents it cannot handle; anything else non-200 is the server's problem
REJECTED_STATUSES = {415: "Unsupported media type", 422: "Unprocessable document"}


class ExtractionError(Exception):
    """The document could not be parsed. Reported as data, not as a failed invocation."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ContentExtractor(ABC):

    @abstractmethod
    def extract(self, stream) -> Tuple[str, Dict[str, MetadataValue]]:
        """
        Read a binary stream and return (text, metadata).
        Metadata values are a string or, for multi-valued attributes, a list of strings.
        Raises ExtractionError when the content is unparseable or unsupported.
        """


def _as_values(value) -> List[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return [str(value)]


def container_metadata(doc: dict) -> Dict[str, List[str]]:
    # only the container's own attributes; embedded documents report theirs separately
    return {name: _as_values(value) for name, value in doc.items() if name != CONTENT_KEY}


class TikaExtractor(ContentExtractor):
    """Delegates parsing and type detection to an Apache Tika server (/rmeta/text)."""

    def __init__(self, server_endpoint: str = TIKA_SERVER_ENDPOINT, timeout: int = TIKA_REQUEST_TIMEOUT):
        self.server_endpoint = server_endpoint
        self.timeout = timeout

    def extract(self, stream):
        data = stream.read()
        status, body = tika_parser.from_buffer(
            data,
            serverEndpoint=self.server_endpoint,
            requestOptions={"timeout": self.timeout},
            raw_response=True,
        )

        if status in REJECTED_STATUSES:
            raise ExtractionError(f"{REJECTED_STATUSES[status]} (Tika HTTP {status})")
        if status != 200:
            raise TransportError(f"Tika server call failed (endpoint='{self.server_endpoint}', status={status})")

        docs = json.loads(body) if body else []
        if not docs:
            return "", {}

        container = docs[0]
        # /rmeta reports parse failures inside a 200 response
        failure = container.get(CONTAINER_EXCEPTION_KEY)
        if failure:
            lines = str(failure).strip().splitlines()
            raise ExtractionError(lines[0] if lines else "Tika could not parse the document")

        text = "".join(d.get(CONTENT_KEY) or "" for d in docs)
        return text, container_metadata(container)
