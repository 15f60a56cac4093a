# src/common/result.py
"""
Extract envelopes. Both variants serialize to the same key set, in this order:
Exception, FilePath, Text, ContentType, ContentLength, Metadata.
"""
import json
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

DEFAULT_CONTENT_TYPE = "content/unknown"
DEFAULT_CONTENT_LENGTH = "0"


def _first(value) -> Optional[str]:
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None or value == "":
        return None
    return str(value)


def join_values(value) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


@dataclass(frozen=True)
class ExtractionSuccess:
    file_path: str
    text: str
    content_type: str
    content_length: str
    metadata: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_extraction(cls, file_path: str, text: str, metadata: dict) -> "ExtractionSuccess":
        # multi-valued attributes: first value for the envelope fields, all of them joined in Metadata
        return cls(
            file_path=file_path,
            text=text or "",
            content_type=_first(metadata.get("Content-Type")) or DEFAULT_CONTENT_TYPE,
            content_length=_first(metadata.get("Content-Length")) or DEFAULT_CONTENT_LENGTH,
            metadata={name: join_values(value) for name, value in metadata.items()},
        )

    def to_dict(self) -> dict:
        return {
            "Exception": None,
            "FilePath": self.file_path,
            "Text": self.text,
            "ContentType": self.content_type,
            "ContentLength": self.content_length,
            "Metadata": dict(self.metadata),
        }


@dataclass(frozen=True)
class ExtractionFailure:
    file_path: str
    error_message: str

    def to_dict(self) -> dict:
        return {
            "Exception": self.error_message,
            "FilePath": self.file_path,
            "Text": "",
            "ContentType": "unknown",
            "ContentLength": "0",
            "Metadata": {"resourceName": self.file_path},
        }


ExtractionResult = Union[ExtractionSuccess, ExtractionFailure]


def serialize_result(result: ExtractionResult) -> str:
    return json.dumps(result.to_dict(), separators=(",", ":"), ensure_ascii=False)
