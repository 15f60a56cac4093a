# common/config.py
import os

def _get_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "y"}

def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else default

REGION = os.getenv("AWS_REGION", "us-east-1")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
LOG_EVENTS = _get_bool("LOG_EVENTS", "true")

# Empty prefix writes extracts next to their source objects
EXTRACT_BUCKET_PREFIX = os.getenv("EXTRACT_BUCKET_PREFIX", "extracts.")

TIKA_SERVER_ENDPOINT = os.getenv("TIKA_SERVER_ENDPOINT", "http://localhost:9998")
TIKA_REQUEST_TIMEOUT = _get_int("TIKA_REQUEST_TIMEOUT", 60)

EXTRACT_SUFFIX = ".extract"

# synthetic-transaction fixture, always fails extraction
FAILURE_SENTINEL_SUFFIX = "tika.exception.testing.pdf"
FAILURE_SENTINEL_MESSAGE = "Test Tika Exception"
