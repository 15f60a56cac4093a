# src/common/keys.py
import urllib.parse

from .config import EXTRACT_BUCKET_PREFIX, EXTRACT_SUFFIX, FAILURE_SENTINEL_SUFFIX

def decode_key(raw_key: str) -> str:
    # S3 form-encodes keys in notifications: '+' is a space, the rest is %-escaped UTF-8
    return urllib.parse.unquote_plus(raw_key, encoding="utf-8")

def is_extract_key(key: str) -> bool:
    return key.lower().endswith(EXTRACT_SUFFIX)

def is_failure_sentinel(key: str) -> bool:
    return key.lower().endswith(FAILURE_SENTINEL_SUFFIX)

def extract_key_for(key: str) -> str:
    return key + EXTRACT_SUFFIX

def extract_bucket_for(bucket: str, prefix: str = None) -> str:
    if prefix is None:
        prefix = EXTRACT_BUCKET_PREFIX
    return f"{prefix}{bucket}"

def file_path_for(bucket: str, key: str) -> str:
    return f"s3://{bucket}/{key}"
