# src/common/process.py
import logging
from contextlib import closing

from .config import FAILURE_SENTINEL_MESSAGE
from .extractor import ContentExtractor, ExtractionError
from .keys import extract_bucket_for, extract_key_for, file_path_for, is_extract_key, is_failure_sentinel
from .result import ExtractionFailure, ExtractionResult, ExtractionSuccess, serialize_result
from .storage import S3Store

IGNORED = "Ignored"
SUCCESS = "Success"

_log = logging.getLogger(__name__)


def extract_object(bucket: str, key: str, stream, extractor: ContentExtractor, logger=_log) -> ExtractionResult:
    file_path = file_path_for(bucket, key)
    logger.info("Extracting text with Tika")
    try:
        # synthetic transactions exercise the failure envelope end to end
        if is_failure_sentinel(key):
            raise ExtractionError(FAILURE_SENTINEL_MESSAGE)
        text, metadata = extractor.extract(stream)
    except ExtractionError as e:
        logger.warning("Extraction failed for %s: %s", file_path, e.message)
        return ExtractionFailure(file_path=file_path, error_message=e.message)

    logger.info("Tika parsing success")
    return ExtractionSuccess.from_extraction(file_path, text, metadata)


def process_one_object(bucket: str, key: str, store: S3Store, extractor: ContentExtractor,
                       logger=_log, extract_bucket: str = None) -> str:
    # 1) never re-extract our own output
    if is_extract_key(key):
        logger.info("Ignoring extract file %s", key)
        return IGNORED

    # 2) fetch + extract; the body is released even when extraction raises
    with closing(store.get(bucket, key)) as body:
        result = extract_object(bucket, key, body, extractor, logger)

    # 3) save next to the source key in the extracts bucket
    payload = serialize_result(result).encode("utf-8")
    out_bucket = extract_bucket or extract_bucket_for(bucket)
    out_key = extract_key_for(key)
    logger.info("Saving extract file to s3://%s/%s (%d bytes)", out_bucket, out_key, len(payload))
    store.put(out_bucket, out_key, payload)

    return SUCCESS
