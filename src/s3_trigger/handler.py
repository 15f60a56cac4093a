# src/s3_trigger/handler.py
import json, logging

from common.config import LOG_EVENTS, LOG_LEVEL
from common.extractor import TikaExtractor
from common.keys import decode_key
from common.process import process_one_object
from common.storage import S3Store

logger = logging.getLogger()
logger.setLevel(LOG_LEVEL)


def _first_record(event: dict, log) -> dict:
    records = event.get("Records") or []
    if not records:
        raise ValueError("S3 event contains no records")
    # bucket notifications deliver one record per event; anything else is a trigger misconfiguration
    if len(records) > 1:
        log.warning("Event carries %d records; only the first is processed, %d left unprocessed",
                    len(records), len(records) - 1)
    return records[0]


def handler(event, context, store=None, extractor=None):
    request_id = getattr(context, "aws_request_id", "-")
    log = logging.LoggerAdapter(logger, {"aws_request_id": request_id})
    if LOG_EVENTS:
        log.info("Received S3 Event: %s", json.dumps(event))

    try:
        rec = _first_record(event, log)
        bucket = rec["s3"]["bucket"]["name"]
        # object key may have spaces or non-ASCII characters
        key = decode_key(rec["s3"]["object"]["key"])

        return process_one_object(
            bucket,
            key,
            store=store or S3Store(),
            extractor=extractor or TikaExtractor(),
            logger=log,
        )
    except Exception as e:
        log.exception("Exception: %s", e)
        raise
