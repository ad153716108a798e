import io
import json
import logging

from sgclient.logging import configure_json_logging


def test_records_are_json():
    stream = io.StringIO()
    logger = configure_json_logging(stream=stream, logger_name="sgclient.test")
    logger.info("mail_send_request", extra={"endpoint": "http://mock/send"})
    record = json.loads(stream.getvalue().strip())
    assert record["message"] == "mail_send_request"
    assert record["levelname"] == "INFO"
    assert record["name"] == "sgclient.test"
    assert record["endpoint"] == "http://mock/send"


def test_replaces_existing_handlers():
    logger = configure_json_logging(stream=io.StringIO(), logger_name="sgclient.test2")
    configure_json_logging(level=logging.DEBUG, stream=io.StringIO(), logger_name="sgclient.test2")
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
