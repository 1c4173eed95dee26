import json
import logging

from adlens.core.logging import JSONFormatter, get_logger


def _format(**extra):
    record = logging.LogRecord("adlens.test", logging.INFO, __file__, 1, "hello", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return json.loads(JSONFormatter().format(record))


def test_json_line_carries_platform_and_entity():
    entry = _format(platform="meta", entity_id="act_1")
    assert entry["message"] == "hello"
    assert entry["platform"] == "meta"
    assert entry["entity_id"] == "act_1"


def test_unlisted_extras_are_not_emitted():
    entry = _format(endpoint="/compare", metric="cpc")
    assert "endpoint" not in entry
    assert "metric" not in entry


def test_get_logger_namespaces_and_reuses_handler():
    logger = get_logger("test")
    assert logger.name == "adlens.test"
    assert len(get_logger("test").handlers) == 1
