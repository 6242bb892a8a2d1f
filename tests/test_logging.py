"""Tests for structured JSON logging."""

import json
import logging

from badger_shape.logging import LogEvent, StructuredLogger, create_logger


def test_info_is_json(caplog):
    logger = StructuredLogger("test", logger_name="badger.test.info")
    with caplog.at_level(logging.INFO, logger="badger.test.info"):
        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Loaded config",
            metadata={'path': 'badge.yaml'},
        )

    entry = json.loads(caplog.records[-1].getMessage())
    assert entry['level'] == 'INFO'
    assert entry['component'] == 'test'
    assert entry['event'] == 'config.loaded'
    assert entry['message'] == 'Loaded config'
    assert entry['metadata'] == {'path': 'badge.yaml'}
    assert 'timestamp' in entry


def test_error_includes_exception(caplog):
    logger = StructuredLogger("test", logger_name="badger.test.error")
    with caplog.at_level(logging.ERROR, logger="badger.test.error"):
        logger.error(
            event=LogEvent.RENDER_FAILED,
            message="Render failed",
            exc_info=OSError("disk full"),
        )

    entry = json.loads(caplog.records[-1].getMessage())
    assert entry['event'] == 'render.failed'
    assert entry['exception'] == {'type': 'OSError', 'message': 'disk full'}


def test_debug_filtered_by_level(caplog):
    logger = create_logger("test.filtered", level=logging.INFO)
    with caplog.at_level(logging.INFO, logger="badger.test.filtered"):
        logger.debug(event=LogEvent.BADGE_DRAWN, message="Drew badge")
    assert not caplog.records


def test_is_enabled_for():
    logger = create_logger("test.enabled", level=logging.WARNING)
    assert logger.is_enabled_for(logging.WARNING)
    assert not logger.is_enabled_for(logging.DEBUG)


def test_debug_metadata(caplog):
    logger = create_logger("test.level", level=logging.DEBUG)
    with caplog.at_level(logging.DEBUG, logger="badger.test.level"):
        logger.debug(
            event=LogEvent.BADGE_DRAWN,
            message="Drew badge",
            metadata={'badge_rect': (16, 16, 48, 48)},
        )

    entry = json.loads(caplog.records[-1].getMessage())
    assert entry['level'] == 'DEBUG'
    assert entry['metadata'] == {'badge_rect': [16, 16, 48, 48]}
