"""Unit tests for docspec logging helpers."""

import logging

import pytest

from docspec.utils.logging import get_logger, log_with_context


def test_get_logger_namespaces_names() -> None:
    assert get_logger().name == "docspec"
    assert get_logger("core.writer").name == "docspec.core.writer"
    assert get_logger("docspec.parameters").name == "docspec.parameters"


def test_log_with_context_attaches_extra_fields(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="docspec"):
        log_with_context(get_logger("tests.context"), logging.DEBUG, "converted", position=2)

    record = caplog.records[-1]
    assert record.getMessage() == "converted"
    assert record.name == "docspec.tests.context"
    assert record.extra_fields == {"position": 2}


def test_log_with_context_skips_disabled_levels(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="docspec"):
        log_with_context(get_logger("tests.context"), logging.DEBUG, "ignored", position=2)

    assert not caplog.records
