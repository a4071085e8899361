"""Tests for loguru logging setup"""
import logging

import pytest
from loguru import logger

from modelgateway.core.logging import (
    clear_provider_context,
    get_provider_context,
    set_provider_context,
    setup_logging,
)


@pytest.fixture
def captured(tmp_path):
    """Configure logging into tmp_path and capture loguru messages"""
    log_file = tmp_path / "logs" / "gateway.log"
    setup_logging(log_level="DEBUG", log_file=str(log_file))
    messages = []
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield log_file, messages
    logger.remove(sink_id)
    clear_provider_context()


@pytest.mark.unit
class TestLogging:
    """Test logging configuration"""

    def test_log_file_created(self, captured):
        log_file, _ = captured
        logger.info("gateway started")
        assert log_file.exists()

    def test_httpx_logs_prefixed_with_provider(self, captured):
        _, messages = captured
        set_provider_context("huggingfacehub")

        logging.getLogger("httpx").info('HTTP Request: GET https://example.com "HTTP/1.1 200 OK"')

        assert any(
            m.startswith("[Provider: huggingfacehub] HTTP Request:") for m in messages
        )

    def test_no_prefix_without_provider(self, captured):
        _, messages = captured

        logging.getLogger("httpx").info('HTTP Request: GET https://example.com "HTTP/1.1 200 OK"')

        assert any(m.startswith("HTTP Request:") for m in messages)

    def test_provider_context(self):
        set_provider_context("openai")
        assert get_provider_context() == "openai"
        clear_provider_context()
        assert get_provider_context() == ""

    def test_other_loggers_not_prefixed(self, captured):
        _, messages = captured
        set_provider_context("openai")

        logging.getLogger("uvicorn.error").warning("HTTP Request: not from httpx")

        assert "HTTP Request: not from httpx" in messages

    def test_stdlib_records_forwarded(self, captured):
        _, messages = captured

        logging.getLogger("fastapi").error("route failed")

        assert "route failed" in messages
