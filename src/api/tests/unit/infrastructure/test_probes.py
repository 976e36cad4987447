"""Unit tests for infrastructure probes and logging setup."""

from unittest.mock import MagicMock

import structlog

from infrastructure.logging import configure_logging
from infrastructure.observability import (
    DefaultDatabaseProbe,
    DefaultStartupProbe,
    ObservationContext,
)


class TestDefaultDatabaseProbe:
    def test_engine_created_logs_connection_without_password(self):
        logger = MagicMock()
        probe = DefaultDatabaseProbe(logger=logger)

        probe.engine_created("write", "postgresql://app@db:5432/launchpad")

        logger.info.assert_called_once()
        assert logger.info.call_args.kwargs["role"] == "write"

    def test_health_check_failed_logs_error(self):
        logger = MagicMock()
        probe = DefaultDatabaseProbe(logger=logger)

        probe.health_check_failed(OSError("connection refused"))

        logger.error.assert_called_once()

    def test_with_context_adds_request_id(self):
        logger = MagicMock()
        probe = DefaultDatabaseProbe(logger=logger).with_context(
            ObservationContext(request_id="req-9")
        )

        probe.engine_disposed("read")

        assert logger.info.call_args.kwargs["request_id"] == "req-9"


def test_startup_probe_logs_version():
    logger = MagicMock()
    probe = DefaultStartupProbe(logger=logger)

    probe.application_started("Launchpad API", "0.1.0")

    logger.info.assert_called_once()
    assert logger.info.call_args.kwargs["version"] == "0.1.0"


def test_observation_context_merges_extra():
    context = ObservationContext(request_id="req-1").with_user("user-alice")

    assert context.with_extra(route="/health").as_dict() == {
        "request_id": "req-1",
        "user_id": "user-alice",
        "route": "/health",
    }


def test_configure_logging_sets_filtering_level():
    try:
        configure_logging(debug=False)
        config = structlog.get_config()
        assert config["cache_logger_on_first_use"] is True
    finally:
        structlog.reset_defaults()
