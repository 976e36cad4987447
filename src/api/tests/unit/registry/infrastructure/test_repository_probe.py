"""Unit tests for DefaultRepositoryProbe."""

from unittest.mock import MagicMock

from registry.infrastructure.observability import DefaultRepositoryProbe
from shared_kernel.observability_context import ObservationContext


def test_entity_saved_logs_with_entity_prefix():
    logger = MagicMock()
    probe = DefaultRepositoryProbe(logger=logger)

    probe.entity_saved("resource", "01ABC", "user-alice")

    logger.info.assert_called_once_with(
        "resource_saved", entity_id="01ABC", owner_id="user-alice"
    )


def test_storage_failed_logs_error():
    logger = MagicMock()
    probe = DefaultRepositoryProbe(logger=logger)
    error = RuntimeError("boom")

    probe.storage_failed("resource.add", error)

    logger.error.assert_called_once()
    assert logger.error.call_args[0][0] == "registry_storage_failed"


def test_with_context_binds_request_metadata():
    logger = MagicMock()
    probe = DefaultRepositoryProbe(logger=logger).with_context(
        ObservationContext(request_id="req-1", user_id="user-alice")
    )

    probe.entity_not_found("workspace", "01XYZ", "user-alice")

    kwargs = logger.debug.call_args.kwargs
    assert kwargs["request_id"] == "req-1"
    assert kwargs["entity_id"] == "01XYZ"
