"""Tests for the structlog configuration helpers."""

import logging
from unittest.mock import Mock

import pytest
import structlog

from monadic.errors import MissingCallableError
from monadic.logging import (
    configure_logging,
    drop_contract_violations,
    get_logger,
    log_contract_violation,
)


class TestConfigureLogging:
    """Test configure_logging processor chains."""

    def teardown_method(self):
        structlog.reset_defaults()
        logging.getLogger("monadic").setLevel(logging.NOTSET)

    def test_json_renderer(self):
        configure_logging(level="DEBUG", format_json=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer(self):
        configure_logging(level="info")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_optional_processors(self):
        marker = Mock()
        configure_logging(include_timestamp=False, include_caller=True, extra_processors=[marker])

        processors = structlog.get_config()["processors"]
        assert not any(isinstance(p, structlog.processors.TimeStamper) for p in processors)
        assert any(isinstance(p, structlog.processors.CallsiteParameterAdder) for p in processors)
        assert processors[-2] is marker

    def test_level_applies_to_package_logger(self):
        configure_logging(level="DEBUG")

        assert logging.getLogger("monadic").level == logging.DEBUG

    def test_contract_violations_can_be_dropped(self):
        configure_logging(contract_violations=False)

        processors = structlog.get_config()["processors"]
        assert processors[1] is drop_contract_violations

    def test_contract_violations_kept_by_default(self):
        configure_logging()

        assert drop_contract_violations not in structlog.get_config()["processors"]

    def test_get_logger(self):
        assert get_logger(__name__) is not None


class TestDropContractViolations:
    """Test the processor that silences contract violation events."""

    def test_drops_contract_violation(self):
        with pytest.raises(structlog.DropEvent):
            drop_contract_violations(None, "debug", {"event": "contract_violation"})

    def test_passes_other_events(self):
        event = {"event": "something_else"}
        assert drop_contract_violations(None, "info", event) is event


class TestLogContractViolation:
    """Test the contract violation log helper."""

    def test_binds_operation_and_error(self):
        logger = Mock()
        error = MissingCallableError("List.map requires a function", operation="List.map")

        log_contract_violation(logger, "List.map", error)

        logger.bind.assert_called_once_with(
            operation="List.map",
            error_type="MissingCallableError",
            reason="List.map requires a function",
        )
        logger.bind.return_value.debug.assert_called_once_with("contract_violation")

    def test_binds_context_when_given(self):
        logger = Mock()
        error = MissingCallableError("bad", operation="List.bind")

        log_contract_violation(logger, "List.bind", error, context={"argument_type": "int"})

        bound = logger.bind.return_value
        bound.bind.assert_called_once_with(context={"argument_type": "int"})
        bound.bind.return_value.debug.assert_called_once_with("contract_violation")
