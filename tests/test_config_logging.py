"""Tests for config and logging."""

import json
import logging
import os
import sys
from unittest.mock import patch

import pytest

from spd_payment.calculator import IbanCalculator
from spd_payment.config import (
    PaymentDefaults,
    QrImageConfig,
    SpdPaymentConfig,
)
from spd_payment.exceptions import ConfigurationError
from spd_payment.logging import JsonFormatter, setup_logging
from spd_payment.models import BankAccountIdentifier

ENV_VARS = [
    "SPD_CURRENCY",
    "SPD_REPEAT",
    "SPD_COUNTRY",
    "SPD_QR_ERROR_CORRECTION",
    "SPD_QR_BOX_SIZE",
    "SPD_QR_BORDER",
    "LOG_LEVEL",
    "LOG_FORMAT",
]


def _clean_env() -> dict[str, str]:
    return {k: v for k, v in os.environ.items() if k not in ENV_VARS}


class TestPaymentDefaults:
    """Tests for PaymentDefaults."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        defaults = PaymentDefaults()

        assert defaults.currency == "CZK"
        assert defaults.repeat == 7
        assert defaults.country == "CZ"

    def test_custom_values(self) -> None:
        defaults = PaymentDefaults(currency="EUR", repeat=3, country="SK")

        assert defaults.currency == "EUR"
        assert defaults.repeat == 3
        assert defaults.country == "SK"


class TestQrImageConfig:
    """Tests for QrImageConfig."""

    def test_default_values(self) -> None:
        config = QrImageConfig()

        assert config.error_correction == "M"
        assert config.box_size == 10
        assert config.border == 4
        assert config.fill_color == "black"
        assert config.back_color == "white"

    def test_error_correction_uppercased(self) -> None:
        assert QrImageConfig(error_correction="h").error_correction == "H"

    def test_unknown_error_correction(self) -> None:
        with pytest.raises(ConfigurationError):
            QrImageConfig(error_correction="X")


class TestSpdPaymentConfig:
    """Tests for SpdPaymentConfig."""

    def test_default_values(self) -> None:
        config = SpdPaymentConfig()

        assert isinstance(config.defaults, PaymentDefaults)
        assert isinstance(config.qr, QrImageConfig)
        assert config.log_level == "INFO"
        assert config.log_format == "standard"

    def test_from_env_default(self) -> None:
        """Test creating config from environment with defaults."""
        with patch.dict(os.environ, _clean_env(), clear=True):
            config = SpdPaymentConfig.from_env()

        assert config.defaults.currency == "CZK"
        assert config.defaults.repeat == 7
        assert config.defaults.country == "CZ"
        assert config.qr.box_size == 10
        assert config.log_level == "INFO"

    def test_from_env_custom(self) -> None:
        """Test creating config from custom environment variables."""
        env = {
            **_clean_env(),
            "SPD_CURRENCY": "EUR",
            "SPD_REPEAT": "3",
            "SPD_COUNTRY": "SK",
            "SPD_QR_ERROR_CORRECTION": "Q",
            "SPD_QR_BOX_SIZE": "6",
            "SPD_QR_BORDER": "2",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "json",
        }
        with patch.dict(os.environ, env, clear=True):
            config = SpdPaymentConfig.from_env()

        assert config.defaults.currency == "EUR"
        assert config.defaults.repeat == 3
        assert config.defaults.country == "SK"
        assert config.qr.error_correction == "Q"
        assert config.qr.box_size == 6
        assert config.qr.border == 2
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_from_env_invalid_number(self) -> None:
        env = {**_clean_env(), "SPD_REPEAT": "weekly"}
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ConfigurationError):
                SpdPaymentConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        setup_logging()

        logger = logging.getLogger("spd_payment")
        assert logger.level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        """Test logging with invalid level defaults to INFO."""
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        setup_logging(format_type="json")

        logger = logging.getLogger()
        assert any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_logs_go_to_stderr(self) -> None:
        setup_logging()

        handler = logging.getLogger().handlers[0]
        assert handler.stream is sys.stderr

    def test_external_loggers_quieted(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger("PIL").level == logging.WARNING
        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        params = {
            "name": "spd_payment.test",
            "level": logging.INFO,
            "pathname": "/path/to/file.py",
            "lineno": 42,
            "msg": "Serialized %s",
            "args": ("CZ5530300000001325090010",),
            "exc_info": None,
        }
        params.update(kwargs)
        return logging.LogRecord(**params)

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "spd_payment.test"
        assert data["message"] == "Serialized CZ5530300000001325090010"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        record = self._record(level=logging.ERROR, exc_info=exc_info)
        data = json.loads(JsonFormatter().format(record))

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]

    def test_format_with_context(self) -> None:
        record = self._record()
        record.iban = "CZ5530300000001325090010"
        record.options = ["amount", "comment"]

        data = json.loads(JsonFormatter().format(record))

        assert data["iban"] == "CZ5530300000001325090010"
        assert data["options"] == ["amount", "comment"]
        assert "field" not in data

    def test_format_ignores_unrelated_attributes(self) -> None:
        record = self._record()
        record.secret = "value"

        data = json.loads(JsonFormatter().format(record))

        assert "secret" not in data

    def test_calculator_logs_iban_context(self, caplog: pytest.LogCaptureFixture) -> None:
        identifier = BankAccountIdentifier("1325090010", "3030")

        with caplog.at_level(logging.DEBUG, logger="spd_payment"):
            IbanCalculator().compute(identifier)

        record = next(r for r in caplog.records if r.name == "spd_payment.calculator")
        data = json.loads(JsonFormatter().format(record))
        assert data["iban"] == "CZ5530300000001325090010"


class TestSpdPaymentInit:
    """Tests for spd_payment __init__.py."""

    def test_version_exported(self) -> None:
        from spd_payment import __version__

        assert isinstance(__version__, str)
