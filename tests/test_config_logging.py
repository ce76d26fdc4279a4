"""Tests for config and logging."""

import json
import logging
import sys
from pathlib import Path

import pytest

from car_loans.config import CarLoanConfig, OutputConfig, SeedConfig
from car_loans.exceptions import ConfigurationError
from car_loans.logging import JsonFormatter, loan_context, setup_logging
from car_loans.models import LoanRecord

ENV_VARS = [
    "OUTPUT_DIR",
    "PRETTY_JSON",
    "USE_DEMO_DATA",
    "SYNTHETIC_OWNERS",
    "CARS_PER_OWNER",
    "SEED",
    "LOG_LEVEL",
    "LOG_FORMAT",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove all config variables from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestOutputConfig:
    """Tests for OutputConfig."""

    def test_default_values(self) -> None:
        config = OutputConfig()

        assert config.json_output_dir == Path("output")
        assert config.pretty_json is False


class TestSeedConfig:
    """Tests for SeedConfig."""

    def test_default_values(self) -> None:
        config = SeedConfig()

        assert config.use_demo_data is True
        assert config.synthetic_owners == 0
        assert config.cars_per_owner == 2
        assert config.seed is None


class TestCarLoanConfig:
    """Tests for CarLoanConfig."""

    def test_default_values(self) -> None:
        config = CarLoanConfig()

        assert isinstance(config.output, OutputConfig)
        assert isinstance(config.seed_data, SeedConfig)
        assert config.log_level == "INFO"
        assert config.log_format == "standard"

    def test_from_env_default(self, clean_env: pytest.MonkeyPatch) -> None:
        config = CarLoanConfig.from_env()

        assert config.output.json_output_dir == Path("output")
        assert config.seed_data.use_demo_data is True
        assert config.seed_data.seed is None
        assert config.log_level == "INFO"

    def test_from_env_custom(self, clean_env: pytest.MonkeyPatch) -> None:
        env = {
            "OUTPUT_DIR": "/data/loans",
            "PRETTY_JSON": "true",
            "USE_DEMO_DATA": "false",
            "SYNTHETIC_OWNERS": "25",
            "CARS_PER_OWNER": "3",
            "SEED": "12345",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "JSON",
        }
        for name, value in env.items():
            clean_env.setenv(name, value)

        config = CarLoanConfig.from_env()

        assert config.output.json_output_dir == Path("/data/loans")
        assert config.output.pretty_json is True
        assert config.seed_data.use_demo_data is False
        assert config.seed_data.synthetic_owners == 25
        assert config.seed_data.cars_per_owner == 3
        assert config.seed_data.seed == 12345
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_from_env_bad_integer(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("SYNTHETIC_OWNERS", "lots")

        with pytest.raises(ConfigurationError, match="SYNTHETIC_OWNERS"):
            CarLoanConfig.from_env()

    def test_from_env_bad_log_format(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("LOG_FORMAT", "xml")

        with pytest.raises(ConfigurationError, match="LOG_FORMAT"):
            CarLoanConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        setup_logging()

        assert logging.getLogger("car_loans").level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        setup_logging(format_type="json")

        assert any(isinstance(h.formatter, JsonFormatter) for h in logging.getLogger().handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_faker_logger_quieted(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, level: int = logging.INFO, msg: str = "Test message", exc_info=None) -> logging.LogRecord:
        return logging.LogRecord(
            name="car_loans.test",
            level=level,
            pathname="/path/to/file.py",
            lineno=42,
            msg=msg,
            args=(),
            exc_info=exc_info,
        )

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "car_loans.test"
        assert data["message"] == "Test message"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(JsonFormatter().format(self._record(logging.ERROR, "Error occurred", exc_info)))

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]

    def test_format_with_extra(self) -> None:
        record = self._record()
        record.extra = {"loan_id": 1, "car_id": 1}

        data = json.loads(JsonFormatter().format(record))

        assert data["loan_id"] == 1
        assert data["car_id"] == 1


class TestLoanContext:
    """Tests for loan_context."""

    def test_loan_fields(self, lease_loan: LoanRecord) -> None:
        context = loan_context(lease_loan)

        assert context == {"extra": {"loan_id": 2, "car_id": 2, "kind": "Lease"}}

    def test_additional_fields(self, retail_loan: LoanRecord) -> None:
        context = loan_context(retail_loan, paid_off_by="John Doe")

        assert context["extra"]["paid_off_by"] == "John Doe"
        assert context["extra"]["kind"] == "Retail"

    def test_rendered_by_json_formatter(self, retail_loan: LoanRecord) -> None:
        logger = logging.getLogger("car_loans.test_context")
        record = logger.makeRecord(
            logger.name, logging.INFO, "file.py", 1, "Loan settled", (), None,
            extra=loan_context(retail_loan),
        )

        data = json.loads(JsonFormatter().format(record))

        assert data["loan_id"] == 1
        assert data["kind"] == "Retail"


class TestPackageInit:
    """Tests for car_loans __init__.py."""

    def test_version_exported(self) -> None:
        from car_loans import __version__

        assert isinstance(__version__, str)
