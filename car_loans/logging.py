"""Structured logging configuration for car-loans."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from car_loans.models import LoanRecord


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
) -> None:
    """Configure logging for car-loans.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str
        Format type: "standard" or "json".
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("car_loans").setLevel(log_level)

    # Faker logs locale/provider lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        import json
        from datetime import datetime, timezone

        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Fields passed via extra=loan_context(...)
        if hasattr(record, "extra"):
            log_data.update(record.extra)

        return json.dumps(log_data, default=str)


def loan_context(loan: LoanRecord, **fields: Any) -> dict[str, Any]:
    """Build the ``extra`` argument that tags a log call with a loan.

    ``JsonFormatter`` merges these fields into the emitted JSON object.

    Parameters
    ----------
    loan : LoanRecord
        Loan the message is about.
    **fields
        Additional fields to attach.

    Returns
    -------
    dict[str, Any]
        Mapping suitable for ``logger.info(..., extra=...)``.
    """
    return {
        "extra": {
            "loan_id": loan.loan_id,
            "car_id": loan.car_id,
            "kind": loan.kind.value,
            **fields,
        }
    }
