"""Shared serialization utilities for sinks."""

from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from car_loans.models import LoanRecord


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if isinstance(obj, LoanRecord):
        return loan_to_dict(obj)
    elif is_dataclass(obj):
        return {key: serialize_value(value) for key, value in asdict(obj).items()}
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def loan_to_dict(loan: LoanRecord) -> dict:
    """Flatten a loan record, tagging it with its kind."""
    result = {
        "loan_id": loan.loan_id,
        "car_id": loan.car_id,
        "kind": loan.kind,
        "original_amount": loan.original_amount,
        "start_date": loan.start_date,
        **asdict(loan.terms),
        **asdict(loan.status),
    }
    return {key: serialize_value(value) for key, value in result.items()}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
