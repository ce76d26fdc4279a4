"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from car_loans.models import LeaseTerms, LoanRecord, PayoffStatus, RetailTerms
from car_loans.services import LoanService
from car_loans.store import LoanRepository


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def now() -> datetime:
    """Fixed point in time used as the service clock."""
    return datetime(2025, 6, 1, 12, 0, 0)


@pytest.fixture
def retail_loan(now: datetime) -> LoanRecord:
    """Active retail loan on car 1."""
    return LoanRecord(
        loan_id=1,
        car_id=1,
        original_amount=Decimal("20000"),
        start_date=now - timedelta(days=360),
        terms=RetailTerms(interest_rate=Decimal("5.0"), term_in_months=60),
        status=PayoffStatus(payoff_amount=Decimal("15000")),
    )


@pytest.fixture
def lease_loan(now: datetime) -> LoanRecord:
    """Active lease on car 2, started twelve 30-day months ago."""
    return LoanRecord(
        loan_id=2,
        car_id=2,
        original_amount=Decimal("48000"),
        start_date=now - timedelta(days=360),
        terms=LeaseTerms(
            monthly_payment=Decimal("300"),
            lease_term_months=36,
            residual_value=Decimal("28000"),
        ),
        status=PayoffStatus(payoff_amount=Decimal("35000")),
    )


@pytest.fixture
def repository(retail_loan: LoanRecord, lease_loan: LoanRecord) -> LoanRepository:
    """Fresh repository holding the retail loan and the lease."""
    repo = LoanRepository()
    repo.add(retail_loan)
    repo.add(lease_loan)
    return repo


@pytest.fixture
def service(repository: LoanRepository, now: datetime) -> LoanService:
    """Loan service with a frozen clock."""
    return LoanService(repository, clock=lambda: now)
