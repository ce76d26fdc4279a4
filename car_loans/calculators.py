"""Financial calculations and the payoff transition for loan records.

Every function here is pure: the current time is always passed in as ``now``
and records are never mutated, only replaced.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from car_loans.exceptions import InvalidArgumentError
from car_loans.models import LoanKind, LoanRecord, PayoffStatus

# Approximate month used for lease elapsed time, not calendar-accurate
DAYS_PER_MONTH = 30

# Early termination penalty: 50% of the remaining lease payments
EARLY_TERMINATION_RATE = Decimal("0.5")


def monthly_payment(loan: LoanRecord) -> Decimal:
    """Monthly installment of a retail loan.

    Uses the standard amortization formula with ``rate = interest_rate / 100 / 12``.
    Zero-interest loans are split evenly across the term.

    Parameters
    ----------
    loan : LoanRecord
        A retail loan.

    Returns
    -------
    Decimal
        Monthly payment, unrounded.

    Raises
    ------
    InvalidArgumentError
        If ``loan`` is a lease.
    """
    _require_kind(loan, LoanKind.RETAIL)
    terms = loan.terms

    if terms.interest_rate == 0:
        return loan.original_amount / terms.term_in_months

    monthly_rate = Decimal(terms.interest_rate) / 100 / 12
    power = (1 + monthly_rate) ** terms.term_in_months
    return loan.original_amount * monthly_rate * power / (power - 1)


def elapsed_months(start_date: datetime, now: datetime) -> int:
    """Whole 30-day months between ``start_date`` and ``now`` (floored, never negative)."""
    return max((now - start_date).days // DAYS_PER_MONTH, 0)


def early_termination_fee(loan: LoanRecord, now: datetime) -> Decimal:
    """Penalty for ending a lease before its term is over.

    Parameters
    ----------
    loan : LoanRecord
        A lease.
    now : datetime
        Point in time at which the lease would be terminated.

    Returns
    -------
    Decimal
        Half of the remaining monthly payments, or zero once the term has elapsed.

    Raises
    ------
    InvalidArgumentError
        If ``loan`` is a retail loan.
    """
    _require_kind(loan, LoanKind.LEASE)
    terms = loan.terms

    remaining_months = terms.lease_term_months - elapsed_months(loan.start_date, now)
    if remaining_months <= 0:
        return Decimal("0")

    return remaining_months * terms.monthly_payment * EARLY_TERMINATION_RATE


def validate_payer(payer: str | None) -> str:
    """Return the trimmed payer name, rejecting missing or blank names."""
    if payer is None or not payer.strip():
        raise InvalidArgumentError("Payer name cannot be empty")
    return payer.strip()


def mark_paid_off(loan: LoanRecord, payer: str | None, now: datetime) -> LoanRecord:
    """Return a copy of ``loan`` settled by ``payer`` at ``now``.

    Does not check whether the loan is already paid off; callers guard that.
    """
    name = validate_payer(payer)
    status = PayoffStatus(
        payoff_amount=Decimal("0"),
        is_paid_off=True,
        paid_off_by=name,
        paid_off_date=now,
    )
    return replace(loan, status=status)


def _require_kind(loan: LoanRecord, kind: LoanKind) -> None:
    if loan.kind is not kind:
        raise InvalidArgumentError(
            f"Loan {loan.loan_id} is a {loan.kind.value} loan, expected {kind.value}"
        )
