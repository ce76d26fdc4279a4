"""Loan record model: a shared payoff status plus a per-kind terms payload.

A ``LoanRecord`` is either a retail installment loan or a lease. The kind is
carried by the type of ``terms`` and never changes; the payoff transition only
ever swaps ``status`` for a new ``PayoffStatus``. All classes are frozen, so a
record seen by one caller cannot be half-updated by another.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import ClassVar, Union

from car_loans.exceptions import InvalidArgumentError, InvalidLoanStateError
from car_loans.models.enums import LoanKind


@dataclass(frozen=True)
class RetailTerms:
    """Amortized installment loan terms."""

    kind: ClassVar[LoanKind] = LoanKind.RETAIL

    interest_rate: Decimal  # Annual percentage (e.g., 4.5 for 4.5%)
    term_in_months: int

    def __post_init__(self) -> None:
        if self.interest_rate < 0:
            raise InvalidArgumentError(f"interest_rate must be >= 0, got {self.interest_rate}")
        if self.term_in_months <= 0:
            raise InvalidArgumentError(f"term_in_months must be > 0, got {self.term_in_months}")


@dataclass(frozen=True)
class LeaseTerms:
    """Fixed-payment lease terms."""

    kind: ClassVar[LoanKind] = LoanKind.LEASE

    monthly_payment: Decimal
    lease_term_months: int
    residual_value: Decimal = Decimal("0")  # Informational only

    def __post_init__(self) -> None:
        if self.monthly_payment <= 0:
            raise InvalidArgumentError(f"monthly_payment must be > 0, got {self.monthly_payment}")
        if self.lease_term_months <= 0:
            raise InvalidArgumentError(
                f"lease_term_months must be > 0, got {self.lease_term_months}"
            )
        if self.residual_value < 0:
            raise InvalidArgumentError(f"residual_value must be >= 0, got {self.residual_value}")


LoanTerms = Union[RetailTerms, LeaseTerms]


@dataclass(frozen=True)
class PayoffStatus:
    """Mutable-by-replacement settlement state of a loan."""

    payoff_amount: Decimal  # Remaining balance
    is_paid_off: bool = False
    paid_off_by: str | None = None
    paid_off_date: datetime | None = None

    def __post_init__(self) -> None:
        if self.payoff_amount < 0:
            raise InvalidArgumentError(f"payoff_amount must be >= 0, got {self.payoff_amount}")

        if self.is_paid_off:
            if self.payoff_amount != 0:
                raise InvalidLoanStateError("A paid-off loan must have a zero payoff amount")
            if not self.paid_off_by or not self.paid_off_by.strip():
                raise InvalidLoanStateError("A paid-off loan must record who paid it off")
            if self.paid_off_date is None:
                raise InvalidLoanStateError("A paid-off loan must record when it was paid off")
        elif self.paid_off_by is not None or self.paid_off_date is not None:
            raise InvalidLoanStateError("An active loan cannot carry payoff details")


@dataclass(frozen=True)
class LoanRecord:
    """Single vehicle loan or lease."""

    loan_id: int
    car_id: int
    original_amount: Decimal
    start_date: datetime
    terms: LoanTerms
    status: PayoffStatus

    def __post_init__(self) -> None:
        if self.original_amount < 0:
            raise InvalidArgumentError(
                f"original_amount must be >= 0, got {self.original_amount}"
            )
        if not isinstance(self.terms, (RetailTerms, LeaseTerms)):
            raise InvalidArgumentError(f"Unsupported loan terms: {type(self.terms).__name__}")

    @property
    def kind(self) -> LoanKind:
        return self.terms.kind

    @property
    def payoff_amount(self) -> Decimal:
        return self.status.payoff_amount

    @property
    def is_paid_off(self) -> bool:
        return self.status.is_paid_off

    @property
    def paid_off_by(self) -> str | None:
        return self.status.paid_off_by

    @property
    def paid_off_date(self) -> datetime | None:
        return self.status.paid_off_date
