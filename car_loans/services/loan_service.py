"""Loan payoff orchestration."""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from typing import Callable

from car_loans.calculators import (
    early_termination_fee,
    mark_paid_off,
    monthly_payment,
    validate_payer,
)
from car_loans.exceptions import InvalidArgumentError, InvalidLoanStateError
from car_loans.logging import loan_context
from car_loans.models import LoanKind, LoanRecord
from car_loans.store.loans import LoanRepository

logger = logging.getLogger(__name__)


class LoanService:
    """Apply payoff requests and bookkeeping corrections to a loan repository.

    The caller supplies ``car_id`` values it has already resolved for the
    current user; ownership is not checked here.

    Parameters
    ----------
    repository : LoanRepository
        Store the service reads from and writes to.
    clock : Callable[[], datetime] | None
        Source of the current time (default ``datetime.now``).
    """

    def __init__(
        self,
        repository: LoanRepository,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.repository = repository
        self.clock = clock or datetime.now
        self._lock = threading.Lock()

    def payoff(self, car_id: int, payer: str | None) -> bool:
        """Record the loan for ``car_id`` as paid off by ``payer``.

        Parameters
        ----------
        car_id : int
            Car whose loan is being settled.
        payer : str | None
            Name of the person settling the loan.

        Returns
        -------
        bool
            True if the loan was settled by this call, False if the car has no
            loan or the loan was already paid off.

        Raises
        ------
        InvalidArgumentError
            If ``payer`` is missing or blank.
        """
        name = validate_payer(payer)

        with self._lock:
            loan = self.repository.find_by_car_id(car_id)
            if loan is None:
                logger.debug("No loan found for car %s", car_id)
                return False
            if loan.is_paid_off:
                logger.debug("Loan %s for car %s is already paid off", loan.loan_id, car_id)
                return False

            settled = mark_paid_off(loan, name, self.clock())
            self.repository.upsert(settled)

        logger.info(
            "Loan %s for car %s paid off by %s",
            settled.loan_id,
            car_id,
            settled.paid_off_by,
            extra=loan_context(settled, paid_off_by=settled.paid_off_by),
        )
        return True

    def get_by_car_id(self, car_id: int) -> LoanRecord | None:
        """Get the loan financing a car, if any."""
        return self.repository.find_by_car_id(car_id)

    def update(self, loan: LoanRecord | None) -> None:
        """Copy the payoff status of ``loan`` onto the stored record.

        Only ``payoff_amount``, ``is_paid_off``, ``paid_off_by`` and
        ``paid_off_date`` are taken from ``loan``; the stored record keeps its
        own kind and terms. Unknown loan ids are ignored.

        Raises
        ------
        InvalidArgumentError
            If ``loan`` is None.
        InvalidLoanStateError
            If the update would mark a paid-off loan as active again.
        """
        if loan is None:
            raise InvalidArgumentError("Loan cannot be None")

        with self._lock:
            existing = self.repository.find_by_id(loan.loan_id)
            if existing is None:
                logger.warning("Ignoring update for unknown loan %s", loan.loan_id)
                return
            if existing.is_paid_off and not loan.is_paid_off:
                raise InvalidLoanStateError(
                    f"Loan {loan.loan_id} is paid off and cannot be reopened"
                )

            self.repository.upsert(replace(existing, status=loan.status))

        logger.info("Updated payoff status of loan %s", loan.loan_id)

    def monthly_payment_for(self, car_id: int) -> Decimal | None:
        """Monthly payment of the retail loan on ``car_id``, if there is one."""
        loan = self.repository.find_by_car_id(car_id)
        if loan is None or loan.kind is not LoanKind.RETAIL:
            return None
        return monthly_payment(loan)

    def termination_fee_for(self, car_id: int) -> Decimal | None:
        """Early termination fee of the lease on ``car_id`` as of now, if there is one."""
        loan = self.repository.find_by_car_id(car_id)
        if loan is None or loan.kind is not LoanKind.LEASE:
            return None
        return early_termination_fee(loan, self.clock())
