"""Owner, car and loan generators for growing a demo fleet."""

from __future__ import annotations

import itertools
import random
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Iterator

from car_loans.generators.base import BaseGenerator
from car_loans.models import (
    Car,
    LeaseTerms,
    LoanKind,
    LoanRecord,
    Owner,
    PayoffStatus,
    RetailTerms,
)

# Characters allowed in a VIN (no I, O or Q)
VIN_CHARS = "ABCDEFGHJKLMNPRSTUVWXYZ0123456789"


class OwnerGenerator(BaseGenerator):
    """Generate synthetic vehicle owners."""

    def __init__(self, seed: int | None = None, start_id: int = 1) -> None:
        super().__init__(seed)
        self._ids = itertools.count(start_id)

    def generate(self) -> Owner:
        """Generate a single owner.

        Returns
        -------
        Owner
            Generated owner.
        """
        first = self.fake.first_name()
        last = self.fake.last_name()
        owner_id = next(self._ids)
        return Owner(
            owner_id=owner_id,
            username=f"{first.lower()}{owner_id}",
            full_name=f"{first} {last}",
        )

    def generate_batch(self, count: int) -> Iterator[Owner]:
        """Generate multiple owners."""
        for _ in range(count):
            yield self.generate()


class CarGenerator(BaseGenerator):
    """Generate synthetic cars for an owner."""

    CATALOGUE = {
        "Tesla": ["Model 3", "Model Y"],
        "BMW": ["330i", "X3"],
        "Toyota": ["Prius", "Camry", "RAV4"],
        "Ford": ["F-150", "Mustang"],
        "Audi": ["Q5", "Q7"],
        "Honda": ["Accord", "Civic"],
        "Lexus": ["RX 350", "ES 300h"],
    }

    def __init__(self, seed: int | None = None, start_id: int = 1) -> None:
        super().__init__(seed)
        self._ids = itertools.count(start_id)

    def generate(self, owner_id: int, now: datetime | None = None) -> Car:
        """Generate a car owned by ``owner_id``."""
        year_now = (now or datetime.now()).year
        make = random.choice(list(self.CATALOGUE))
        return Car(
            car_id=next(self._ids),
            make=make,
            model=random.choice(self.CATALOGUE[make]),
            year=random.randint(year_now - 6, year_now),
            vin=self.vin(),
            owner_id=owner_id,
        )

    def vin(self) -> str:
        """Return a random 17-character VIN."""
        return "".join(random.choice(VIN_CHARS) for _ in range(17))


class LoanRecordGenerator(BaseGenerator):
    """Generate synthetic retail loans and leases."""

    INTEREST_RATES = ["0", "1.9", "2.9", "3.25", "3.5", "4.2", "4.75", "5.9"]
    RETAIL_TERMS = [36, 48, 60, 72, 84]
    LEASE_TERMS = [24, 36, 39, 48]

    def __init__(
        self,
        seed: int | None = None,
        start_id: int = 1,
        lease_rate: float = 0.35,
        paid_off_rate: float = 0.15,
    ) -> None:
        super().__init__(seed)
        self._ids = itertools.count(start_id)
        self.lease_rate = lease_rate
        self.paid_off_rate = paid_off_rate

    def generate(self, car_id: int, now: datetime | None = None) -> LoanRecord:
        """Generate a loan for ``car_id``.

        Parameters
        ----------
        car_id : int
            Financed car.
        now : datetime | None
            Reference time for start and payoff dates (default: now).

        Returns
        -------
        LoanRecord
            Generated loan, already paid off in ``paid_off_rate`` of cases.
        """
        now = now or datetime.now()
        kind = LoanKind.LEASE if random.random() < self.lease_rate else LoanKind.RETAIL
        original_amount = Decimal(str(random.randint(15, 80) * 1000))

        terms: RetailTerms | LeaseTerms
        if kind is LoanKind.RETAIL:
            terms = RetailTerms(
                interest_rate=Decimal(random.choice(self.INTEREST_RATES)),
                term_in_months=random.choice(self.RETAIL_TERMS),
            )
            term_months = terms.term_in_months
        else:
            residual_share = Decimal(str(round(random.uniform(0.45, 0.6), 2)))
            terms = LeaseTerms(
                monthly_payment=Decimal(str(random.randint(25, 90) * 10)),
                lease_term_months=random.choice(self.LEASE_TERMS),
                residual_value=(original_amount * residual_share).quantize(Decimal("1")),
            )
            term_months = terms.lease_term_months

        months_in = random.randint(1, term_months)
        start_date = now - timedelta(days=30 * months_in)

        return LoanRecord(
            loan_id=next(self._ids),
            car_id=car_id,
            original_amount=original_amount,
            start_date=start_date,
            terms=terms,
            status=self._status(original_amount, term_months, months_in, start_date, now),
        )

    def _status(
        self,
        original_amount: Decimal,
        term_months: int,
        months_in: int,
        start_date: datetime,
        now: datetime,
    ) -> PayoffStatus:
        if random.random() < self.paid_off_rate:
            days_active = max((now - start_date).days, 1)
            return PayoffStatus(
                payoff_amount=Decimal("0"),
                is_paid_off=True,
                paid_off_by=self.fake.name(),
                paid_off_date=start_date + timedelta(days=random.randint(1, days_active)),
            )

        # Straight-line balance estimate; no amortization schedule is kept
        remaining = original_amount * (term_months - months_in) / term_months
        return PayoffStatus(payoff_amount=remaining.quantize(Decimal("0.01")))
