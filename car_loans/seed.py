"""Bootstrap data for the loan core.

The demo dataset has two owners and nine cars. Eight cars are financed
(cars 3 and 8 already paid off); car 9 was bought outright and has no loan.
Start dates are expressed in 30-day months before ``now``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from decimal import Decimal

from car_loans.config import SeedConfig
from car_loans.generators import CarGenerator, LoanRecordGenerator, OwnerGenerator
from car_loans.models import Car, LeaseTerms, LoanRecord, Owner, PayoffStatus, RetailTerms
from car_loans.store import LoanRepository, VehicleDirectory

logger = logging.getLogger(__name__)


def _months_ago(now: datetime, months: int) -> datetime:
    return now - timedelta(days=30 * months)


def demo_owners() -> list[Owner]:
    """Return the demo owners."""
    return [
        Owner(owner_id=1, username="john", full_name="John Doe"),
        Owner(owner_id=2, username="jane", full_name="Jane Smith"),
    ]


def demo_cars() -> list[Car]:
    """Return the demo cars."""
    return [
        # John's cars
        Car(car_id=1, make="Tesla", model="Model 3", year=2023, vin="5YJ3E1EA5PF123456", owner_id=1),
        Car(car_id=2, make="BMW", model="330i", year=2022, vin="WBA5R1C05NDT12345", owner_id=1),
        Car(car_id=3, make="Toyota", model="Prius", year=2024, vin="JTDKARFP8P3123456", owner_id=1),
        Car(car_id=4, make="Ford", model="F-150", year=2021, vin="1FTFW1E84MFC12345", owner_id=1),
        # Jane's cars
        Car(car_id=5, make="Audi", model="Q7", year=2023, vin="WA1LMAF71PD123456", owner_id=2),
        Car(car_id=6, make="Mercedes-Benz", model="C-Class", year=2022, vin="55SWF8DB5NU123456", owner_id=2),
        Car(car_id=7, make="Lexus", model="RX 350", year=2024, vin="2T2BZMCA8PC123456", owner_id=2),
        Car(car_id=8, make="Honda", model="Accord", year=2020, vin="1HGCV1F36LA123456", owner_id=2),
        Car(car_id=9, make="Porsche", model="Macan", year=2023, vin="WP1AB2A59PLB12345", owner_id=2),
    ]


def demo_loans(now: datetime) -> list[LoanRecord]:
    """Return the demo loans with dates relative to ``now``."""
    return [
        LoanRecord(
            loan_id=1,
            car_id=1,
            original_amount=Decimal("52000"),
            start_date=_months_ago(now, 8),
            terms=RetailTerms(interest_rate=Decimal("3.25"), term_in_months=72),
            status=PayoffStatus(payoff_amount=Decimal("44200")),
        ),
        LoanRecord(
            loan_id=2,
            car_id=2,
            original_amount=Decimal("48000"),
            start_date=_months_ago(now, 14),
            terms=LeaseTerms(
                monthly_payment=Decimal("525"),
                lease_term_months=36,
                residual_value=Decimal("28000"),
            ),
            status=PayoffStatus(payoff_amount=Decimal("35000")),
        ),
        LoanRecord(
            loan_id=3,
            car_id=3,
            original_amount=Decimal("28000"),
            start_date=_months_ago(now, 24),
            terms=RetailTerms(interest_rate=Decimal("2.9"), term_in_months=60),
            status=PayoffStatus(
                payoff_amount=Decimal("0"),
                is_paid_off=True,
                paid_off_by="John Doe",
                paid_off_date=now - timedelta(days=15),
            ),
        ),
        LoanRecord(
            loan_id=4,
            car_id=4,
            original_amount=Decimal("65000"),
            start_date=_months_ago(now, 6),
            terms=RetailTerms(interest_rate=Decimal("4.75"), term_in_months=84),
            status=PayoffStatus(payoff_amount=Decimal("58900")),
        ),
        LoanRecord(
            loan_id=5,
            car_id=5,
            original_amount=Decimal("72000"),
            start_date=_months_ago(now, 10),
            terms=LeaseTerms(
                monthly_payment=Decimal("775"),
                lease_term_months=39,
                residual_value=Decimal("42000"),
            ),
            status=PayoffStatus(payoff_amount=Decimal("52000")),
        ),
        LoanRecord(
            loan_id=6,
            car_id=6,
            original_amount=Decimal("42000"),
            start_date=_months_ago(now, 36),
            terms=RetailTerms(interest_rate=Decimal("3.5"), term_in_months=60),
            status=PayoffStatus(payoff_amount=Decimal("12800")),
        ),
        LoanRecord(
            loan_id=7,
            car_id=7,
            original_amount=Decimal("55000"),
            start_date=_months_ago(now, 3),
            terms=LeaseTerms(
                monthly_payment=Decimal("625"),
                lease_term_months=36,
                residual_value=Decimal("32000"),
            ),
            status=PayoffStatus(payoff_amount=Decimal("51000")),
        ),
        LoanRecord(
            loan_id=8,
            car_id=8,
            original_amount=Decimal("32000"),
            start_date=_months_ago(now, 48),
            terms=RetailTerms(interest_rate=Decimal("4.2"), term_in_months=60),
            status=PayoffStatus(
                payoff_amount=Decimal("0"),
                is_paid_off=True,
                paid_off_by="Jane Smith",
                paid_off_date=_months_ago(now, 12),
            ),
        ),
    ]


def load_stores(
    config: SeedConfig | None = None,
    now: datetime | None = None,
) -> tuple[VehicleDirectory, LoanRepository]:
    """Build fresh stores from the demo dataset and any synthetic fleet.

    Parameters
    ----------
    config : SeedConfig | None
        Which data to load (default: demo data only).
    now : datetime | None
        Reference time for relative dates (default: now).

    Returns
    -------
    tuple[VehicleDirectory, LoanRepository]
        Populated ownership directory and loan repository.
    """
    config = config or SeedConfig()
    now = now or datetime.now()

    directory = VehicleDirectory()
    repository = LoanRepository()

    if config.use_demo_data:
        for owner in demo_owners():
            directory.add_owner(owner)
        for car in demo_cars():
            directory.add_car(car)
        for loan in demo_loans(now):
            repository.add(loan)

    if config.synthetic_owners > 0:
        _add_synthetic_fleet(directory, repository, config, now)

    logger.info(
        "Loaded %d owners, %d cars and %d loans",
        len(directory.owners),
        len(directory.cars),
        len(repository),
    )
    return directory, repository


def _add_synthetic_fleet(
    directory: VehicleDirectory,
    repository: LoanRepository,
    config: SeedConfig,
    now: datetime,
) -> None:
    next_owner_id = max(directory.owners, default=0) + 1
    next_car_id = max(directory.cars, default=0) + 1
    next_loan_id = max((r.loan_id for r in repository.all()), default=0) + 1

    owner_gen = OwnerGenerator(seed=config.seed, start_id=next_owner_id)
    car_gen = CarGenerator(seed=config.seed, start_id=next_car_id)
    loan_gen = LoanRecordGenerator(seed=config.seed, start_id=next_loan_id)

    for owner in owner_gen.generate_batch(config.synthetic_owners):
        directory.add_owner(owner)
        for _ in range(config.cars_per_owner):
            car = car_gen.generate(owner.owner_id, now)
            directory.add_car(car)
            repository.add(loan_gen.generate(car.car_id, now))
