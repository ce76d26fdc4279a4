#!/usr/bin/env python3
"""Print each owner's cars with loan figures, optionally recording a payoff.

Data is bootstrapped from the environment configuration (see
``CarLoanConfig.from_env``) and lives only for the duration of the run.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from car_loans.config import CarLoanConfig
from car_loans.exceptions import InvalidArgumentError
from car_loans.logging import setup_logging
from car_loans.models import LoanKind
from car_loans.seed import load_stores
from car_loans.services import LoanService
from car_loans.sinks import JsonFileSink
from car_loans.store import LoanRepository, VehicleDirectory

logger = logging.getLogger(__name__)


def print_report(directory: VehicleDirectory, service: LoanService) -> None:
    """Print one block per owner listing their cars and loan figures."""
    for owner in directory.owners.values():
        print(f"\n{owner.full_name} ({owner.username})")
        print("-" * 60)
        for car in directory.cars_for_owner(owner.owner_id):
            loan = service.get_by_car_id(car.car_id)
            if loan is None:
                print(f"  [{car.car_id}] {car.display_name}: no loan")
                continue

            if loan.is_paid_off:
                detail = f"paid off by {loan.paid_off_by} on {loan.paid_off_date:%Y-%m-%d}"
            elif loan.kind is LoanKind.RETAIL:
                detail = f"monthly payment {service.monthly_payment_for(car.car_id):.2f}"
            else:
                detail = f"early termination fee {service.termination_fee_for(car.car_id):.2f}"

            print(
                f"  [{car.car_id}] {car.display_name}: {loan.kind.value}, "
                f"payoff {loan.payoff_amount:.2f}, {detail}"
            )


def export(directory: VehicleDirectory, repository: LoanRepository, sink: JsonFileSink) -> None:
    """Write owners, cars and loans to JSON files."""
    sink.write_batch("owners", list(directory.owners.values()))
    sink.write_batch("cars", list(directory.cars.values()))
    sink.write_batch("loans", repository.all())


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Report on vehicle loans and record payoffs")
    parser.add_argument(
        "--payoff",
        type=int,
        metavar="CAR_ID",
        help="Car whose loan should be marked as paid off",
    )
    parser.add_argument(
        "--payer",
        type=str,
        help="Name of the person paying off the loan (required with --payoff)",
    )
    parser.add_argument(
        "--owner",
        type=str,
        help="Only allow --payoff for cars owned by this username",
    )
    parser.add_argument(
        "--export",
        action="store_true",
        help="Write owners, cars and loans as JSON to OUTPUT_DIR",
    )
    args = parser.parse_args(argv)

    if args.payer is not None and args.payoff is None:
        parser.error("--payer requires --payoff")

    config = CarLoanConfig.from_env()
    setup_logging(config.log_level, config.log_format)

    directory, repository = load_stores(config.seed_data)
    service = LoanService(repository)

    if args.payoff is not None:
        if args.owner is not None:
            owner = directory.find_owner_by_username(args.owner)
            if owner is None or args.payoff not in directory.car_ids_for_owner(owner.owner_id):
                parser.error(f"car {args.payoff} is not owned by {args.owner}")
        try:
            paid = service.payoff(args.payoff, args.payer)
        except InvalidArgumentError as exc:
            parser.error(str(exc))
        if paid:
            print(f"Loan for car {args.payoff} marked as paid off")
        else:
            print(f"No active loan found for car {args.payoff}")

    print_report(directory, service)

    if args.export:
        sink = JsonFileSink(config.output.json_output_dir, pretty=config.output.pretty_json)
        export(directory, repository, sink)
        logger.info("Export summary: %s", sink.summary())


if __name__ == "__main__":
    main()
