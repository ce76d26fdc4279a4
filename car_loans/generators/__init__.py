"""Synthetic fleet generators."""

from car_loans.generators.fleet import CarGenerator, LoanRecordGenerator, OwnerGenerator

__all__ = ["CarGenerator", "LoanRecordGenerator", "OwnerGenerator"]
