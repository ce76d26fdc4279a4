"""Domain models for vehicle loans and leases."""

from car_loans.models.enums import LoanKind
from car_loans.models.loan import LeaseTerms, LoanRecord, LoanTerms, PayoffStatus, RetailTerms
from car_loans.models.vehicle import Car, Owner

__all__ = [
    "Car",
    "LeaseTerms",
    "LoanKind",
    "LoanRecord",
    "LoanTerms",
    "Owner",
    "PayoffStatus",
    "RetailTerms",
]
