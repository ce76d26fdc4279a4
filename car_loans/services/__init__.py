"""Services exposed to the presentation layer."""

from car_loans.services.loan_service import LoanService

__all__ = ["LoanService"]
