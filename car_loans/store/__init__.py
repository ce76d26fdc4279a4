"""In-memory stores for loans and vehicle ownership."""

from car_loans.store.loans import LoanRepository
from car_loans.store.vehicles import VehicleDirectory

__all__ = ["LoanRepository", "VehicleDirectory"]
