"""Enumeration types for loan entities."""

from enum import Enum


class LoanKind(str, Enum):
    RETAIL = "Retail"
    LEASE = "Lease"
