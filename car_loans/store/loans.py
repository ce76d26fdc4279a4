"""In-memory loan repository keyed by loan id and car id."""

from dataclasses import dataclass, field

from car_loans.exceptions import InvalidArgumentError
from car_loans.models import LoanKind, LoanRecord


@dataclass
class LoanRepository:
    """In-memory collection of loan records.

    Records are kept in insertion order and looked up by linear scan; the
    repository holds tens of loans, not millions. Stored records are frozen,
    so ``upsert`` swaps a whole record at once.
    """

    _records: list[LoanRecord] = field(default_factory=list)

    def add(self, record: LoanRecord) -> None:
        """Add a new loan record (seed and bootstrap only)."""
        if self.find_by_id(record.loan_id) is not None:
            raise InvalidArgumentError(f"Loan {record.loan_id} already exists")
        self._records.append(record)

    def find_by_car_id(self, car_id: int) -> LoanRecord | None:
        """Get the first loan financing a car, if any."""
        return next((r for r in self._records if r.car_id == car_id), None)

    def find_by_id(self, loan_id: int) -> LoanRecord | None:
        """Get a loan by its id, if present."""
        return next((r for r in self._records if r.loan_id == loan_id), None)

    def upsert(self, record: LoanRecord) -> bool:
        """Replace the stored record with the same loan id.

        Returns
        -------
        bool
            True if a record was replaced, False if the id is unknown.
        """
        for idx, existing in enumerate(self._records):
            if existing.loan_id == record.loan_id:
                self._records[idx] = record
                return True
        return False

    def all(self) -> list[LoanRecord]:
        """Return a snapshot of all loans in insertion order."""
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def summary(self) -> dict[str, int]:
        """Return summary counts of stored loans."""
        paid_off = sum(1 for r in self._records if r.is_paid_off)
        return {
            "loans": len(self._records),
            "active": len(self._records) - paid_off,
            "paid_off": paid_off,
            "retail": sum(1 for r in self._records if r.kind is LoanKind.RETAIL),
            "lease": sum(1 for r in self._records if r.kind is LoanKind.LEASE),
        }
