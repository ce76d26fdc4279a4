"""Custom exception hierarchy for car-loans."""


class CarLoanError(Exception):
    """Base exception for all car-loans errors."""


class InvalidArgumentError(CarLoanError, ValueError):
    """Raised when a caller supplies a missing or malformed argument."""


class InvalidLoanStateError(CarLoanError):
    """Raised when a loan's payoff status is inconsistent or would regress."""


class EntityNotFoundError(CarLoanError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a foreign key reference is violated."""


class ConfigurationError(CarLoanError):
    """Raised when configuration is invalid or missing."""
